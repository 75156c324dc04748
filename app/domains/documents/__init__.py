from app.domains.documents.entities import (
    Activity, ActivityAction, Actor, Cabinet, Client, Document, DocumentType, Matter
)
from app.domains.documents.query import (
    QueryResult, Scope, ScopeLevel, ScopedDocumentView, SortDirection, SortField, SortSpec,
    filter_documents, query_documents, sort_documents
)
from app.domains.documents.grid import GridState, RevealCursor, SelectionSet, classify_activation
from app.domains.documents.services import DocumentService

__all__ = [
    "Activity", "ActivityAction", "Actor", "Cabinet", "Client", "Document", "DocumentType", "Matter",
    "QueryResult", "Scope", "ScopeLevel", "ScopedDocumentView", "SortDirection", "SortField", "SortSpec",
    "filter_documents", "query_documents", "sort_documents",
    "GridState", "RevealCursor", "SelectionSet", "classify_activation",
    "DocumentService"
]
