from typing import Iterable, List, Sequence

from app.domains.documents.entities import Document, DocumentType
from app.domains.documents.query import (
    Lookup, SortDirection, SortField, SortSpec, index_by_id, sort_documents
)

SEARCH_RESULT_LIMIT = 10


def search_documents(
    term: str,
    documents: Iterable[Document],
    clients: Lookup = None,
    matters: Lookup = None,
    limit: int = SEARCH_RESULT_LIMIT,
) -> List[Document]:
    """Поиск по подстроке в имени документа, клиента или дела"""
    needle = (term or "").strip().casefold()
    if not needle:
        return []

    client_index = index_by_id(clients)
    matter_index = index_by_id(matters)
    results: List[Document] = []

    for doc in documents:
        client = client_index.get(doc.client_id)
        matter = matter_index.get(doc.matter_id)
        haystacks = [doc.name, client.name if client else "", matter.name if matter else ""]
        if any(needle in value.casefold() for value in haystacks):
            results.append(doc)
            if len(results) >= limit:
                break

    return results


def recent_items(documents: Sequence[Document]) -> List[Document]:
    """Файлы, отсортированные по последней активности (новые первыми)"""
    files = [doc for doc in documents if doc.type == DocumentType.FILE]
    outcome = sort_documents(files, SortSpec(field=SortField.LAST_ACTIVE_AT, direction=SortDirection.DESC))
    return outcome.documents
