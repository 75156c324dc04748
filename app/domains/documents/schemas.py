from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from app.domains.documents.entities import ActivityAction, DocumentType
from app.domains.documents.query import ScopeLevel, SortDirection, SortField


class CabinetResponse(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class ClientResponse(BaseModel):
    id: str
    name: str
    cabinet_id: str

    model_config = ConfigDict(from_attributes=True)


class MatterResponse(BaseModel):
    id: str
    name: str
    client_id: str

    model_config = ConfigDict(from_attributes=True)


class ActorResponse(BaseModel):
    id: str
    name: str
    avatar_url: str

    model_config = ConfigDict(from_attributes=True)


class ActivityResponse(BaseModel):
    action: ActivityAction
    date: str

    model_config = ConfigDict(from_attributes=True)


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: str
    name: str
    type: DocumentType
    cabinet_id: str
    client_id: str
    matter_id: str
    parent_id: Optional[str] = None
    path: str
    created_at: str
    updated_at: str
    last_active_at: str
    total_versions: int = Field(..., ge=0)
    added_by: ActorResponse
    last_modified_by: ActorResponse
    your_activity: Optional[ActivityResponse] = None

    model_config = ConfigDict(from_attributes=True)


class ColumnResponse(BaseModel):
    field: SortField
    label: str
    width: int
    wrap: bool

    model_config = ConfigDict(from_attributes=True)


class DocumentViewResponse(BaseModel):
    """Схема для видимого окна таблицы документов"""
    documents: List[DocumentResponse]
    total: int
    revealed: int
    page_size: int
    has_more: bool
    next_revealed: int
    scope: ScopeLevel
    sort_field: SortField
    sort_direction: SortDirection
    malformed_count: int = 0
    columns: List[ColumnResponse] = []


class DocumentSearchResponse(BaseModel):
    """Схема для ответа с результатами поиска"""
    documents: List[DocumentResponse]
    total_found: int
    query: str


class RowActivationResponse(BaseModel):
    document_id: str
    navigate: bool
    folder_id: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class BreadcrumbItemResponse(BaseModel):
    level: str
    id: Optional[str] = None
    name: str

    model_config = ConfigDict(from_attributes=True)


class FolderNodeResponse(BaseModel):
    id: str
    name: str
    path: str
    children: List["FolderNodeResponse"] = []


FolderNodeResponse.model_rebuild()
