from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.core.auth import get_current_user
from app.core.config import settings
from app.core.db import get_catalog
from app.db.repositories.catalog_repository import CatalogRepository
from app.domains.documents.columns import Viewport
from app.domains.documents.query import Scope, SortDirection, SortField, SortSpec
from app.domains.documents.schemas import (
    BreadcrumbItemResponse, DocumentResponse, DocumentSearchResponse,
    DocumentViewResponse, FolderNodeResponse, RowActivationResponse
)
from app.domains.documents.services import DocumentService

router = APIRouter(tags=["documents"], dependencies=[Depends(get_current_user)])


def get_document_service(catalog: CatalogRepository = Depends(get_catalog)) -> DocumentService:
    return DocumentService(
        catalog,
        page_size=settings.page_size,
        search_limit=settings.search_result_limit,
    )


@router.get("/documents", response_model=DocumentViewResponse)
async def view_documents(
    folder_id: Optional[str] = Query(None),
    matter_id: Optional[str] = Query(None),
    client_id: Optional[str] = Query(None),
    cabinet_id: Optional[str] = Query(None),
    sort_field: SortField = Query(SortField.LAST_ACTIVE_AT),
    sort_direction: SortDirection = Query(SortDirection.DESC),
    revealed: Optional[int] = Query(None, ge=0),
    page_size: Optional[int] = Query(None, ge=1, le=200),
    viewport: Optional[Viewport] = Query(None),
    document_service: DocumentService = Depends(get_document_service)
):
    """Видимое окно документов текущей области"""
    scope = Scope(
        folder_id=folder_id,
        matter_id=matter_id,
        client_id=client_id,
        cabinet_id=cabinet_id,
    )
    sort = SortSpec(field=sort_field, direction=sort_direction)

    return document_service.view(scope, sort, revealed=revealed, page_size=page_size, viewport=viewport)


@router.get("/documents/search", response_model=DocumentSearchResponse)
async def search_documents(
    q: str = Query("", max_length=100),
    document_service: DocumentService = Depends(get_document_service)
):
    """Поиск документов по имени документа, клиента или дела"""
    documents = document_service.search(q)

    return DocumentSearchResponse(
        documents=[DocumentResponse.model_validate(doc) for doc in documents],
        total_found=len(documents),
        query=q.strip()
    )


@router.get("/documents/recent", response_model=List[DocumentResponse])
async def recent_documents(
    limit: Optional[int] = Query(None, ge=1, le=500),
    document_service: DocumentService = Depends(get_document_service)
):
    """Недавние файлы"""
    return [DocumentResponse.model_validate(doc) for doc in document_service.recent(limit)]


@router.get("/documents/breadcrumb", response_model=List[BreadcrumbItemResponse])
async def breadcrumb(
    cabinet_id: Optional[str] = Query(None),
    client_id: Optional[str] = Query(None),
    matter_id: Optional[str] = Query(None),
    folder_id: Optional[str] = Query(None),
    document_service: DocumentService = Depends(get_document_service)
):
    """Путь навигации для текущего выбора"""
    items = document_service.breadcrumb(
        cabinet_id=cabinet_id,
        client_id=client_id,
        matter_id=matter_id,
        folder_id=folder_id
    )
    return [BreadcrumbItemResponse.model_validate(item) for item in items]


@router.get("/documents/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    document_service: DocumentService = Depends(get_document_service)
):
    """Получение документа по id"""
    document = document_service.get_document(document_id)

    if not document:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )

    return DocumentResponse.model_validate(document)


@router.get("/documents/{document_id}/activation", response_model=RowActivationResponse)
async def activate_document(
    document_id: str,
    document_service: DocumentService = Depends(get_document_service)
):
    """Что делать при открытии строки: папка открывается, файл нет"""
    activation = document_service.activate(document_id)

    if not activation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )

    return RowActivationResponse.model_validate(activation)


@router.get("/folders/tree", response_model=List[FolderNodeResponse])
async def folder_tree(
    cabinet_id: Optional[str] = Query(None),
    matter_id: Optional[str] = Query(None),
    document_service: DocumentService = Depends(get_document_service)
):
    """Дерево папок кабинета или дела"""
    return document_service.folder_tree(cabinet_id=cabinet_id, matter_id=matter_id)
