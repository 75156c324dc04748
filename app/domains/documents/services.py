import logging
from typing import Dict, List, Optional, TYPE_CHECKING

from app.domains.documents.columns import Viewport, column_profile
from app.domains.documents.entities import Document
from app.domains.documents.grid import RowActivation, classify_activation
from app.domains.documents.navigation import BreadcrumbItem, build_breadcrumb, folder_tree
from app.domains.documents.query import (
    DEFAULT_PAGE_SIZE, QueryResult, Scope, ScopedDocumentView, SortSpec
)
from app.domains.documents.schemas import (
    ColumnResponse, DocumentResponse, DocumentViewResponse, FolderNodeResponse
)
from app.domains.documents.search import SEARCH_RESULT_LIMIT, recent_items, search_documents

if TYPE_CHECKING:
    from app.db.repositories.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


class DocumentService:
    """Сервис для просмотра документов каталога"""

    def __init__(
        self,
        catalog: "CatalogRepository",
        page_size: int = DEFAULT_PAGE_SIZE,
        search_limit: int = SEARCH_RESULT_LIMIT,
    ):
        self.catalog = catalog
        self.page_size = page_size
        self.search_limit = search_limit

    def get_document(self, document_id: str) -> Optional[Document]:
        """Получение документа по id"""
        return self.catalog.get_document(document_id)

    def query(
        self,
        scope: Scope,
        sort: SortSpec,
        revealed: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> QueryResult:
        """Отфильтрованное и отсортированное окно документов"""
        view = ScopedDocumentView(
            self.catalog.documents,
            clients=self.catalog.clients,
            matters=self.catalog.matters,
            page_size=page_size or self.page_size,
        )
        result = view.query(scope, sort, revealed)
        logger.debug(f"Query {scope.level.value} by {sort.field.value} {sort.direction.value}: {result.total} document(s)")

        return result

    def view(
        self,
        scope: Scope,
        sort: SortSpec,
        revealed: Optional[int] = None,
        page_size: Optional[int] = None,
        viewport: Optional[Viewport] = None,
    ) -> DocumentViewResponse:
        """Окно таблицы вместе с параметрами для следующей догрузки"""
        page_size = page_size or self.page_size
        result = self.query(scope, sort, revealed, page_size)

        if result.has_more:
            next_revealed = min(result.revealed + page_size, result.total)
        else:
            next_revealed = result.revealed

        columns = column_profile(viewport, scope) if viewport else []

        return DocumentViewResponse(
            documents=[DocumentResponse.model_validate(doc) for doc in result.items],
            total=result.total,
            revealed=result.revealed,
            page_size=page_size,
            has_more=result.has_more,
            next_revealed=next_revealed,
            scope=scope.level,
            sort_field=sort.field,
            sort_direction=sort.direction,
            malformed_count=result.malformed_count,
            columns=[ColumnResponse.model_validate(column) for column in columns],
        )

    def search(self, term: str) -> List[Document]:
        """Поиск документов для окна быстрого поиска"""
        return search_documents(
            term,
            self.catalog.documents,
            clients=self.catalog.clients,
            matters=self.catalog.matters,
            limit=self.search_limit,
        )

    def recent(self, limit: Optional[int] = None) -> List[Document]:
        """Недавние файлы для главной страницы"""
        items = recent_items(self.catalog.documents)
        return items[:limit] if limit else items

    def activate(self, document_id: str) -> Optional[RowActivation]:
        """Классификация строки: папка открывается, файл нет"""
        document = self.catalog.get_document(document_id)
        if document is None:
            return None
        return classify_activation(document)

    def breadcrumb(
        self,
        cabinet_id: Optional[str] = None,
        client_id: Optional[str] = None,
        matter_id: Optional[str] = None,
        folder_id: Optional[str] = None,
    ) -> List[BreadcrumbItem]:
        """Путь навигации от корня до текущей области"""
        folder = self.catalog.get_document(folder_id) if folder_id else None
        return build_breadcrumb(
            self.catalog.documents,
            cabinet=self.catalog.get_cabinet(cabinet_id) if cabinet_id else None,
            client=self.catalog.get_client(client_id) if client_id else None,
            matter=self.catalog.get_matter(matter_id) if matter_id else None,
            folder=folder if folder is not None and folder.is_folder else None,
        )

    def folder_tree(
        self,
        cabinet_id: Optional[str] = None,
        matter_id: Optional[str] = None,
    ) -> List[FolderNodeResponse]:
        """Дерево папок боковой панели"""
        grouped = folder_tree(self.catalog.documents, cabinet_id=cabinet_id, matter_id=matter_id)
        return _build_nodes(grouped, None, set())


def _build_nodes(
    grouped: Dict[Optional[str], List[Document]],
    parent_id: Optional[str],
    visited: set,
) -> List[FolderNodeResponse]:
    nodes = []
    for folder in grouped.get(parent_id, []):
        if folder.id in visited:
            continue
        visited.add(folder.id)
        nodes.append(
            FolderNodeResponse(
                id=folder.id,
                name=folder.name,
                path=folder.path,
                children=_build_nodes(grouped, folder.id, visited),
            )
        )
    return nodes
