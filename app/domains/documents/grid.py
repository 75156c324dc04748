import itertools
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set, Union

from app.domains.documents.entities import Document
from app.domains.documents.query import (
    DEFAULT_PAGE_SIZE, Lookup, QueryResult, Scope, SortDirection, SortField, SortSpec, query_documents
)

logger = logging.getLogger(__name__)

DEFAULT_SORT = SortSpec(field=SortField.LAST_ACTIVE_AT, direction=SortDirection.DESC)

ELLIPSIS = "ellipsis"


class RevealCursor:
    """Счетчик показанных строк для бесконечной прокрутки.

    Догрузка выполняется в два шага: request_load_more выдает билет,
    complete_load_more применяет его. Пока билет не погашен, повторные
    запросы игнорируются, поэтому перекрывающиеся сигналы видимости
    сдвигают окно не более чем на одну страницу.
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        if page_size < 1:
            raise ValueError("page_size must be a positive integer")
        self.page_size = page_size
        self.revealed = page_size
        self._tickets = itertools.count(1)
        self._pending: Optional[int] = None

    @property
    def is_loading(self) -> bool:
        return self._pending is not None

    def has_more(self, total: int) -> bool:
        return self.revealed < total

    def request_load_more(self, total: int) -> Optional[int]:
        """Начать догрузку; None если уже идет догрузка или все показано"""
        if self._pending is not None or not self.has_more(total):
            return None
        self._pending = next(self._tickets)
        return self._pending

    def complete_load_more(self, ticket: int, total: int) -> int:
        """Применить догрузку; устаревшие билеты игнорируются"""
        if ticket is None or ticket != self._pending:
            logger.debug(f"Ignoring stale load-more ticket {ticket}")
            return self.revealed
        self._pending = None
        if self.has_more(total):
            self.revealed = min(self.revealed + self.page_size, total)
        return self.revealed

    def load_more(self, total: int) -> int:
        ticket = self.request_load_more(total)
        if ticket is None:
            return self.revealed
        return self.complete_load_more(ticket, total)

    def reset(self) -> None:
        # сброс также аннулирует незавершенную догрузку
        self.revealed = self.page_size
        self._pending = None


class SelectionSet:
    """Отмеченные строки таблицы по id документа"""

    def __init__(self, ids: Iterable[str] = ()):
        self._ids: Set[str] = set(ids)

    @property
    def ids(self) -> Set[str]:
        return set(self._ids)

    def __contains__(self, document_id: str) -> bool:
        return document_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def toggle(self, document_id: str) -> bool:
        if document_id in self._ids:
            self._ids.discard(document_id)
            return False
        self._ids.add(document_id)
        return True

    def select_all(self, window: Sequence[Document]) -> None:
        """Отметить только видимые строки, а не всю выборку"""
        self._ids = {doc.id for doc in window}

    def clear(self) -> None:
        self._ids = set()

    def is_all_selected(self, window: Sequence[Document]) -> bool:
        return bool(window) and all(doc.id in self._ids for doc in window)


class GridState:
    """Состояние таблицы у вызывающей стороны: область, сортировка, окно, выбор"""

    def __init__(
        self,
        scope: Optional[Scope] = None,
        sort: SortSpec = DEFAULT_SORT,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.scope = scope or Scope()
        self.sort = sort
        self.cursor = RevealCursor(page_size)
        self.selection = SelectionSet()

    @property
    def revealed(self) -> int:
        return self.cursor.revealed

    def select_sort(self, field: SortField) -> SortSpec:
        self.sort = self.sort.toggled(field)
        self.cursor.reset()
        return self.sort

    def change_scope(self, scope: Optional[Scope]) -> None:
        self.scope = scope or Scope()
        self.cursor.reset()
        self.selection.clear()

    def query(self, documents: Sequence[Document], clients: Lookup = None, matters: Lookup = None) -> QueryResult:
        return query_documents(
            documents,
            self.scope,
            self.sort,
            clients=clients,
            matters=matters,
            revealed=self.cursor.revealed,
            page_size=self.cursor.page_size,
        )

    def load_more(self, documents: Sequence[Document], clients: Lookup = None, matters: Lookup = None) -> QueryResult:
        total = self.query(documents, clients, matters).total
        self.cursor.load_more(total)
        return self.query(documents, clients, matters)


@dataclass(frozen=True)
class RowActivation:
    document_id: str
    navigate: bool
    folder_id: Optional[str] = None


def classify_activation(document: Document) -> RowActivation:
    """Папка открывается как цель навигации, файл навигации не вызывает"""
    if document.is_folder:
        return RowActivation(document_id=document.id, navigate=True, folder_id=document.id)
    return RowActivation(document_id=document.id, navigate=False)


def total_pages(total: int, per_page: int) -> int:
    if per_page < 1:
        raise ValueError("per_page must be a positive integer")
    return -(-total // per_page)


def page_numbers(current_page: int, pages: int) -> List[Union[int, str]]:
    """Номера страниц для панели пагинации: до трех соседних, первая и последняя"""
    if pages < 1:
        return []

    start_page = max(current_page - 1, 1)
    end_page = min(start_page + 2, pages)

    if end_page - start_page + 1 < 3 and end_page > 2:
        start_page = max(end_page - 2, 1)

    numbers: List[Union[int, str]] = []
    if start_page > 1:
        numbers.append(1)
        if start_page > 2:
            numbers.append(ELLIPSIS)

    numbers.extend(range(start_page, end_page + 1))

    if end_page < pages:
        if end_page < pages - 1:
            numbers.append(ELLIPSIS)
        numbers.append(pages)

    return numbers
