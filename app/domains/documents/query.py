"""Выборка документов для таблицы: фильтр по области, сортировка, окно показа.

Все функции модуля чистые: коллекции передаются целиком при каждом вызове,
между вызовами ничего не кешируется.
"""
import logging
import unicodedata
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import TypeAdapter, ValidationError

from app.domains.documents.entities import Client, Document, Matter

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20

# Нераспознанные даты сортируются как самые старые
EARLIEST = datetime.min.replace(tzinfo=timezone.utc)

_DATETIME = TypeAdapter(datetime)


class ScopeLevel(str, Enum):
    FOLDER = "folder"
    MATTER = "matter"
    CLIENT = "client"
    CABINET = "cabinet"
    ALL = "all"


class SortField(str, Enum):
    NAME = "name"
    TOTAL_VERSIONS = "totalVersions"
    CLIENT = "client"
    MATTER = "matter"
    LAST_ACTIVE_AT = "lastActiveAt"
    ADDED_BY = "addedBy"
    LAST_MODIFIED_BY = "lastModifiedBy"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self == SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class Scope:
    """Текущая область просмотра.

    Применяется только самое специфичное из заданных условий:
    папка > дело > клиент > кабинет. Пустые строки считаются отсутствием
    условия.
    """
    folder_id: Optional[str] = None
    matter_id: Optional[str] = None
    client_id: Optional[str] = None
    cabinet_id: Optional[str] = None

    @classmethod
    def of_folder(cls, folder: Document) -> "Scope":
        return cls(folder_id=folder.id)

    @property
    def level(self) -> ScopeLevel:
        if self.folder_id:
            return ScopeLevel.FOLDER
        if self.matter_id:
            return ScopeLevel.MATTER
        if self.client_id:
            return ScopeLevel.CLIENT
        if self.cabinet_id:
            return ScopeLevel.CABINET
        return ScopeLevel.ALL

    def matches(self, document: Document) -> bool:
        level = self.level
        if level == ScopeLevel.FOLDER:
            # только непосредственные потомки папки
            return document.parent_id == self.folder_id
        if level == ScopeLevel.MATTER:
            return document.matter_id == self.matter_id
        if level == ScopeLevel.CLIENT:
            return document.client_id == self.client_id
        if level == ScopeLevel.CABINET:
            return document.cabinet_id == self.cabinet_id
        return True


@dataclass(frozen=True)
class SortSpec:
    field: SortField
    direction: SortDirection = SortDirection.ASC

    def toggled(self, field: SortField) -> "SortSpec":
        """Повторный выбор поля меняет направление, новое поле сортируется по возрастанию"""
        if field == self.field:
            return SortSpec(field=self.field, direction=self.direction.flipped())
        return SortSpec(field=field, direction=SortDirection.ASC)


@dataclass(frozen=True)
class SortOutcome:
    documents: List[Document]
    malformed_ids: Tuple[str, ...] = ()


@dataclass(frozen=True)
class QueryResult:
    """Видимое окно отсортированной выборки"""
    items: List[Document]
    total: int
    revealed: int
    malformed_ids: Tuple[str, ...] = field(default=())

    @property
    def has_more(self) -> bool:
        return len(self.items) < self.total

    @property
    def malformed_count(self) -> int:
        return len(self.malformed_ids)


Lookup = Union[Mapping[str, Client], Mapping[str, Matter], Iterable[Client], Iterable[Matter], None]


def index_by_id(items: Lookup) -> Dict[str, Union[Client, Matter]]:
    if items is None:
        return {}
    if isinstance(items, Mapping):
        return dict(items)
    return {item.id: item for item in items}


def text_key(value: Optional[str]) -> str:
    """Ключ для сравнения строк без учета регистра и диакритики"""
    if not value:
        return ""
    decomposed = unicodedata.normalize("NFKD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def parse_timestamp(value: Optional[str]) -> datetime:
    """Разбор даты ISO 8601; наивные значения считаются UTC.

    Raises:
        ValueError: если значение пустое или не распознано
    """
    if not value or not isinstance(value, str):
        raise ValueError(f"Missing timestamp: {value!r}")

    try:
        parsed = _DATETIME.validate_python(value.strip())
    except ValidationError as exc:
        raise ValueError(f"Invalid timestamp: {value!r}") from exc

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def filter_documents(documents: Iterable[Document], scope: Optional[Scope] = None) -> List[Document]:
    """Документы, попадающие в область; порядок входа сохраняется"""
    scope = scope or Scope()
    return [doc for doc in documents if scope.matches(doc)]


def sort_documents(
    documents: Sequence[Document],
    sort: SortSpec,
    clients: Lookup = None,
    matters: Lookup = None,
) -> SortOutcome:
    """Устойчивая сортировка по одному полю.

    Записи с равными ключами сохраняют исходный порядок в обоих
    направлениях. Битые даты не прерывают сортировку: такие записи
    становятся самыми старыми и возвращаются в malformed_ids.
    """
    malformed: List[str] = []

    if sort.field == SortField.NAME:
        key = lambda doc: text_key(doc.name)
    elif sort.field == SortField.TOTAL_VERSIONS:
        key = lambda doc: doc.total_versions
    elif sort.field == SortField.CLIENT:
        client_index = index_by_id(clients)
        key = lambda doc: text_key(_name_of(client_index.get(doc.client_id)))
    elif sort.field == SortField.MATTER:
        matter_index = index_by_id(matters)
        key = lambda doc: text_key(_name_of(matter_index.get(doc.matter_id)))
    elif sort.field == SortField.ADDED_BY:
        key = lambda doc: text_key(doc.added_by.name if doc.added_by else "")
    elif sort.field == SortField.LAST_MODIFIED_BY:
        key = lambda doc: text_key(doc.last_modified_by.name if doc.last_modified_by else "")
    elif sort.field == SortField.LAST_ACTIVE_AT:
        def key(doc: Document) -> datetime:
            try:
                return parse_timestamp(doc.last_active_at)
            except ValueError:
                malformed.append(doc.id)
                return EARLIEST
    else:
        raise ValueError(f"Unsupported sort field: {sort.field}")

    # sorted вычисляет ключ ровно один раз для каждого элемента
    ordered = sorted(documents, key=key, reverse=sort.direction == SortDirection.DESC)

    if malformed:
        logger.warning(f"{len(malformed)} document(s) have unparseable lastActiveAt: {', '.join(malformed[:5])}")

    return SortOutcome(documents=ordered, malformed_ids=tuple(malformed))


def query_documents(
    documents: Iterable[Document],
    scope: Optional[Scope],
    sort: SortSpec,
    clients: Lookup = None,
    matters: Lookup = None,
    revealed: Optional[int] = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> QueryResult:
    """Фильтр, сортировка и окно первых revealed записей"""
    if page_size < 1:
        raise ValueError("page_size must be a positive integer")
    if revealed is None:
        revealed = page_size
    if revealed < 0:
        raise ValueError("revealed must be a non-negative integer")

    filtered = filter_documents(documents, scope)
    outcome = sort_documents(filtered, sort, clients, matters)

    window = outcome.documents[:revealed]
    logger.debug(
        f"Query scope={(scope or Scope()).level.value} sort={sort.field.value}/{sort.direction.value} "
        f"matched={len(filtered)} revealed={len(window)}"
    )

    return QueryResult(
        items=window,
        total=len(filtered),
        revealed=revealed,
        malformed_ids=outcome.malformed_ids,
    )


class ScopedDocumentView:
    """Представление коллекции документов с поиском имен клиентов и дел.

    Не хранит состояния между запросами кроме ссылок на переданные
    коллекции.
    """

    def __init__(
        self,
        documents: Sequence[Document],
        clients: Lookup = None,
        matters: Lookup = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.documents = documents
        self.clients = index_by_id(clients)
        self.matters = index_by_id(matters)
        self.page_size = page_size

    def query(self, scope: Optional[Scope], sort: SortSpec, revealed: Optional[int] = None) -> QueryResult:
        return query_documents(
            self.documents,
            scope,
            sort,
            clients=self.clients,
            matters=self.matters,
            revealed=revealed,
            page_size=self.page_size,
        )

    def count(self, scope: Optional[Scope]) -> int:
        return len(filter_documents(self.documents, scope))


def _name_of(record: Optional[Union[Client, Matter]]) -> str:
    return record.name if record is not None else ""
