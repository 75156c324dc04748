from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from app.domains.documents.entities import Document
from app.domains.documents.query import Scope, ScopeLevel, SortField, parse_timestamp

MIN_COLUMN_WIDTH = 20
MOBILE_BREAKPOINT = 640


class Viewport(str, Enum):
    MOBILE = "mobile"
    DESKTOP = "desktop"

    @classmethod
    def from_width(cls, width: int) -> "Viewport":
        return cls.MOBILE if width < MOBILE_BREAKPOINT else cls.DESKTOP


@dataclass(frozen=True)
class Column:
    field: SortField
    label: str
    width: int
    wrap: bool = False


DEFAULT_WIDTHS: Dict[SortField, int] = {
    SortField.NAME: 200,
    SortField.TOTAL_VERSIONS: 100,
    SortField.CLIENT: 200,
    SortField.MATTER: 200,
    SortField.ADDED_BY: 200,
    SortField.LAST_MODIFIED_BY: 200,
    SortField.LAST_ACTIVE_AT: 150,
}


class ColumnWidths:
    """Пользовательские ширины столбцов с нижней границей"""

    def __init__(self, min_width: int = MIN_COLUMN_WIDTH):
        self.min_width = min_width
        self._widths: Dict[SortField, int] = {}

    def get(self, field: SortField) -> int:
        return self._widths.get(field, DEFAULT_WIDTHS[field])

    def resize(self, field: SortField, delta: int) -> int:
        new_width = max(self.min_width, self.get(field) + delta)
        self._widths[field] = new_width
        return new_width

    def as_dict(self) -> Dict[str, int]:
        return {field.value: width for field, width in self._widths.items()}


def column_profile(viewport: Viewport, scope: Optional[Scope] = None, widths: Optional[ColumnWidths] = None) -> List[Column]:
    """Набор столбцов в зависимости от ширины экрана и уровня области"""
    widths = widths or ColumnWidths()
    level = (scope or Scope()).level

    def column(field: SortField, label: str, wrap: bool = False) -> Column:
        return Column(field=field, label=label, width=widths.get(field), wrap=wrap)

    if viewport == Viewport.MOBILE:
        return [column(SortField.NAME, "Name", wrap=True)]

    if level == ScopeLevel.MATTER:
        return [
            column(SortField.NAME, "Name", wrap=True),
            column(SortField.TOTAL_VERSIONS, "Versions"),
            column(SortField.ADDED_BY, "Added By", wrap=True),
            column(SortField.LAST_MODIFIED_BY, "Last Modified By", wrap=True),
            column(SortField.LAST_ACTIVE_AT, "Date Modified"),
        ]
    if level == ScopeLevel.CLIENT:
        return [
            column(SortField.NAME, "Name", wrap=True),
            column(SortField.TOTAL_VERSIONS, "Versions"),
            column(SortField.MATTER, "Matter", wrap=True),
            column(SortField.LAST_ACTIVE_AT, "Your Activity"),
        ]
    return [
        column(SortField.NAME, "Name", wrap=True),
        column(SortField.TOTAL_VERSIONS, "Versions"),
        column(SortField.CLIENT, "Client", wrap=True),
        column(SortField.MATTER, "Matter", wrap=True),
        column(SortField.LAST_ACTIVE_AT, "Your Activity"),
    ]


def format_activity(document: Document) -> str:
    """Например "edited Mar 4"; "-" если активности нет или дата битая"""
    activity = document.your_activity
    if activity is None:
        return "-"
    try:
        date: datetime = parse_timestamp(activity.date)
    except ValueError:
        return "-"
    action = getattr(activity.action, "value", activity.action)
    return f"{action} {date.strftime('%b')} {date.day}"
