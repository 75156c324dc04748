from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DocumentType(str, Enum):
    FILE = "file"
    FOLDER = "folder"


class ActivityAction(str, Enum):
    CREATED = "created"
    EDITED = "edited"
    VIEWED = "viewed"


@dataclass(frozen=True)
class Cabinet:
    id: str
    name: str


@dataclass(frozen=True)
class Client:
    id: str
    name: str
    cabinet_id: str


@dataclass(frozen=True)
class Matter:
    id: str
    name: str
    client_id: str


@dataclass(frozen=True)
class Actor:
    """Автор действия над документом"""
    id: str
    name: str
    avatar_url: str = ""


@dataclass(frozen=True)
class Activity:
    """Последнее действие текущего пользователя с документом"""
    action: ActivityAction
    date: str


@dataclass(frozen=True)
class Document:
    """Файл или папка в дереве кабинета.

    Временные метки хранятся строками ISO 8601 в том виде, в каком их
    прислал источник; разбор выполняется при сортировке.
    """
    id: str
    name: str
    type: DocumentType
    cabinet_id: str
    client_id: str
    matter_id: str
    parent_id: Optional[str]
    path: str
    created_at: str
    updated_at: str
    last_active_at: str
    total_versions: int
    added_by: Actor
    last_modified_by: Actor
    your_activity: Optional[Activity] = None

    @property
    def is_folder(self) -> bool:
        return self.type == DocumentType.FOLDER
