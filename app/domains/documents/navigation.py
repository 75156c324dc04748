from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from app.domains.documents.entities import Cabinet, Client, Document, Matter

RECENT_LIMIT = 5


@dataclass(frozen=True)
class BreadcrumbItem:
    level: str
    id: Optional[str]
    name: str


def folder_hierarchy(folder: Document, documents: Iterable[Document]) -> List[Document]:
    """Цепочка папок от корня до folder.

    Обход останавливается на отсутствующем родителе или при повторном
    посещении папки.
    """
    by_id: Dict[str, Document] = {doc.id: doc for doc in documents}
    hierarchy = [folder]
    seen = {folder.id}
    current = folder

    while current.parent_id:
        parent = by_id.get(current.parent_id)
        if parent is None or parent.id in seen:
            break
        hierarchy.insert(0, parent)
        seen.add(parent.id)
        current = parent

    return hierarchy


def build_breadcrumb(
    documents: Iterable[Document],
    cabinet: Optional[Cabinet] = None,
    client: Optional[Client] = None,
    matter: Optional[Matter] = None,
    folder: Optional[Document] = None,
) -> List[BreadcrumbItem]:
    items = [BreadcrumbItem(level="home", id=None, name="Home")]
    if cabinet:
        items.append(BreadcrumbItem(level="cabinet", id=cabinet.id, name=cabinet.name))
    if client:
        items.append(BreadcrumbItem(level="client", id=client.id, name=client.name))
    if matter:
        items.append(BreadcrumbItem(level="matter", id=matter.id, name=matter.name))
    if folder:
        for node in folder_hierarchy(folder, documents):
            items.append(BreadcrumbItem(level="folder", id=node.id, name=node.name))
    return items


def folder_tree(
    documents: Iterable[Document],
    cabinet_id: Optional[str] = None,
    matter_id: Optional[str] = None,
) -> Dict[Optional[str], List[Document]]:
    """Папки боковой панели, сгруппированные по родителю (корень под ключом None)"""
    if matter_id:
        folders = [doc for doc in documents if doc.is_folder and doc.matter_id == matter_id]
    elif cabinet_id:
        folders = [doc for doc in documents if doc.is_folder and doc.cabinet_id == cabinet_id]
    else:
        return {}

    tree: Dict[Optional[str], List[Document]] = {}
    for folder in folders:
        tree.setdefault(folder.parent_id, []).append(folder)
    return tree


def clients_for_cabinet(clients: Iterable[Client], cabinet_id: Optional[str]) -> List[Client]:
    return [client for client in clients if not cabinet_id or client.cabinet_id == cabinet_id]


def matters_for_client(matters: Iterable[Matter], client_id: Optional[str]) -> List[Matter]:
    return [matter for matter in matters if not client_id or matter.client_id == client_id]


def recent_clients(clients: Iterable[Client], cabinet_id: str, limit: int = RECENT_LIMIT) -> List[Client]:
    return [client for client in clients if client.cabinet_id == cabinet_id][:limit]


def recent_matters(
    matters: Iterable[Matter],
    clients: Sequence[Client],
    cabinet_id: str,
    limit: int = RECENT_LIMIT,
) -> List[Matter]:
    cabinet_clients = {client.id for client in clients if client.cabinet_id == cabinet_id}
    return [matter for matter in matters if matter.client_id in cabinet_clients][:limit]
