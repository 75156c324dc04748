from typing import Dict, List, Optional, Sequence

from app.domains.documents.entities import Cabinet, Client, Document, Matter


class CatalogRepository:
    """Репозиторий кабинетов, клиентов, дел и документов в памяти.

    Коллекции неизменяемы после создания; порядок документов сохраняется
    таким, каким он был передан.
    """

    def __init__(
        self,
        cabinets: Sequence[Cabinet] = (),
        clients: Sequence[Client] = (),
        matters: Sequence[Matter] = (),
        documents: Sequence[Document] = (),
    ):
        self._cabinets = tuple(cabinets)
        self._clients = tuple(clients)
        self._matters = tuple(matters)
        self._documents = tuple(documents)
        self._documents_by_id: Dict[str, Document] = {doc.id: doc for doc in self._documents}

    @property
    def cabinets(self) -> List[Cabinet]:
        return list(self._cabinets)

    @property
    def clients(self) -> List[Client]:
        return list(self._clients)

    @property
    def matters(self) -> List[Matter]:
        return list(self._matters)

    @property
    def documents(self) -> List[Document]:
        return list(self._documents)

    def get_document(self, document_id: str) -> Optional[Document]:
        return self._documents_by_id.get(document_id)

    def get_cabinet(self, cabinet_id: str) -> Optional[Cabinet]:
        return next((cabinet for cabinet in self._cabinets if cabinet.id == cabinet_id), None)

    def get_client(self, client_id: str) -> Optional[Client]:
        return next((client for client in self._clients if client.id == client_id), None)

    def get_matter(self, matter_id: str) -> Optional[Matter]:
        return next((matter for matter in self._matters if matter.id == matter_id), None)
