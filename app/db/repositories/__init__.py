from app.db.repositories.user_repository import UserRepository
from app.db.repositories.catalog_repository import CatalogRepository

__all__ = [
    "UserRepository",
    "CatalogRepository"
]
