from functools import lru_cache

from app.db import seed
from app.db.repositories.catalog_repository import CatalogRepository
from app.db.repositories.user_repository import UserRepository
from app.domains.identity.entities import User


@lru_cache
def get_catalog() -> CatalogRepository:
    """Каталог документов, загружаемый один раз на процесс"""
    return CatalogRepository(
        cabinets=seed.CABINETS,
        clients=seed.CLIENTS,
        matters=seed.MATTERS,
        documents=seed.build_documents(),
    )


@lru_cache
def get_user_repository() -> UserRepository:
    """Демонстрационные пользователи с общим паролем"""
    users = [
        User.create_user(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            password=seed.DEMO_PASSWORD,
            avatar_url=data["avatar_url"],
            role=data["role"],
            organization_id=data["organization_id"],
        )
        for data in seed.USERS
    ]
    return UserRepository(users)
