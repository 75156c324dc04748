from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.db import get_user_repository
from app.db.repositories.user_repository import UserRepository
from app.domains.identity.entities import User
from app.domains.identity.services import IdentityService

security = HTTPBearer(auto_error=False)


def get_identity_service(
    user_repository: UserRepository = Depends(get_user_repository),
) -> IdentityService:
    return IdentityService(user_repository)


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    identity_service: IdentityService = Depends(get_identity_service),
) -> Optional[User]:
    """Пользователь из bearer-токена или None"""
    if credentials is None:
        return None
    return identity_service.get_current_user_from_token(credentials.credentials)


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Зависимость для получения текущего пользователя"""
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
