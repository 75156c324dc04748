from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.auth import get_identity_service, get_optional_user
from app.domains.identity.entities import User
from app.domains.identity.schemas import AuthPayload, UserLogin, UserResponse
from app.domains.identity.services import IdentityService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/login", response_model=AuthPayload)
async def login(
    login_data: UserLogin,
    identity_service: IdentityService = Depends(get_identity_service)
):
    """Вход пользователя"""
    result = identity_service.login_user(login_data)

    if not result:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token, user = result
    return AuthPayload(token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=Optional[UserResponse])
async def me(user: Optional[User] = Depends(get_optional_user)):
    """Текущий пользователь по токену или null"""
    if user is None:
        return None
    return UserResponse.model_validate(user)
