from app.domains.identity.entities import User
from app.domains.identity.schemas import UserLogin, UserResponse, AuthPayload
from app.domains.identity.services import IdentityService

__all__ = [
    "User",
    "UserLogin", "UserResponse", "AuthPayload",
    "IdentityService"
]
