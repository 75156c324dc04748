import logging
from typing import Optional, Tuple, TYPE_CHECKING

from app.core.security import create_access_token, verify_token
from app.domains.identity.entities import User
from app.domains.identity.schemas import UserLogin

if TYPE_CHECKING:
    from app.db.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class IdentityService:
    """Сервис для аутентификации пользователей"""

    def __init__(self, user_repository: "UserRepository"):
        self.user_repository = user_repository

    def authenticate_user(self, login_data: UserLogin) -> Optional[User]:
        """Аутентификация пользователя"""
        user = self.user_repository.get_by_email(login_data.email)

        if not user or not user.is_active:
            return None

        if not user.authenticate(login_data.password):
            return None

        return user

    def login_user(self, login_data: UserLogin) -> Optional[Tuple[str, User]]:
        """Вход пользователя и создание JWT токена"""
        user = self.authenticate_user(login_data)

        if not user:
            logger.info(f"Failed login attempt for {login_data.email}")
            return None

        token = create_access_token(data={"sub": user.id})
        logger.info(f"User {user.id} logged in")

        return token, user

    def get_current_user_from_token(self, token: str) -> Optional[User]:
        """Получение текущего пользователя из JWT токена"""
        payload = verify_token(token)

        if payload is None:
            logger.debug("Rejected invalid or expired token")
            return None

        user_id = payload.get("sub")
        if not user_id:
            return None

        user = self.user_repository.get_by_id(str(user_id))

        if user is None or not user.is_active:
            return None

        return user
