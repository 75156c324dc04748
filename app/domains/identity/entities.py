from typing import Optional

from app.core.security import get_password_hash, verify_password


class User:
    """Сущность пользователя домена Identity"""

    def __init__(
        self,
        id: str,
        name: str,
        email: str,
        password_hash: str,
        avatar_url: str = "",
        role: str = "",
        organization_id: Optional[str] = None,
        is_active: bool = True,
    ):
        self.id = id
        self.name = name
        self.email = email
        self.password_hash = password_hash
        self.avatar_url = avatar_url
        self.role = role
        self.organization_id = organization_id
        self.is_active = is_active

    def authenticate(self, password: str) -> bool:
        """Проверка пароля пользователя"""
        return verify_password(password, self.password_hash)

    def deactivate(self) -> None:
        """Деактивация пользователя"""
        self.is_active = False

    @classmethod
    def create_user(
        cls,
        id: str,
        name: str,
        email: str,
        password: str,
        avatar_url: str = "",
        role: str = "",
        organization_id: Optional[str] = None,
    ) -> "User":
        """Создание нового пользователя с хешированием пароля"""
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=get_password_hash(password),
            avatar_url=avatar_url,
            role=role,
            organization_id=organization_id,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, name={self.name})"
