from typing import Dict, Iterable, List, Optional

from app.domains.identity.entities import User


class UserRepository:
    """Репозиторий пользователей в памяти"""

    def __init__(self, users: Iterable[User] = ()):
        self._users: Dict[str, User] = {}
        for user in users:
            self.add(user)

    def add(self, user: User) -> User:
        """Добавление пользователя"""
        if self.email_exists(user.email):
            raise ValueError("User with this email already exists")
        self._users[user.id] = user
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        """Получение пользователя по id"""
        return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """Получение пользователя по email (без учета регистра)"""
        needle = email.lower()
        for user in self._users.values():
            if user.email.lower() == needle:
                return user
        return None

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def get_all(self) -> List[User]:
        return list(self._users.values())
