"""
In-process user store.

Backs the default application and the test suite. Nothing is persisted.
"""
from typing import Dict, Iterable, Optional

from ...application.interfaces.repositories import UserRepository
from ...domain.entities.user import User


class InMemoryUserRepository(UserRepository):
    """Dictionary-backed implementation of the user store port."""

    def __init__(self, users: Optional[Iterable[User]] = None):
        self._users: Dict[str, User] = {}
        for user in users or ():
            self.add(user)

    def add(self, user: User) -> User:
        """Add or replace a user record."""
        self._users[user.id] = user
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        wanted = email.lower().strip()
        for user in self._users.values():
            if user.email and user.email.lower() == wanted:
                return user
        return None

    def __len__(self) -> int:
        return len(self._users)
