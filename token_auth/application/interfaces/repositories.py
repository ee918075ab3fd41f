"""
Repository interfaces (ports) for domain entities.

The user store is owned by another component; this service only needs
to read records from it.
"""
from abc import ABC, abstractmethod
from typing import Optional

from ...domain.entities.user import User


class UserRepository(ABC):
    """Read-only view of the user store."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User identifier (the token subject)

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: Email address (case-insensitive)

        Returns:
            User if found, None otherwise
        """
        pass
