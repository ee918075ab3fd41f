"""
External service interfaces (ports).

These interfaces define contracts for the hashing and token
libraries that the application depends on.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


class PasswordHasher(ABC):
    """Interface for password hashing service."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plain text password."""
        pass

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against its hash."""
        pass


@dataclass(frozen=True)
class TokenPayload:
    """Decoded token claims."""
    id: str  # Subject (user ID)
    exp: datetime  # Expiration time
    iat: Optional[datetime] = None  # Issued at time
    claims: Optional[Dict[str, Any]] = None


class TokenService(ABC):
    """Interface for JWT token service."""

    @abstractmethod
    def create_access_token(self, user_id: str) -> str:
        """Create a new signed access token for the user."""
        pass

    @abstractmethod
    def decode_token(self, token: str) -> TokenPayload:
        """Decode and validate a token, raising on any failure."""
        pass
