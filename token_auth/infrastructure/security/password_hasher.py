"""
Password hashing implementation using bcrypt.
"""
import bcrypt

from ...application.interfaces.services import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """Bcrypt implementation of password hasher."""

    def __init__(self, rounds: int = 12):
        """
        Initialize hasher with work factor.

        Args:
            rounds: Number of bcrypt rounds
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')

    def verify(self, password: str, hashed: str) -> bool:
        """
        Verify a password against a hash.

        ``bcrypt.checkpw`` compares in constant time. A hash that bcrypt
        cannot parse counts as a mismatch rather than an error.
        """
        if not password or not hashed:
            return False
        try:
            return bcrypt.checkpw(password.encode('utf-8'), hashed.encode('utf-8'))
        except (ValueError, TypeError):
            return False
