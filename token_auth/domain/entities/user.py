"""
User domain entity.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .base import Entity
from ..exceptions import ValidationException


@dataclass(eq=False)
class User(Entity):
    """
    User record as seen by the authentication layer.

    The record is owned by an external store; this layer only reads it.
    ``profile`` carries whatever extra fields the store keeps.
    """
    email: Optional[str] = None
    password_hash: str = ""
    display_name: Optional[str] = None
    profile: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate user data on construction."""
        self._validate()

    def _validate(self) -> None:
        """Validate user data."""
        errors = {}

        if not self.id:
            errors['id'] = ['User id is required']

        if errors:
            raise ValidationException(
                message="Invalid user data",
                errors=errors
            )

    @property
    def name(self) -> str:
        """Return the display name, falling back to the email local part, then the id."""
        if self.display_name:
            return self.display_name
        if self.email:
            return self.email.split('@', 1)[0]
        return self.id

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the public part of the record (never the hash)."""
        return {
            'id': self.id,
            'email': self.email,
            'display_name': self.name,
            'profile': dict(self.profile),
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }
