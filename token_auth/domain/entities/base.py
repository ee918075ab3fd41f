"""
Base classes for domain entities.
These are pure Python classes with no external dependencies.
"""
from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4


def utc_now() -> datetime:
    """Return current UTC timestamp."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Generate a new entity identifier."""
    return str(uuid4())


@dataclass
class Entity(ABC):
    """
    Base class for all entities.

    Entities are identified by their ID, not by their attributes.
    Identifiers are opaque strings so that records owned by an external
    store keep whatever key format that store uses.
    """
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: Optional[datetime] = field(default=None)

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID."""
        if not isinstance(other, Entity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash(self.id)

