# Domain Entities
from .base import Entity, utc_now
from .user import User

__all__ = [
    'Entity',
    'User',
    'utc_now',
]
