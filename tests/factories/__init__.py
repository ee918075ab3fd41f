"""
Test data factories.
"""
from .user_factory import UserFactory

__all__ = [
    "UserFactory",
]
