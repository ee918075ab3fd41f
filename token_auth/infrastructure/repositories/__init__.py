"""
User store adapters.
"""
from .memory_user_repository import InMemoryUserRepository

__all__ = ['InMemoryUserRepository']
