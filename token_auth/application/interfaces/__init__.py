"""
Application interfaces (ports).
"""
from .repositories import UserRepository
from .services import PasswordHasher, TokenPayload, TokenService

__all__ = [
    'PasswordHasher',
    'TokenPayload',
    'TokenService',
    'UserRepository',
]
