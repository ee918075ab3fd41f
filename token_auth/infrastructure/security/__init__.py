"""
Security infrastructure components.
"""
from .password_hasher import BcryptPasswordHasher
from .jwt_handler import JWTHandler
from .token_extractors import TokenExtractor, from_auth_header_as_bearer_token

__all__ = [
    'BcryptPasswordHasher',
    'JWTHandler',
    'TokenExtractor',
    'from_auth_header_as_bearer_token',
]
