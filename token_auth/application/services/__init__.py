"""
Application services.
"""
from .auth_service import AuthResult, AuthService, LoginRequest
from .jwt_strategy import AuthStrategy, JWTStrategy

__all__ = [
    'AuthResult',
    'AuthService',
    'AuthStrategy',
    'JWTStrategy',
    'LoginRequest',
]
