"""
API request/response schemas.
"""
from .auth_schemas import (
    ErrorResponse,
    LoginRequest,
    TokenResponse,
    UserResponse,
)

__all__ = [
    'ErrorResponse',
    'LoginRequest',
    'TokenResponse',
    'UserResponse',
]
