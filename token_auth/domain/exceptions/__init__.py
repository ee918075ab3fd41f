# Domain Exceptions
from .domain_exceptions import (
    DomainException,
    ValidationException,
    AuthenticationException,
    InvalidCredentialsException,
    InvalidTokenException,
    UserLookupException,
)

__all__ = [
    'DomainException',
    'ValidationException',
    'AuthenticationException',
    'InvalidCredentialsException',
    'InvalidTokenException',
    'UserLookupException',
]
