"""
Domain Exceptions - Custom exceptions for authentication errors.

Each exception kind carries the HTTP status it maps to so that the API
layer can translate it without inspecting messages.
"""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    All domain exceptions should inherit from this class to allow
    for consistent error handling across the application.
    """

    status_code: int = 400

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            'error': self.code,
            'message': self.message,
            'details': self.details
        }


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Can contain multiple validation errors for different fields.
    """

    status_code = 422

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[Dict[str, list]] = None
    ):
        self.errors = errors or {}
        super().__init__(
            message=message,
            code='VALIDATION_ERROR',
            details={'validation_errors': self.errors}
        )


class InvalidCredentialsException(DomainException):
    """
    Raised when a login attempt does not match a user and password.

    The message is user-facing and deliberately does not say which of
    the two was wrong.
    """

    status_code = 422
    DEFAULT_MESSAGE = "The provided username or password is incorrect"

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(
            message=message,
            code='INVALID_CREDENTIALS',
        )


class AuthenticationException(DomainException):
    """Raised when a request cannot be tied to an authenticated user."""

    status_code = 401

    def __init__(
        self,
        message: str = "Not authenticated",
        strategy: Optional[str] = None,
        code: str = 'NOT_AUTHENTICATED',
        details: Optional[Dict[str, Any]] = None,
    ):
        details = dict(details or {})
        if strategy:
            details['strategy'] = strategy
        self.strategy = strategy
        super().__init__(message=message, code=code, details=details)


class InvalidTokenException(AuthenticationException):
    """Raised when a bearer token is malformed, forged or expired."""

    def __init__(self, reason: str, message: str = "Invalid or expired token"):
        self.reason = reason
        super().__init__(
            message=message,
            code='INVALID_TOKEN',
            details={'reason': reason},
        )


class UserLookupException(DomainException):
    """Raised when the user store fails while resolving a token subject."""

    status_code = 503

    def __init__(
        self,
        user_id: str,
        original_error: Optional[str] = None
    ):
        self.user_id = user_id
        super().__init__(
            message="User lookup failed",
            code='USER_LOOKUP_ERROR',
            details={
                'original_error': original_error
            }
        )
