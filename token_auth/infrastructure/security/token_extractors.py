"""
Rules for pulling a raw token out of an incoming request.
"""
from typing import Callable, Optional

from fastapi.security.utils import get_authorization_scheme_param
from starlette.requests import HTTPConnection

TokenExtractor = Callable[[HTTPConnection], Optional[str]]


def from_auth_header_as_bearer_token() -> TokenExtractor:
    """
    Build an extractor that reads ``Authorization: Bearer <token>``.

    The scheme match is case-insensitive. Any other scheme, an empty
    token or a missing header yields None.
    """

    def extract(connection: HTTPConnection) -> Optional[str]:
        authorization = connection.headers.get("Authorization")
        scheme, credentials = get_authorization_scheme_param(authorization)
        if scheme.lower() != "bearer" or not credentials:
            return None
        return credentials

    return extract
