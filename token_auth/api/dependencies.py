"""
FastAPI dependency injection providers.

Service instances are created once by the application factory and kept
on ``app.state``; these providers hand them to route handlers.
"""
from fastapi import Request

from .authenticator import Authenticator
from ..application.interfaces.repositories import UserRepository
from ..application.services.auth_service import AuthService
from ..domain.entities.user import User


def get_user_repository(request: Request) -> UserRepository:
    """Get the user store instance."""
    return request.app.state.user_repository


def get_auth_service(request: Request) -> AuthService:
    """Get authentication service instance."""
    return request.app.state.auth_service


def get_authenticator(request: Request) -> Authenticator:
    """Get the authenticator attached at startup."""
    authenticator = getattr(request.app.state, "authenticator", None)
    if authenticator is None:
        raise RuntimeError("Authentication has not been initialized for this application")
    return authenticator


class RequireAuth:
    """
    Dependency that authenticates the request with a named strategy.

    Usage:
        @router.get("/me")
        async def me(user: User = Depends(RequireAuth("jwt"))):
            ...
    """

    def __init__(self, strategy: str = "jwt"):
        self.strategy = strategy

    async def __call__(self, request: Request) -> User:
        authenticator = get_authenticator(request)
        user = await authenticator.authenticate(self.strategy, request)
        request.state.user = user
        return user


get_current_user = RequireAuth("jwt")
