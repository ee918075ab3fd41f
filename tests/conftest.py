"""
Shared pytest fixtures.

Provides fixtures for:
- Settings with a fixed test secret
- Security components (bcrypt hasher, JWT handler)
- In-memory user store seeded with a known user
- API client (httpx over ASGI)
"""
import os

import pytest
import pytest_asyncio

# Test environment configuration
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("PASSWORD_BCRYPT_ROUNDS", "4")

from factories import UserFactory  # noqa: E402
from token_auth.application.services.auth_service import AuthService  # noqa: E402
from token_auth.config import AppSettings, JWTSettings, PasswordSettings  # noqa: E402
from token_auth.infrastructure.repositories import InMemoryUserRepository  # noqa: E402
from token_auth.infrastructure.security import BcryptPasswordHasher, JWTHandler  # noqa: E402

SECRET = "super-secret-jwt-token-for-testing-only"
PASSWORD = "secret123"


# ============================================================================
# Settings Fixtures
# ============================================================================

@pytest.fixture
def settings() -> AppSettings:
    """Application settings isolated from the developer's environment."""
    return AppSettings(
        environment="test",
        jwt=JWTSettings(secret_key=SECRET, expires_in_seconds=3600),
        password=PasswordSettings(bcrypt_rounds=4),
    )


# ============================================================================
# Security Fixtures
# ============================================================================

@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """Cheap bcrypt hasher; four rounds keeps the suite fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def jwt_handler() -> JWTHandler:
    return JWTHandler(secret_key=SECRET, expires_in_seconds=3600)


@pytest.fixture
def auth_service(password_hasher, jwt_handler) -> AuthService:
    return AuthService(
        password_hasher=password_hasher,
        token_service=jwt_handler,
        expires_in_seconds=3600,
    )


# ============================================================================
# User Store Fixtures
# ============================================================================

@pytest.fixture
def user():
    """A known user whose password is ``PASSWORD``."""
    return UserFactory(id="u1", email="jane@example.com", password=PASSWORD)


@pytest.fixture
def user_repository(user) -> InMemoryUserRepository:
    return InMemoryUserRepository([user])


# ============================================================================
# API Client Fixtures
# ============================================================================

@pytest.fixture
def app(settings, user_repository):
    """Application wired to the test settings and user store."""
    from token_auth.main import create_app

    return create_app(settings=settings, user_repository=user_repository)


@pytest_asyncio.fixture
async def api_client(app):
    """Test API client over the ASGI transport."""
    import httpx

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client
