"""
Unit tests for JWTStrategy.

Tests bearer token extraction, verification and user resolution.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from starlette.requests import Request

from token_auth.application.interfaces.services import TokenPayload
from token_auth.application.services.jwt_strategy import JWTStrategy
from token_auth.domain.exceptions import (
    AuthenticationException,
    InvalidTokenException,
    UserLookupException,
)
from token_auth.infrastructure.security import JWTHandler, from_auth_header_as_bearer_token


def _request(authorization=None) -> Request:
    headers = []
    if authorization is not None:
        headers.append((b"authorization", authorization.encode("latin-1")))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def _payload(user_id: str = "u1") -> TokenPayload:
    return TokenPayload(id=user_id, exp=datetime.now(timezone.utc))


@pytest.fixture
def strategy(jwt_handler, user_repository):
    return JWTStrategy(
        token_service=jwt_handler,
        user_repository=user_repository,
        jwt_from_request=from_auth_header_as_bearer_token(),
    )


class TestVerify:
    """Test resolving a decoded payload to a user."""

    @pytest.mark.asyncio
    async def test_found_returns_user(self, strategy, user):
        """Test the fetched record is returned."""
        assert await strategy.verify(_payload("u1")) == user

    @pytest.mark.asyncio
    async def test_not_found_returns_none(self, strategy):
        """Test a missing user is reported as no user, not an error."""
        assert await strategy.verify(_payload("ghost")) is None

    @pytest.mark.asyncio
    async def test_store_error_raises_lookup_exception(self, jwt_handler):
        """Test a store failure surfaces as UserLookupException."""
        repo = AsyncMock()
        repo.get_by_id = AsyncMock(side_effect=ConnectionError("store down"))
        strategy = JWTStrategy(jwt_handler, repo, from_auth_header_as_bearer_token())

        with pytest.raises(UserLookupException) as exc_info:
            await strategy.verify(_payload("u1"))

        assert exc_info.value.status_code == 503
        assert isinstance(exc_info.value.__cause__, ConnectionError)


class TestAuthenticate:
    """Test full request authentication."""

    def test_strategy_name(self, strategy):
        assert strategy.name == "jwt"

    @pytest.mark.asyncio
    async def test_valid_token(self, strategy, jwt_handler, user):
        """Test a valid bearer token resolves to its user."""
        token = jwt_handler.create_access_token(user.id)

        assert await strategy.authenticate(_request(f"Bearer {token}")) == user

    @pytest.mark.asyncio
    async def test_missing_header(self, strategy):
        """Test a request without a token is unauthenticated."""
        with pytest.raises(AuthenticationException) as exc_info:
            await strategy.authenticate(_request())

        assert exc_info.value.status_code == 401
        assert exc_info.value.strategy == "jwt"

    @pytest.mark.asyncio
    async def test_token_for_deleted_user(self, strategy, jwt_handler):
        """Test a valid token whose subject is gone is unauthenticated."""
        token = jwt_handler.create_access_token("ghost")

        with pytest.raises(AuthenticationException) as exc_info:
            await strategy.authenticate(_request(f"Bearer {token}"))

        assert exc_info.value.message == "User not found"

    @pytest.mark.asyncio
    async def test_token_signed_with_other_secret(self, strategy, user):
        """Test a token from a different secret is rejected before lookup."""
        forged = JWTHandler(secret_key="another-secret-entirely-for-forging").create_access_token(user.id)

        with pytest.raises(InvalidTokenException) as exc_info:
            await strategy.authenticate(_request(f"Bearer {forged}"))

        assert exc_info.value.reason == "invalid_signature"

    @pytest.mark.asyncio
    async def test_lookup_skipped_for_bad_token(self, jwt_handler):
        """Test the store is not queried for tokens that fail verification."""
        repo = AsyncMock()
        strategy = JWTStrategy(jwt_handler, repo, from_auth_header_as_bearer_token())

        with pytest.raises(InvalidTokenException):
            await strategy.authenticate(_request("Bearer not.a.jwt"))

        repo.get_by_id.assert_not_called()
