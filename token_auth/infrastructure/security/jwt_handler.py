"""
JWT token handling implementation.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ...application.interfaces.services import TokenPayload, TokenService
from ...domain.exceptions import InvalidTokenException

logger = logging.getLogger(__name__)


class JWTHandler(TokenService):
    """
    JWT token service implementation.

    One instance holds the shared secret and is used both to sign tokens
    at login and to verify them on authenticated requests.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_in_seconds: int = 3600,
        issuer: Optional[str] = None,
        audience: Optional[str] = None,
    ):
        """
        Initialize JWT handler.

        Args:
            secret_key: Secret key for signing and verifying tokens
            algorithm: JWT signing algorithm
            expires_in_seconds: Token validity period
            issuer: Token issuer claim
            audience: Token audience claim

        Raises:
            ValueError: If no secret key is given
        """
        if not secret_key:
            raise ValueError("JWT secret key is required")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expires_in_seconds = expires_in_seconds
        self._issuer = issuer
        self._audience = audience

    @property
    def expires_in_seconds(self) -> int:
        """Lifetime of issued tokens."""
        return self._expires_in_seconds

    def create_access_token(self, user_id: str) -> str:
        """Create a signed token carrying the user id and an expiry."""
        now = datetime.now(timezone.utc)
        expires = now + timedelta(seconds=self._expires_in_seconds)

        payload = {
            "id": str(user_id),
            "iat": now,
            "exp": expires,
        }

        if self._issuer:
            payload["iss"] = self._issuer
        if self._audience:
            payload["aud"] = self._audience

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode_token(self, token: str) -> TokenPayload:
        """
        Verify and decode a token.

        Raises:
            InvalidTokenException: Token is expired, forged, malformed or
                missing the ``id`` claim.
        """
        options = {}
        if self._audience:
            options["audience"] = self._audience
        if self._issuer:
            options["issuer"] = self._issuer

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "id"]},
                **options
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            raise InvalidTokenException("expired")
        except jwt.InvalidSignatureError:
            logger.warning("Rejected token with invalid signature")
            raise InvalidTokenException("invalid_signature")
        except jwt.MissingRequiredClaimError as e:
            raise InvalidTokenException(f"missing_claim:{e.claim}")
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected malformed token: %s", e)
            raise InvalidTokenException("malformed")

        iat = payload.get("iat")
        return TokenPayload(
            id=str(payload["id"]),
            exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            iat=datetime.fromtimestamp(iat, tz=timezone.utc) if iat else None,
            claims=payload,
        )

