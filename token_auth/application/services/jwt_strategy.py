"""
Bearer JWT verification strategy.

A strategy pulls a credential out of a request, verifies it and
resolves it to a user. The JWT strategy reads the bearer token,
checks its signature and expiry, then looks the ``id`` claim up in
the user store.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from starlette.requests import HTTPConnection

from ..interfaces.repositories import UserRepository
from ..interfaces.services import TokenPayload, TokenService
from ...domain.entities.user import User
from ...domain.exceptions import AuthenticationException, UserLookupException
from ...infrastructure.security.token_extractors import TokenExtractor

logger = logging.getLogger(__name__)


class AuthStrategy(ABC):
    """Base class for pluggable request authentication policies."""

    name: str = ""

    @abstractmethod
    async def authenticate(self, connection: HTTPConnection) -> User:
        """
        Resolve the request to a user.

        Raises:
            AuthenticationException: The request is not authenticated.
        """
        pass


class JWTStrategy(AuthStrategy):
    """Authenticate requests carrying a signed bearer token."""

    name = "jwt"

    def __init__(
        self,
        token_service: TokenService,
        user_repository: UserRepository,
        jwt_from_request: TokenExtractor,
    ):
        """
        Args:
            token_service: Verifies signatures and expiry with the shared secret
            user_repository: Store the token subject is resolved against
            jwt_from_request: Rule that finds the raw token in a request
        """
        self._token_service = token_service
        self._user_repository = user_repository
        self._jwt_from_request = jwt_from_request

    async def verify(self, payload: TokenPayload) -> Optional[User]:
        """
        Resolve a decoded payload to the user it names.

        Returns:
            The fetched user, or None when the store has no such user

        Raises:
            UserLookupException: The store failed.
        """
        try:
            return await self._user_repository.get_by_id(payload.id)
        except Exception as e:
            logger.exception("User lookup failed for token subject %s", payload.id)
            raise UserLookupException(payload.id, original_error=str(e)) from e

    async def authenticate(self, connection: HTTPConnection) -> User:
        token = self._jwt_from_request(connection)
        if not token:
            raise AuthenticationException("No auth token", strategy=self.name)

        payload = self._token_service.decode_token(token)
        user = await self.verify(payload)

        if user is None:
            logger.info("Token subject %s no longer exists", payload.id)
            raise AuthenticationException("User not found", strategy=self.name)

        return user
