"""
Authentication application service.

Checks login credentials and issues signed access tokens.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from starlette.concurrency import run_in_threadpool

from ..interfaces.repositories import UserRepository
from ..interfaces.services import PasswordHasher, TokenService
from ...domain.entities.user import User
from ...domain.exceptions import InvalidCredentialsException

logger = logging.getLogger(__name__)


@dataclass
class LoginRequest:
    """User login request data."""
    email: str = ""
    password: Optional[str] = None


@dataclass
class AuthResult:
    """Result of a successful login."""
    user: User
    access_token: str
    expires_in: int
    token_type: str = "Bearer"


class AuthService:
    """
    Authentication service handling password checks and token issuance.
    """

    def __init__(
        self,
        password_hasher: PasswordHasher,
        token_service: TokenService,
        expires_in_seconds: int = 3600,
    ):
        self._password_hasher = password_hasher
        self._token_service = token_service
        self._expires_in_seconds = expires_in_seconds

    def create_user_token(self, request: LoginRequest, user: Optional[User]) -> str:
        """
        Verify the submitted password and mint a token for the user.

        Args:
            request: Login data; only ``password`` is read
            user: Record the caller resolved for the login, or None

        Returns:
            Signed token string

        Raises:
            InvalidCredentialsException: No user, no password, or a
                password that does not match the stored hash.
        """
        valid_password = False
        if request.password and user is not None:
            valid_password = self._password_hasher.verify(request.password, user.password_hash)

        if user is None or not valid_password:
            raise InvalidCredentialsException()

        return self._token_service.create_access_token(user.id)

    async def login(
        self,
        request: LoginRequest,
        user_repository: UserRepository,
    ) -> AuthResult:
        """
        Resolve the user by email and issue a token.

        The bcrypt comparison runs in the threadpool so it does not block
        the event loop.

        Args:
            request: Login credentials
            user_repository: Store used to look up the user

        Returns:
            AuthResult with the token on success
        """
        user = await user_repository.get_by_email(request.email.lower().strip())

        try:
            token = await run_in_threadpool(self.create_user_token, request, user)
        except InvalidCredentialsException:
            logger.info("Failed login for %s", request.email)
            raise

        logger.info("Login: %s (%s)", user.name, user.id)
        return AuthResult(
            user=user,
            access_token=token,
            expires_in=self._expires_in_seconds,
        )
