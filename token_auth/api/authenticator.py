"""
Per-application registry of authentication strategies.

The application factory builds one ``Authenticator``, registers its
strategies with ``use()`` and attaches it to the app with
``initialize()``. Route dependencies find it again through
``request.app.state`` so no module-level registry is involved.
"""
import logging
from typing import Dict

from fastapi import FastAPI
from starlette.requests import HTTPConnection

from ..application.services.jwt_strategy import AuthStrategy
from ..domain.entities.user import User

logger = logging.getLogger(__name__)


class Authenticator:
    """Holds named strategies and runs them against requests."""

    def __init__(self) -> None:
        self._strategies: Dict[str, AuthStrategy] = {}
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def strategy_names(self) -> list[str]:
        return sorted(self._strategies)

    def use(self, strategy: AuthStrategy) -> "Authenticator":
        """
        Register a strategy under its name.

        Raises:
            RuntimeError: Called after initialize().
            ValueError: The strategy has no name or the name is taken.
        """
        if self._initialized:
            raise RuntimeError("Cannot register strategies after initialization")
        if not strategy.name:
            raise ValueError("Authentication strategies must have a name")
        if strategy.name in self._strategies:
            raise ValueError(f"Strategy '{strategy.name}' is already registered")

        self._strategies[strategy.name] = strategy
        logger.debug("Registered authentication strategy '%s'", strategy.name)
        return self

    def initialize(self, app: FastAPI) -> "Authenticator":
        """
        Attach this authenticator to an application. Runs once.

        Raises:
            RuntimeError: Already initialized, or the app already has one.
        """
        if self._initialized:
            raise RuntimeError("Authenticator is already initialized")
        if getattr(app.state, "authenticator", None) is not None:
            raise RuntimeError("Application already has an authenticator")

        app.state.authenticator = self
        self._initialized = True
        logger.info("Authentication initialized with strategies: %s", ", ".join(self.strategy_names))
        return self

    def get_strategy(self, name: str) -> AuthStrategy:
        """
        Look up a registered strategy.

        Raises:
            LookupError: No strategy has that name.
        """
        try:
            return self._strategies[name]
        except KeyError:
            raise LookupError(f"Unknown authentication strategy '{name}'") from None

    async def authenticate(self, name: str, connection: HTTPConnection) -> User:
        """Run the named strategy against a request."""
        return await self.get_strategy(name).authenticate(connection)
