"""
FastAPI application entry point.

Builds the application with:
- Bearer JWT authentication registered as the "jwt" strategy
- Password login that issues signed access tokens
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.authenticator import Authenticator
from .application.interfaces.repositories import UserRepository
from .application.services.auth_service import AuthService
from .application.services.jwt_strategy import JWTStrategy
from .config import AppSettings, get_settings
from .infrastructure.repositories import InMemoryUserRepository
from .infrastructure.security import (
    BcryptPasswordHasher,
    JWTHandler,
    from_auth_header_as_bearer_token,
)
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan handler.

    Manages startup and shutdown tasks.
    """
    settings: AppSettings = app.state.settings
    configure_logging(settings.log_level, settings.log_format)

    logger.info("Starting %s v%s", settings.app_name, settings.app_version)
    logger.info("Environment: %s", settings.environment)

    yield

    logger.info("Shutdown complete")


def create_app(
    settings: Optional[AppSettings] = None,
    user_repository: Optional[UserRepository] = None,
) -> FastAPI:
    """
    Application factory.

    Creates and configures the FastAPI application. The token handler is
    built once from ``settings.jwt`` and shared by the login service and
    the JWT strategy, so signing and verification use the same secret.

    Args:
        settings: Application settings, defaults to the environment
        user_repository: User store, defaults to an empty in-memory store
    """
    settings = settings or get_settings()
    if user_repository is None:
        user_repository = InMemoryUserRepository()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Bearer JWT authentication and token issuance",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    jwt_handler = JWTHandler(
        secret_key=settings.jwt.secret_key,
        algorithm=settings.jwt.algorithm,
        expires_in_seconds=settings.jwt.expires_in_seconds,
        issuer=settings.jwt.issuer,
        audience=settings.jwt.audience,
    )
    password_hasher = BcryptPasswordHasher(rounds=settings.password.bcrypt_rounds)

    app.state.settings = settings
    app.state.user_repository = user_repository
    app.state.jwt_handler = jwt_handler
    app.state.auth_service = AuthService(
        password_hasher=password_hasher,
        token_service=jwt_handler,
        expires_in_seconds=settings.jwt.expires_in_seconds,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
    )

    register_authentication(app, jwt_handler, user_repository)
    register_exception_handlers(app, settings)
    register_routes(app, settings)

    return app


def register_authentication(
    app: FastAPI,
    jwt_handler: JWTHandler,
    user_repository: UserRepository,
) -> Authenticator:
    """Register the bearer JWT strategy and attach the authenticator."""
    strategy = JWTStrategy(
        token_service=jwt_handler,
        user_repository=user_repository,
        jwt_from_request=from_auth_header_as_bearer_token(),
    )
    return Authenticator().use(strategy).initialize(app)


def register_exception_handlers(app: FastAPI, settings: AppSettings) -> None:
    """Register global exception handlers."""

    from .domain.exceptions import (
        AuthenticationException,
        DomainException,
        UserLookupException,
    )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(AuthenticationException)
    async def authentication_handler(request: Request, exc: AuthenticationException):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=exc.to_dict(),
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(UserLookupException)
    async def user_lookup_handler(request: Request, exc: UserLookupException):
        content = exc.to_dict()
        if not settings.debug:
            content['details'] = {}
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=content,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)

        if settings.debug:
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    'error': 'INTERNAL_ERROR',
                    'message': str(exc),
                    'type': type(exc).__name__,
                },
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                'error': 'INTERNAL_ERROR',
                'message': 'An internal error occurred',
            },
        )


def register_routes(app: FastAPI, settings: AppSettings) -> None:
    """Register API routes."""

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Check application health."""
        return {
            'status': 'healthy',
            'authentication': app.state.authenticator.strategy_names,
            'version': settings.app_version,
            'environment': settings.environment,
        }

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        return {
            'name': settings.app_name,
            'version': settings.app_version,
            'api_docs': '/docs' if settings.debug else None,
        }

    from .api.v1 import api_router

    # Mount API under the configured prefix
    main_router = APIRouter(prefix=settings.api_prefix)
    main_router.include_router(api_router)

    app.include_router(main_router)


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "token_auth.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.reload,
        workers=_settings.workers,
    )
