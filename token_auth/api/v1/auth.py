"""
Authentication API endpoints.
"""
from fastapi import APIRouter, Depends

from ..dependencies import get_auth_service, get_current_user, get_user_repository
from ..schemas.auth_schemas import (
    ErrorResponse,
    LoginRequest,
    TokenResponse,
    UserResponse,
)
from ...application.interfaces.repositories import UserRepository
from ...application.services.auth_service import (
    AuthService,
    LoginRequest as ServiceLoginRequest,
)
from ...domain.entities.user import User

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
    user_repository: UserRepository = Depends(get_user_repository),
):
    """
    Authenticate with email and password and return an access token.

    Send the token back as ``Authorization: Bearer <token>``.
    """
    result = await auth_service.login(
        ServiceLoginRequest(email=request.email, password=request.password),
        user_repository,
    )

    return TokenResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        expires_in=result.expires_in,
    )


@router.get(
    "/me",
    response_model=UserResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def get_current_user_profile(
    current_user: User = Depends(get_current_user),
):
    """
    Get current authenticated user's profile.
    """
    return UserResponse(**current_user.to_dict())
