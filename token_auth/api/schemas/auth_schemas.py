"""
Pydantic schemas for authentication endpoints.
"""
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    """
    User login request.

    ``password`` may be omitted; the login is then rejected with the same
    error as a wrong password.
    """

    email: EmailStr = Field(..., description="User email address")
    password: Optional[str] = Field(None, description="User password")


class TokenResponse(BaseModel):
    """Issued access token."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")


class UserResponse(BaseModel):
    """Public user profile."""

    id: str
    email: Optional[str] = None
    display_name: str
    profile: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: Optional[datetime] = None


class ErrorResponse(BaseModel):
    """Error body produced by the exception handlers."""

    error: str
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)
