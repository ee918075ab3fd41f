"""
Configuration management for the token authentication service.

Uses Pydantic settings for validation and environment variable support.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SECRET_KEY = 'change-this-secret-key-in-production'


class JWTSettings(BaseSettings):
    """JWT signing and verification configuration."""

    model_config = SettingsConfigDict(
        env_prefix='JWT_',
        env_file='.env',
        extra='ignore'
    )

    secret_key: str = Field(
        default=DEFAULT_SECRET_KEY,
        description='Shared secret used both to sign and to verify tokens'
    )
    algorithm: str = Field(default='HS256', description='JWT algorithm')
    expires_in_seconds: int = Field(
        default=3600,
        gt=0,
        description='Token lifetime in seconds'
    )
    issuer: Optional[str] = Field(default=None, description='JWT token issuer')
    audience: Optional[str] = Field(default=None, description='JWT token audience')

    @field_validator('secret_key')
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """An empty secret would make every token unverifiable."""
        if not v or not v.strip():
            raise ValueError('JWT secret key must not be empty')
        return v


class PasswordSettings(BaseSettings):
    """Password hashing configuration."""

    model_config = SettingsConfigDict(
        env_prefix='PASSWORD_',
        env_file='.env',
        extra='ignore'
    )

    bcrypt_rounds: int = Field(
        default=12,
        ge=4,
        le=31,
        description='bcrypt work factor'
    )


class CORSSettings(BaseSettings):
    """CORS configuration."""

    model_config = SettingsConfigDict(
        env_prefix='CORS_',
        env_file='.env',
        extra='ignore'
    )

    allowed_origins: List[str] = Field(
        default=['http://localhost:3000', 'http://localhost:5173'],
        description='Allowed origins for CORS'
    )
    allow_credentials: bool = Field(default=True)
    allowed_methods: List[str] = Field(default=['*'])
    allowed_headers: List[str] = Field(default=['*'])


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    # Application
    app_name: str = Field(default='Token Auth Service')
    app_version: str = Field(default='1.0.0')
    debug: bool = Field(default=False)
    environment: str = Field(default='development')  # development, test, production

    # Server
    host: str = Field(default='0.0.0.0')
    port: int = Field(default=8000)
    workers: int = Field(default=1)
    reload: bool = Field(default=False)

    # API
    api_prefix: str = Field(default='/api')

    # Logging
    log_level: str = Field(default='INFO')
    log_format: str = Field(default='text')  # json or text

    # Sub-settings
    jwt: JWTSettings = Field(default_factory=JWTSettings)
    password: PasswordSettings = Field(default_factory=PasswordSettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)

    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ('json', 'text'):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @model_validator(mode='after')
    def check_production_secret(self) -> 'AppSettings':
        """Refuse to run in production with the placeholder secret."""
        if self.is_production and self.jwt.secret_key == DEFAULT_SECRET_KEY:
            raise ValueError('JWT_SECRET_KEY must be set in production')
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == 'production'

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == 'development'


@lru_cache()
def get_settings() -> AppSettings:
    """
    Get cached application settings.

    Uses LRU cache to avoid re-reading environment variables on every access.
    """
    return AppSettings()
