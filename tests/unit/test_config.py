"""
Unit tests for settings loading.
"""
import pytest
from pydantic import ValidationError

from token_auth.config import DEFAULT_SECRET_KEY, AppSettings, JWTSettings, PasswordSettings


class TestJWTSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("JWT_SECRET_KEY", "from-the-environment")
        monkeypatch.setenv("JWT_EXPIRES_IN_SECONDS", "120")

        settings = JWTSettings()

        assert settings.secret_key == "from-the-environment"
        assert settings.expires_in_seconds == 120
        assert settings.algorithm == "HS256"

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("JWT_SECRET_KEY", raising=False)

        settings = JWTSettings()

        assert settings.secret_key == DEFAULT_SECRET_KEY
        assert settings.expires_in_seconds == 3600
        assert settings.issuer is None

    @pytest.mark.parametrize("secret", ["", "   "])
    def test_blank_secret_rejected(self, secret):
        with pytest.raises(ValidationError):
            JWTSettings(secret_key=secret)

    def test_non_positive_expiry_rejected(self):
        with pytest.raises(ValidationError):
            JWTSettings(secret_key="x", expires_in_seconds=0)


class TestPasswordSettings:
    def test_rounds_bounds(self):
        with pytest.raises(ValidationError):
            PasswordSettings(bcrypt_rounds=3)


class TestAppSettings:
    def test_production_requires_real_secret(self):
        with pytest.raises(ValidationError):
            AppSettings(
                environment="production",
                jwt=JWTSettings(secret_key=DEFAULT_SECRET_KEY),
            )

    def test_production_with_secret(self):
        settings = AppSettings(
            environment="production",
            jwt=JWTSettings(secret_key="a-real-production-secret"),
        )

        assert settings.is_production is True

    def test_log_format_normalized(self):
        assert AppSettings(log_format="JSON").log_format == "json"

    def test_log_format_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(log_format="xml")
