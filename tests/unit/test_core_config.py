"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from src.core.config import Settings, settings
from src.core.enums import Environment


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.mark.unit
class TestSettings:
    def test_test_environment_is_pinned(self):
        assert settings.environment == Environment.TESTING
        assert settings.is_testing
        assert not settings.is_production
        assert settings.bcrypt_rounds == 4
        assert settings.auth_throttle_enabled is False

    def test_defaults(self):
        config = _settings()

        assert config.app_version == "1.0"
        assert config.verification_expire_minutes == 60
        assert config.password_reset_expire_minutes == 60
        assert config.password_reset_throttle_seconds == 60
        assert config.password_reset_revokes_tokens is False
        assert config.frontend_email_verify_url == "/verify-email?url="
        assert config.auth_throttle_max_attempts == 6
        assert config.auth_throttle_decay_seconds == 60

    def test_environment_from_env(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")

        assert _settings().is_production

    def test_frontend_url_trailing_slash_removed(self):
        assert _settings(frontend_url="https://app.example.com/").frontend_url == (
            "https://app.example.com"
        )

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_bcrypt_rounds_bounds(self, rounds):
        with pytest.raises(ValidationError, match="bcrypt_rounds"):
            _settings(bcrypt_rounds=rounds)

    @pytest.mark.parametrize(
        "field",
        [
            "verification_expire_minutes",
            "password_reset_expire_minutes",
            "auth_throttle_max_attempts",
            "auth_throttle_decay_seconds",
        ],
    )
    def test_windows_must_be_positive(self, field):
        with pytest.raises(ValidationError, match="positive"):
            _settings(**{field: 0})
