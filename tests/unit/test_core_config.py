"""Unit tests for Settings.

Tests cover:
- Session key validation (base64, 32 bytes)
- URL trailing slash normalization
- Log level normalization
- Secure cookie default per environment
- Detail retry count validation
"""

import base64

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.enums import Environment

KEY = base64.b64encode(b"k" * 32).decode()


def make_settings(**overrides) -> Settings:
    values = {"session_encryption_key": KEY}
    values.update(overrides)
    return Settings(**values)


@pytest.mark.unit
class TestSettings:
    """Test Settings validation and derived properties."""

    def test_session_key_bytes(self):
        assert make_settings().session_key_bytes == b"k" * 32

    def test_urlsafe_key_accepted(self):
        key = base64.urlsafe_b64encode(b"\xff" * 32).decode()

        assert make_settings(session_encryption_key=key).session_key_bytes == (
            b"\xff" * 32
        )

    def test_short_key_rejected(self):
        with pytest.raises(ValidationError, match="32 bytes"):
            make_settings(session_encryption_key=base64.b64encode(b"short").decode())

    def test_non_base64_key_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(session_encryption_key="not base64!")

    def test_urls_lose_trailing_slash(self):
        settings = make_settings(
            lockbox_api_url="https://lockbox.test/lockbox/v1/",
            api_base_url="http://localhost:8000/",
        )

        assert settings.lockbox_api_url == "https://lockbox.test/lockbox/v1"
        assert settings.api_base_url == "http://localhost:8000"

    def test_log_level_normalized(self):
        assert make_settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            make_settings(log_level="loud")

    def test_secure_cookies_follow_environment(self):
        assert make_settings(environment=Environment.PRODUCTION).secure_cookies
        assert not make_settings(environment=Environment.DEVELOPMENT).secure_cookies

    def test_secure_cookies_override(self):
        settings = make_settings(
            environment=Environment.DEVELOPMENT, cookie_secure=True
        )

        assert settings.secure_cookies

    def test_negative_retries_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(detail_load_retries=-1)

    def test_environment_checks(self):
        settings = make_settings(environment=Environment.TESTING)

        assert settings.is_testing
        assert not settings.is_development
        assert not settings.is_production
