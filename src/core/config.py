"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Upstream endpoints default to the Yandex Cloud KZ region

Usage:
    from src.core.config import settings

    lockbox_url = settings.lockbox_api_url
    if settings.is_production:
        # Production-only behavior
"""

import base64
import binascii
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Lockbox Console",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # API configuration
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Public base URL of this service (used in Problem Details type URIs)",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API v1 route prefix",
    )

    # Upstream cloud endpoints
    iam_token_url: str = Field(
        default="https://iam.api.yandexcloud.kz/iam/v1/tokens",
        description="Identity exchange endpoint (credential -> access token)",
    )
    lockbox_api_url: str = Field(
        default="https://cpl.lockbox.api.yandexcloud.kz/lockbox/v1",
        description="Lockbox control-plane base URL",
    )
    lockbox_payload_api_url: str = Field(
        default="https://dpl.lockbox.api.yandexcloud.kz/lockbox/v1",
        description="Lockbox data-plane (payload) base URL",
    )
    resource_manager_api_url: str = Field(
        default="https://resource-manager.api.yandexcloud.kz/resource-manager/v1",
        description="Resource Manager base URL (clouds, folders)",
    )
    kms_api_url: str = Field(
        default="https://cpl.kms.api.yandexcloud.kz/kms/v1",
        description="KMS control-plane base URL",
    )
    upstream_timeout: float = Field(
        default=30.0,
        description="HTTP timeout for upstream calls in seconds",
    )

    # Session / token lifecycle
    session_encryption_key: str = Field(
        description="Base64-encoded 32-byte key used to encrypt session cookies",
    )
    credential_cookie_max_age: int = Field(
        default=365 * 24 * 60 * 60,
        description="Credential cookie lifetime in seconds (~1 year)",
    )
    access_token_cookie_max_age: int = Field(
        default=12 * 60 * 60,
        description="Access token cookie lifetime in seconds (~12 hours)",
    )
    cookie_secure: bool | None = Field(
        default=None,
        description="Secure flag for session cookies (defaults to True in production)",
    )
    token_refresh_buffer_seconds: int = Field(
        default=5 * 60,
        description="Refresh the access token this many seconds before it expires",
    )

    # Detail view loading
    detail_load_retries: int = Field(
        default=3,
        description="Retries for the primary secret fetch of the detail view",
    )
    detail_load_retry_delay: float = Field(
        default=1.5,
        description="Fixed delay between detail view fetch attempts in seconds",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "api_base_url",
        "iam_token_url",
        "lockbox_api_url",
        "lockbox_payload_api_url",
        "resource_manager_api_url",
        "kms_api_url",
    )
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-case log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("session_encryption_key")
    @classmethod
    def validate_session_encryption_key(cls, v: str) -> str:
        """
        Validate the session key decodes to exactly 32 bytes.

        Args:
            v: Base64 (standard or URL-safe) encoded key.

        Returns:
            str: The key unchanged.

        Raises:
            ValueError: If the key is not valid base64 or not 32 bytes long.
        """
        try:
            raw = base64.urlsafe_b64decode(v.encode())
        except (binascii.Error, ValueError) as e:
            raise ValueError("session_encryption_key must be base64-encoded") from e
        if len(raw) != 32:
            raise ValueError("session_encryption_key must decode to 32 bytes")
        return v

    @field_validator("detail_load_retries")
    @classmethod
    def validate_detail_load_retries(cls, v: int) -> int:
        """
        Validate the retry count is not negative.

        Args:
            v: Number of retries.

        Returns:
            int: Validated retry count.

        Raises:
            ValueError: If negative.
        """
        if v < 0:
            raise ValueError("detail_load_retries must be >= 0")
        return v

    @property
    def session_key_bytes(self) -> bytes:
        """Decoded session encryption key."""
        return base64.urlsafe_b64decode(self.session_encryption_key.encode())

    @property
    def secure_cookies(self) -> bool:
        """Whether session cookies carry the Secure flag."""
        if self.cookie_secure is not None:
            return self.cookie_secure
        return self.is_production

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env


# Global settings instance (singleton pattern)
settings = get_settings()
