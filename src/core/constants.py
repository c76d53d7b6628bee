"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Upstream paging defaults
- Payload key / secret name character set
- Session cookie names
- Prefixes and response limits

Example:
    >>> from src.core.constants import BEARER_PREFIX
    >>> header = f"{BEARER_PREFIX}{access_token}"
"""

import re

# =============================================================================
# Paging
# =============================================================================

DEFAULT_PAGE_SIZE: int = 100
"""Page size requested from every upstream list endpoint."""

PROBE_PAGE_SIZE: int = 1
"""Page size used by the login validation probe (list clouds)."""


# =============================================================================
# Naming rules
# =============================================================================

PAYLOAD_KEY_PATTERN: re.Pattern[str] = re.compile(r"^[a-zA-Z0-9_.\-]+$")
"""Allowed characters for payload entry keys: letters, digits, _, -, ."""

SECRET_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[a-zA-Z0-9_.\-]+$")
"""Allowed characters for secret names (same set as payload keys)."""

ROLLBACK_VERSION_ID_PREFIX_LENGTH: int = 8
"""Number of version id characters quoted in rollback version descriptions."""


# =============================================================================
# Session cookies
# =============================================================================

CREDENTIAL_COOKIE: str = "oauth_token"
"""Cookie holding the encrypted long-lived credential."""

ACCESS_TOKEN_COOKIE: str = "iam_token"
"""Cookie holding the encrypted short-lived access token."""

ACCESS_TOKEN_EXPIRES_COOKIE: str = "iam_expires_at"
"""Cookie holding the encrypted access token expiry (ISO 8601)."""


# =============================================================================
# Prefixes
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum upstream response body length kept in logs and error details."""
