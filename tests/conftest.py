"""Pytest configuration and shared fixtures.

Environment variables are set before anything from ``src`` is imported,
because settings are loaded at import time.
"""

import inspect
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault(
    "SESSION_ENCRYPTION_KEY", "MDEyMzQ1Njc4OWFiY2RlZjAxMjM0NTY3ODlhYmNkZWY="
)
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import UTC, datetime, timedelta  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from src.domain.entities.session import Session  # noqa: E402
from src.domain.value_objects.access_token import AccessToken  # noqa: E402

TEST_CREDENTIAL = "y0_test_credential"


# Test helper functions for domain objects


def make_token(
    value: str = "t1.fresh",
    *,
    expires_in: timedelta | None = timedelta(hours=12),
    now: datetime | None = None,
) -> AccessToken:
    """Build an AccessToken expiring ``expires_in`` from ``now``.

    Usage:
        fresh = make_token()
        stale = make_token("t1.stale", expires_in=timedelta(minutes=2))
        unknown = make_token(expires_in=None)
    """
    if expires_in is None:
        return AccessToken(value=value, expires_at=None)
    return AccessToken(value=value, expires_at=(now or datetime.now(UTC)) + expires_in)


def make_session(
    *,
    credential: str | None = TEST_CREDENTIAL,
    token: AccessToken | None = None,
) -> Session:
    """Build a session; authenticated with a fresh token by default."""
    return Session(credential=credential, access_token=token or make_token())


@pytest.fixture
def session() -> Session:
    """Authenticated session with a fresh access token."""
    return make_session()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double satisfying LoggerProtocol."""
    return MagicMock()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "api: HTTP endpoint tests")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
