"""API test fixtures.

Routers are exercised through FastAPI's TestClient with handler factories
replaced via ``app.dependency_overrides``; no upstream calls are made.
"""

from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.domain.entities.session import Session
from src.main import app
from src.presentation.api.middleware.session_dependencies import (
    get_authenticated_session,
)
from tests.conftest import make_session


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Fresh client (empty cookie jar) with overrides reset afterwards."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_session() -> Session:
    return make_session()


@pytest.fixture
def authenticated(auth_session: Session) -> Session:
    """Skip cookie loading and token resolution for routes under test."""
    app.dependency_overrides[get_authenticated_session] = lambda: auth_session
    return auth_session


@pytest.fixture
def stub_handler() -> Callable[[Callable[..., Any], Any], MagicMock]:
    """Replace a handler factory with a stub whose handle() returns ``result``."""

    def _stub(factory: Callable[..., Any], result: Any) -> MagicMock:
        handler = MagicMock()
        handler.handle = AsyncMock(return_value=result)
        app.dependency_overrides[factory] = lambda: handler
        return handler

    return _stub
