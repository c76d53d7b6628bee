"""Unit tests for BeginSessionHandler (login).

Tests cover:
- Exchange + validation probe success
- Empty credential rejected before any call
- Exchange failure passed through
- Probe failure turned into an authentication error
"""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from src.application.commands.handlers.begin_session_handler import (
    BeginSessionHandler,
)
from src.application.commands.session_commands import BeginSession
from src.core.constants import PROBE_PAGE_SIZE
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, ValidationError
from src.core.result import Failure, Success
from src.domain.entities import Page
from src.domain.errors import UpstreamError
from tests.conftest import make_token

TOKEN = make_token("t1.login", expires_in=timedelta(hours=12))


@pytest.fixture
def exchange() -> AsyncMock:
    mock = AsyncMock()
    mock.exchange.return_value = Success(value=TOKEN)
    return mock


@pytest.fixture
def resource_manager() -> AsyncMock:
    mock = AsyncMock()
    mock.list_clouds.return_value = Success(value=Page(items=[]))
    return mock


@pytest.fixture
def handler(exchange, resource_manager, mock_logger) -> BeginSessionHandler:
    return BeginSessionHandler(
        identity_exchange=exchange,
        resource_manager=resource_manager,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestBeginSessionHandler:
    """Test BeginSessionHandler."""

    async def test_successful_login_returns_session(
        self, handler, exchange, resource_manager
    ):
        result = await handler.handle(BeginSession(credential=" y0_cred "))

        assert isinstance(result, Success)
        session = result.value
        assert session.credential == "y0_cred"
        assert session.access_token == TOKEN
        assert session.is_authenticated
        exchange.exchange.assert_awaited_once_with("y0_cred")
        resource_manager.list_clouds.assert_awaited_once_with(
            session, page_size=PROBE_PAGE_SIZE
        )

    async def test_validation_call_uses_new_token_without_refresh(
        self, handler, exchange, resource_manager
    ):
        exchange.exchange.return_value = Success(
            value=make_token("t1.no-expiry", expires_in=None)
        )

        await handler.handle(BeginSession(credential="y0_cred"))

        validation_session = resource_manager.list_clouds.call_args.args[0]
        assert validation_session.token_resolved
        assert validation_session.access_token.value == "t1.no-expiry"

    async def test_empty_credential_rejected(self, handler, exchange):
        result = await handler.handle(BeginSession(credential="  "))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.field == "credential"
        exchange.exchange.assert_not_awaited()

    async def test_exchange_failure_passed_through(
        self, handler, exchange, resource_manager
    ):
        error = UpstreamError(
            code=ErrorCode.TOKEN_EXCHANGE_FAILED,
            message="OAuth token is invalid",
            status_code=401,
            service="iam",
        )
        exchange.exchange.return_value = Failure(error=error)

        result = await handler.handle(BeginSession(credential="y0_bad"))

        assert result == Failure(error=error)
        resource_manager.list_clouds.assert_not_awaited()

    async def test_probe_failure_is_authentication_error(
        self, handler, resource_manager
    ):
        resource_manager.list_clouds.return_value = Failure(
            error=UpstreamError(
                code=ErrorCode.UPSTREAM_REQUEST_FAILED,
                message="Permission denied",
                status_code=403,
                service="resource_manager",
            )
        )

        result = await handler.handle(BeginSession(credential="y0_cred"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.TOKEN_VALIDATION_FAILED
        assert result.error.message == "Token validation failed: Permission denied"

    def test_command_repr_hides_credential(self):
        assert "y0_secret" not in repr(BeginSession(credential="y0_secret"))
