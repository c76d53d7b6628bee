"""Unit tests for CloudApiGateway.

Tests cover:
- Bearer and JSON headers, header overrides, None params dropped
- Empty-not-found rule (empty 404 -> {}; non-empty 404 -> error)
- Error message normalization (JSON message, trimmed text, "HTTP <status>")
- Missing access token -> AuthenticationError without a network call
- Transport failure -> 503, undecodable body -> 502

Uses pytest-httpx to mock HTTP responses.
"""

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Success
from src.domain.errors import UpstreamError
from src.infrastructure.cloud.api_gateway import (
    CloudApiGateway,
    extract_error_message,
    is_empty_not_found,
)
from tests.conftest import make_token

BASE_URL = "https://lockbox.test/lockbox/v1"


@pytest.fixture
def token_provider() -> AsyncMock:
    mock = AsyncMock()
    mock.get_access_token.return_value = make_token("t1.gateway")
    return mock


@pytest.fixture
def gateway(token_provider) -> CloudApiGateway:
    return CloudApiGateway(token_provider=token_provider, timeout=5.0)


async def call(gateway: CloudApiGateway, session, **kwargs):
    options = {
        "service": "lockbox",
        "base_url": BASE_URL,
        "path": "/secrets",
        "operation": "list_secrets",
    }
    options.update(kwargs)
    return await gateway.request(session, **options)


# =============================================================================
# Helpers
# =============================================================================


@pytest.mark.unit
class TestExtractErrorMessage:
    """Test error body normalization."""

    def test_json_message_preferred(self):
        assert extract_error_message(400, '{"code": 3, "message": "bad"}') == "bad"

    def test_non_json_body_trimmed(self):
        assert extract_error_message(502, "  Bad Gateway\n") == "Bad Gateway"

    def test_json_without_message_returns_text(self):
        assert extract_error_message(500, '{"code": 13}') == '{"code": 13}'

    def test_empty_body_uses_status(self):
        assert extract_error_message(503, "   ") == "HTTP 503"


@pytest.mark.unit
class TestIsEmptyNotFound:
    """Test the empty-not-found rule."""

    def test_empty_404(self):
        assert is_empty_not_found(httpx.Response(404, text=" \n"))

    def test_404_with_body(self):
        assert not is_empty_not_found(httpx.Response(404, text="Not found"))

    def test_empty_other_status(self):
        assert not is_empty_not_found(httpx.Response(403, text=""))


# =============================================================================
# Requests
# =============================================================================


@pytest.mark.unit
class TestCloudApiGatewayRequest:
    """Test CloudApiGateway.request."""

    async def test_success_returns_json_object(self, gateway, session, httpx_mock):
        httpx_mock.add_response(json={"secrets": []})

        result = await call(gateway, session)

        assert result == Success(value={"secrets": []})

    async def test_sends_bearer_and_json_headers(self, gateway, session, httpx_mock):
        httpx_mock.add_response(json={})

        await call(gateway, session)

        request = httpx_mock.get_request()
        assert request.headers["Authorization"] == "Bearer t1.gateway"
        assert request.headers["Content-Type"] == "application/json"

    async def test_header_overrides_win(self, gateway, session, httpx_mock):
        httpx_mock.add_response(json={})

        await call(gateway, session, headers={"Content-Type": "text/plain"})

        assert httpx_mock.get_request().headers["Content-Type"] == "text/plain"

    async def test_none_params_dropped(self, gateway, session, httpx_mock):
        httpx_mock.add_response(json={})

        await call(
            gateway,
            session,
            params={"folderId": "b1g", "pageSize": 100, "pageToken": None},
        )

        request = httpx_mock.get_request()
        assert request.url.path == "/lockbox/v1/secrets"
        assert dict(request.url.params) == {"folderId": "b1g", "pageSize": "100"}

    async def test_json_body_sent(self, gateway, session, httpx_mock):
        httpx_mock.add_response(json={"id": "op1"})

        await call(
            gateway,
            session,
            method="POST",
            path="/secrets/e6q1:addVersion",
            json_data={"payloadEntries": [{"key": "A", "textValue": "1"}]},
        )

        request = httpx_mock.get_request()
        assert request.method == "POST"
        assert json.loads(request.content) == {
            "payloadEntries": [{"key": "A", "textValue": "1"}]
        }

    async def test_empty_success_body_is_empty_object(
        self, gateway, session, httpx_mock
    ):
        httpx_mock.add_response(status_code=200, text="")

        assert await call(gateway, session) == Success(value={})

    async def test_empty_404_is_empty_object(self, gateway, session, httpx_mock):
        httpx_mock.add_response(status_code=404, text="")

        assert await call(gateway, session) == Success(value={})

    async def test_empty_404_is_error_when_rule_disabled(
        self, gateway, session, httpx_mock
    ):
        httpx_mock.add_response(status_code=404, text="")

        result = await call(gateway, session, empty_not_found=False)

        assert isinstance(result, Failure)
        assert result.error.status_code == 404
        assert result.error.message == "HTTP 404"

    async def test_404_with_body_is_error(self, gateway, session, httpx_mock):
        httpx_mock.add_response(
            status_code=404, json={"code": 5, "message": "Secret not found"}
        )

        result = await call(gateway, session)

        assert isinstance(result, Failure)
        assert isinstance(result.error, UpstreamError)
        assert result.error.code == ErrorCode.UPSTREAM_REQUEST_FAILED
        assert result.error.status_code == 404
        assert result.error.message == "Secret not found"
        assert result.error.service == "lockbox"

    async def test_error_status_preserved_with_text_body(
        self, gateway, session, httpx_mock
    ):
        httpx_mock.add_response(status_code=403, text="  Permission denied \n")

        result = await call(gateway, session)

        assert isinstance(result, Failure)
        assert result.error.status_code == 403
        assert result.error.message == "Permission denied"
        assert not result.error.is_transient

    async def test_missing_token_is_authentication_error(
        self, gateway, token_provider, session, httpx_mock
    ):
        token_provider.get_access_token.return_value = None

        result = await call(gateway, session)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.code == ErrorCode.NOT_AUTHENTICATED
        assert httpx_mock.get_requests() == []

    async def test_connection_error_is_unavailable(
        self, gateway, session, httpx_mock
    ):
        httpx_mock.add_exception(httpx.ConnectError("connection refused"))

        result = await call(gateway, session)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UPSTREAM_UNAVAILABLE
        assert result.error.status_code == 503
        assert result.error.is_transient

    async def test_timeout_is_unavailable(self, gateway, session, httpx_mock):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        result = await call(gateway, session)

        assert isinstance(result, Failure)
        assert result.error.status_code == 503
        assert result.error.message == "lockbox request timed out"

    async def test_invalid_json_is_bad_gateway(self, gateway, session, httpx_mock):
        httpx_mock.add_response(status_code=200, text="<html>oops</html>")

        result = await call(gateway, session)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UPSTREAM_INVALID_RESPONSE
        assert result.error.status_code == 502

    async def test_non_object_json_is_bad_gateway(
        self, gateway, session, httpx_mock
    ):
        httpx_mock.add_response(json=[1, 2, 3])

        result = await call(gateway, session)

        assert isinstance(result, Failure)
        assert result.error.status_code == 502
