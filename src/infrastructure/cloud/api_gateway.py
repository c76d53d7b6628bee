"""Authenticated HTTP gateway to the upstream cloud APIs.

Every upstream call made on behalf of a browser session goes through
``CloudApiGateway.request``:

- resolves the session's access token (refreshing it near expiry)
- sends ``Authorization: Bearer <token>`` and ``Content-Type: application/json``
- normalizes error bodies into ``UpstreamError`` with the status preserved
- applies the empty-not-found rule
- maps transport failures to 503 and undecodable bodies to 502

There are no retries at this layer.

Architecture:
    - Infrastructure layer (adapter for external APIs)
    - Uses httpx for async HTTP
    - Returns Result types (no exceptions for business errors)
"""

import json
from typing import Any

import httpx
import structlog

from src.core.constants import BEARER_PREFIX, RESPONSE_BODY_MAX_LENGTH
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.entities.session import Session
from src.domain.errors import GatewayError, UpstreamError
from src.domain.protocols.access_token_provider_protocol import (
    AccessTokenProviderProtocol,
)

logger = structlog.get_logger(__name__)


def extract_error_message(status_code: int, body: str) -> str:
    """Normalize an upstream error body into a message.

    Precedence: JSON ``message`` field, then the trimmed body text, then
    ``HTTP <status>`` when the body is empty.

    Example:
        >>> extract_error_message(500, '{"code": 13, "message": "boom"}')
        'boom'
        >>> extract_error_message(502, "  Bad Gateway \\n")
        'Bad Gateway'
        >>> extract_error_message(404, "")
        'HTTP 404'
    """
    text = body.strip()
    if not text:
        return f"HTTP {status_code}"
    try:
        data = json.loads(text)
    except ValueError:
        return text
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message:
            return message
    return text


def is_empty_not_found(response: httpx.Response) -> bool:
    """Empty-not-found rule: a 404 whose body is empty or whitespace.

    The upstream answers this way for listings and payloads that simply have
    nothing to show, so it is treated as an empty object rather than an error.
    """
    return response.status_code == 404 and not response.text.strip()


class CloudApiGateway:
    """Session-aware JSON client shared by all upstream API clients.

    Attributes:
        _token_provider: Resolves the bearer token for a session.
        _timeout: HTTP request timeout in seconds.

    Example:
        >>> result = await gateway.request(
        ...     session,
        ...     service="lockbox",
        ...     base_url=settings.lockbox_api_url,
        ...     path=f"/secrets/{secret_id}",
        ...     operation="get_secret",
        ...     empty_not_found=False,
        ... )
    """

    def __init__(
        self,
        *,
        token_provider: AccessTokenProviderProtocol,
        timeout: float = 30.0,
    ) -> None:
        self._token_provider = token_provider
        self._timeout = timeout

    async def request(
        self,
        session: Session,
        *,
        service: str,
        base_url: str,
        path: str,
        operation: str,
        method: str = "GET",
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        empty_not_found: bool = True,
    ) -> Result[dict[str, Any], GatewayError]:
        """Execute an authenticated upstream request.

        Args:
            session: Caller's session.
            service: Upstream service name (for errors and logs).
            base_url: Service base URL (without trailing slash).
            path: Path relative to base_url.
            operation: Operation name for logging.
            method: HTTP method.
            params: Query parameters (None values are dropped).
            json_data: JSON body.
            headers: Header overrides (win over the defaults).
            empty_not_found: Apply the empty-not-found rule.

        Returns:
            Success(dict): Decoded JSON object ({} for empty bodies).
            Failure(AuthenticationError): No access token available.
            Failure(UpstreamError): Non-success status, undecodable body,
                or transport failure.
        """
        token = await self._token_provider.get_access_token(session)
        if token is None:
            logger.warning("upstream_request_unauthenticated", operation=operation)
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.NOT_AUTHENTICATED,
                    message="Not authenticated",
                )
            )

        request_headers = {
            "Authorization": f"{BEARER_PREFIX}{token.value}",
            "Content-Type": "application/json",
        }
        if headers:
            request_headers.update(headers)

        query = (
            {k: v for k, v in params.items() if v is not None} if params else None
        )
        logger.debug(
            "upstream_request_started",
            service=service,
            operation=operation,
            method=method,
            path=path,
        )

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(
                    method=method,
                    url=f"{base_url}{path}",
                    headers=request_headers,
                    params=query,
                    json=json_data,
                )
        except httpx.TimeoutException as e:
            logger.error(
                "upstream_request_timeout",
                service=service,
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=UpstreamError(
                    code=ErrorCode.UPSTREAM_UNAVAILABLE,
                    message=f"{service} request timed out",
                    status_code=503,
                    service=service,
                )
            )
        except httpx.RequestError as e:
            logger.error(
                "upstream_connection_error",
                service=service,
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=UpstreamError(
                    code=ErrorCode.UPSTREAM_UNAVAILABLE,
                    message=f"Failed to connect to {service}: {e}",
                    status_code=503,
                    service=service,
                )
            )

        return self._handle_response(
            response,
            service=service,
            operation=operation,
            empty_not_found=empty_not_found,
        )

    def _handle_response(
        self,
        response: httpx.Response,
        *,
        service: str,
        operation: str,
        empty_not_found: bool,
    ) -> Result[dict[str, Any], UpstreamError]:
        """Interpret status and body of an upstream response."""
        status = response.status_code

        if empty_not_found and is_empty_not_found(response):
            logger.debug(
                "upstream_empty_not_found", service=service, operation=operation
            )
            return Success(value={})

        if not response.is_success:
            message = extract_error_message(status, response.text)
            logger.error(
                "upstream_request_failed",
                service=service,
                operation=operation,
                status_code=status,
                message=message,
            )
            return Failure(
                error=UpstreamError(
                    code=ErrorCode.UPSTREAM_REQUEST_FAILED,
                    message=message,
                    status_code=status,
                    service=service,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        if not response.text.strip():
            logger.debug(
                "upstream_request_succeeded",
                service=service,
                operation=operation,
                status_code=status,
                empty=True,
            )
            return Success(value={})

        try:
            data = response.json()
        except ValueError as e:
            logger.error(
                "upstream_invalid_json",
                service=service,
                operation=operation,
                error=str(e),
            )
            return Failure(
                error=UpstreamError(
                    code=ErrorCode.UPSTREAM_INVALID_RESPONSE,
                    message=f"Invalid JSON response from {service}",
                    status_code=502,
                    service=service,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        if not isinstance(data, dict):
            logger.error(
                "upstream_unexpected_format",
                service=service,
                operation=operation,
                data_type=type(data).__name__,
            )
            return Failure(
                error=UpstreamError(
                    code=ErrorCode.UPSTREAM_INVALID_RESPONSE,
                    message=f"Expected object response from {service}",
                    status_code=502,
                    service=service,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        logger.debug(
            "upstream_request_succeeded",
            service=service,
            operation=operation,
            status_code=status,
        )
        return Success(value=data)
