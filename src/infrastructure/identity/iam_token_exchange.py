"""IAM token exchange implementing IdentityExchangeProtocol.

Trades the long-lived OAuth credential for a short-lived IAM token:

    POST {iam_token_url}
    {"yandexPassportOauthToken": "<credential>"}

    200 {"iamToken": "t1.9eue...", "expiresAt": "2024-05-01T22:00:00.123456789Z"}

The credential is sent in the body only and never logged.
"""

from typing import Any

import httpx
import structlog

from src.core.constants import RESPONSE_BODY_MAX_LENGTH
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import UpstreamError
from src.domain.value_objects.access_token import AccessToken
from src.infrastructure.cloud.api_gateway import extract_error_message
from src.infrastructure.cloud.mappers import parse_timestamp

logger = structlog.get_logger(__name__)

SERVICE_NAME = "iam"


class IamTokenExchange:
    """Identity exchange over the IAM REST endpoint.

    Attributes:
        _token_url: Full URL of the token endpoint.
        _timeout: HTTP request timeout in seconds.
    """

    def __init__(self, *, token_url: str, timeout: float = 30.0) -> None:
        self._token_url = token_url
        self._timeout = timeout

    async def exchange(self, credential: str) -> Result[AccessToken, UpstreamError]:
        """Exchange the credential for an access token.

        Args:
            credential: OAuth token.

        Returns:
            Success(AccessToken): Token with the reported expiry (None when
                the expiry is missing or unparseable).
            Failure(UpstreamError): Non-success status (passed through),
                malformed body (502) or unreachable service (503).
        """
        logger.debug("iam_token_exchange_started")

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self._token_url,
                    json={"yandexPassportOauthToken": credential},
                    headers={"Content-Type": "application/json"},
                )
        except httpx.TimeoutException as e:
            logger.error("iam_token_exchange_timeout", error=str(e))
            return Failure(error=_unavailable("IAM token request timed out"))
        except httpx.RequestError as e:
            logger.error("iam_token_exchange_connection_error", error=str(e))
            return Failure(error=_unavailable(f"Failed to connect to IAM: {e}"))

        return self._handle_token_response(response)

    def _handle_token_response(
        self, response: httpx.Response
    ) -> Result[AccessToken, UpstreamError]:
        """Interpret the token endpoint response."""
        if not response.is_success:
            message = extract_error_message(response.status_code, response.text)
            logger.error(
                "iam_token_exchange_failed",
                status_code=response.status_code,
                message=message,
            )
            return Failure(
                error=UpstreamError(
                    code=ErrorCode.TOKEN_EXCHANGE_FAILED,
                    message=message,
                    status_code=response.status_code,
                    service=SERVICE_NAME,
                    response_body=response.text[:RESPONSE_BODY_MAX_LENGTH],
                )
            )

        try:
            data: Any = response.json()
        except ValueError as e:
            logger.error("iam_token_exchange_invalid_json", error=str(e))
            return Failure(error=_invalid("Invalid JSON response from IAM"))

        token = data.get("iamToken") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            logger.error("iam_token_exchange_missing_token")
            return Failure(error=_invalid("IAM response does not contain a token"))

        expires_at = parse_timestamp(data.get("expiresAt"))
        if expires_at is None:
            logger.warning("iam_token_expiry_unknown")

        logger.info(
            "iam_token_exchange_succeeded",
            expires_at=expires_at.isoformat() if expires_at else None,
        )
        return Success(value=AccessToken(value=token, expires_at=expires_at))


def _unavailable(message: str) -> UpstreamError:
    return UpstreamError(
        code=ErrorCode.UPSTREAM_UNAVAILABLE,
        message=message,
        status_code=503,
        service=SERVICE_NAME,
    )


def _invalid(message: str) -> UpstreamError:
    return UpstreamError(
        code=ErrorCode.UPSTREAM_INVALID_RESPONSE,
        message=message,
        status_code=502,
        service=SERVICE_NAME,
    )
