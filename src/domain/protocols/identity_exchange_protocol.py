"""IdentityExchangeProtocol: credential -> short-lived access token.

Port for the cloud identity service that trades the long-lived credential
(OAuth token) for an access token (IAM token) with an absolute expiry.

Implementation: src/infrastructure/identity/iam_token_exchange.py
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import UpstreamError
from src.domain.value_objects.access_token import AccessToken


class IdentityExchangeProtocol(Protocol):
    """Exchange a credential for an access token."""

    async def exchange(self, credential: str) -> Result[AccessToken, UpstreamError]:
        """Exchange ``credential`` for a fresh access token.

        Args:
            credential: Long-lived credential.

        Returns:
            Success(AccessToken): Token with the expiry reported upstream.
            Failure(UpstreamError): Rejected credential, malformed response,
                or unreachable service.
        """
        ...
