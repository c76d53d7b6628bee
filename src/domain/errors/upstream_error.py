"""Upstream cloud API error types.

Returned (inside ``Failure``) whenever the secrets, identity, resource
manager or KMS service answers with a non-success status, returns a body
that cannot be decoded, or cannot be reached at all.

Architecture:
- Domain layer errors (part of the gateway protocol contract)
- Inherit from DomainError (core layer)
- ``status_code`` is passed through to the HTTP response verbatim

Usage:
    from src.domain.errors import UpstreamError

    return Failure(error=UpstreamError(
        code=ErrorCode.UPSTREAM_REQUEST_FAILED,
        message="Secret not found",
        status_code=404,
        service="lockbox",
    ))
"""

from dataclasses import dataclass
from typing import TypeAlias

from src.core.errors import AuthenticationError, DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class UpstreamError(DomainError):
    """Non-success outcome of an upstream call.

    Attributes:
        code: Domain ErrorCode.
        message: Normalized human-readable message (upstream ``message`` field,
            trimmed body text, or ``HTTP <status>``).
        status_code: HTTP-like status to surface to the caller.
        service: Upstream service name (lockbox, iam, resource_manager, kms).
        response_body: Truncated raw body for debugging.
    """

    status_code: int
    service: str
    response_body: str | None = None

    @property
    def is_transient(self) -> bool:
        """Whether retrying might succeed (5xx, transport failures)."""
        return self.status_code >= 500


GatewayError: TypeAlias = UpstreamError | AuthenticationError
"""Everything an authenticated upstream call can fail with."""
