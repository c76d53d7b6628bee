"""Common error classes shared by all layers.

Error Types:
- ValidationError: Malformed input caught before any network call
- ConflictError: State conflicts (stale version, duplicates)
- AuthenticationError: No usable credential/token, or token rejected

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_PAYLOAD_KEY,
        message="Invalid key 'bad key!'",
        field="payload_entries",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource state conflict.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
    """

    resource_type: str


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (no usable token, credential rejected).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
    """

    pass
