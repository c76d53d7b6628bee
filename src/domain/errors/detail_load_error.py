"""Secret detail view load failure."""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class DetailLoadError(DomainError):
    """Primary secret fetch failed after exhausting every retry.

    Attributes:
        code: ErrorCode.SECRET_DETAIL_LOAD_FAILED.
        message: Message of the last upstream failure.
        secret_id: Secret that could not be loaded.
        attempts: Number of attempts made.
        status_code: Status of the last upstream failure.
        retryable: Whether the UI should offer a manual retry.
    """

    secret_id: str
    attempts: int
    status_code: int
    retryable: bool = True
