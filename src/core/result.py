"""Result types for railway-oriented programming.

Operations that can fail (upstream calls, validation, decryption) return a
Result instead of raising. Callers pattern-match on the outcome, which keeps
every failure path explicit and testable.

Usage:
    async def get_secret(...) -> Result[Secret, UpstreamError]:
        ...

    match await client.get_secret(session, secret_id):
        case Success(value=secret):
            print(secret.name)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
