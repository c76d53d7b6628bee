"""Base error class for railway-oriented programming.

DomainError is the base class for every error the console API produces.
Errors flow through the system as data inside ``Failure`` values; they are
never raised.

Usage:
    from src.core.errors import DomainError

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
    """

    code: ErrorCode
    message: str
