"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes
- Settings and internal constants

The core module has NO dependencies on other application layers.
"""

from src.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    ValidationError,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
    "ValidationError",
]
