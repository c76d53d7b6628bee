"""Core errors package.

Usage:
    from src.core.errors import DomainError, ValidationError, ConflictError
"""

from src.core.errors.common_errors import (
    AuthenticationError,
    ConflictError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
]
