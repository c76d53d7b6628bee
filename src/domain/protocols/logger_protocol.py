"""LoggerProtocol definition for structured logging.

Standardizes structured logging across the codebase while remaining
backend-agnostic. Implementations MUST keep logs structured (message +
key-value context) and safe: credentials, access tokens and payload values
are never passed as context.

Context Binding:
    Use bind() to create scoped loggers (trace_id, secret_id) that include
    the bound context in every subsequent call.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("secret_version_added", secret_id=secret_id)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (snake_case; avoid f-strings, use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message (degraded but recoverable)."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
