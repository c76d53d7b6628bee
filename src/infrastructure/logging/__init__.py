"""Logging adapters."""

from src.infrastructure.logging.console_adapter import ConsoleAdapter, configure_logging

__all__ = ["ConsoleAdapter", "configure_logging"]
