"""Application services shared by command and query handlers."""

from src.application.services.concurrency_guard import ConcurrencyGuard
from src.application.services.detail_loader import SecretDetail, SecretDetailLoader
from src.application.services.token_manager import TokenManager

__all__ = ["ConcurrencyGuard", "SecretDetail", "SecretDetailLoader", "TokenManager"]
