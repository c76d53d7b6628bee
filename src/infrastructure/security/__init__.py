"""Security adapters (cookie encryption)."""

from src.infrastructure.security.encryption_service import EncryptionService

__all__ = ["EncryptionService"]
