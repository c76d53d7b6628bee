"""Encryption protocol for session cookie values.

Defines the port for authenticated encryption of the values the credential
store keeps in browser cookies. Tampered ciphertext fails decryption, which
is what makes the cookies tamper-evident.

Architecture:
    - Domain layer protocol (port)
    - Infrastructure adapter: src/infrastructure/security/encryption_service.py
"""

from dataclasses import dataclass
from typing import Any, Protocol

from src.core.errors import DomainError
from src.core.result import Result


# =============================================================================
# Encryption Error Types (Domain Layer)
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class EncryptionError(DomainError):
    """Base encryption error.

    Does NOT inherit from Exception - used in Result types.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class EncryptionKeyError(EncryptionError):
    """Invalid encryption key (wrong length, unusable)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class DecryptionError(EncryptionError):
    """Decryption failure (wrong key, tampered or malformed data)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class SerializationError(EncryptionError):
    """Data could not be serialized to / parsed from JSON."""

    pass


# =============================================================================
# Encryption Protocol (Port)
# =============================================================================


class EncryptionProtocol(Protocol):
    """Protocol for encryption/decryption operations."""

    def encrypt(self, data: dict[str, Any]) -> Result[bytes, EncryptionError]:
        """Encrypt a JSON-serializable dictionary to bytes.

        Args:
            data: Dictionary to encrypt.

        Returns:
            Success(bytes) with encrypted data.
            Failure(EncryptionError) if encryption fails.
        """
        ...

    def decrypt(self, encrypted: bytes) -> Result[dict[str, Any], EncryptionError]:
        """Decrypt bytes back to a dictionary.

        Args:
            encrypted: Encrypted bytes from encrypt().

        Returns:
            Success(dict) with original dictionary.
            Failure(DecryptionError) if decryption fails.
        """
        ...

    def seal(self, data: dict[str, Any]) -> Result[str, EncryptionError]:
        """Encrypt a dictionary to a URL-safe text token (cookie value).

        Returns:
            Success(str) with base64url-encoded encrypted bytes.
            Failure(EncryptionError) if encryption fails.
        """
        ...

    def unseal(self, token: str) -> Result[dict[str, Any], EncryptionError]:
        """Reverse seal().

        Returns:
            Success(dict) with the original dictionary.
            Failure(DecryptionError) on malformed, tampered or foreign tokens.
        """
        ...
