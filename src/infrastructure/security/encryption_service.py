"""Encryption service for session cookie values.

Provides AES-256-GCM encryption for the credential, access token and expiry
the console keeps in browser cookies.

Security Properties:
    - Confidentiality: Only holder of key can decrypt
    - Integrity: Tampering is detected via GCM authentication tag
    - Uniqueness: Random IV per encryption prevents pattern analysis

Architecture:
    - Infrastructure adapter (catches cryptography exceptions)
    - Returns Result types (railway-oriented programming)
    - Uses domain error codes (ErrorCode enum)
"""

import base64
import binascii
import json
import os
from typing import Any

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols.encryption_protocol import (
    DecryptionError,
    EncryptionError,
    EncryptionKeyError,
    SerializationError,
)


class EncryptionService:
    """AES-256-GCM encryption service for cookie values.

    Format:
        Encrypted bytes = IV (12 bytes) || ciphertext || auth_tag (16 bytes)
        Sealed token    = base64url(encrypted bytes), padding stripped

    Usage:
        >>> match EncryptionService.create(settings.session_key_bytes):
        ...     case Success(service):
        ...         token = service.seal({"v": credential})
        ...     case Failure(error):
        ...         ...

    Thread Safety:
        The AESGCM instance can be used concurrently.
    """

    IV_SIZE = 12  # 96 bits - NIST recommended for GCM
    MIN_ENCRYPTED_SIZE = 12 + 16  # IV + auth tag

    def __init__(self, aesgcm: AESGCM) -> None:
        """Initialize with pre-validated AESGCM instance.

        Use EncryptionService.create() factory instead of direct construction.

        Args:
            aesgcm: Pre-initialized AESGCM cipher instance.
        """
        self._aesgcm = aesgcm

    @classmethod
    def create(cls, key: bytes) -> Result["EncryptionService", EncryptionKeyError]:
        """Create encryption service with validated key.

        Args:
            key: 32-byte (256-bit) encryption key.

        Returns:
            Success(EncryptionService) if key is valid.
            Failure(EncryptionKeyError) if key is invalid.
        """
        if len(key) != 32:
            return Failure(
                error=EncryptionKeyError(
                    code=ErrorCode.ENCRYPTION_KEY_INVALID,
                    message=(
                        f"Encryption key must be exactly 32 bytes (256 bits), "
                        f"got {len(key)} bytes"
                    ),
                )
            )
        return Success(value=cls(AESGCM(key)))

    def encrypt(self, data: dict[str, Any]) -> Result[bytes, EncryptionError]:
        """Encrypt a dictionary to bytes.

        Args:
            data: JSON-serializable dictionary.

        Returns:
            Success(bytes): IV || ciphertext || auth_tag.
            Failure(SerializationError): If data cannot be serialized.
        """
        try:
            plaintext = json.dumps(data, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            return Failure(
                error=SerializationError(
                    code=ErrorCode.INVALID_INPUT,
                    message=f"Failed to serialize cookie value to JSON: {e}",
                )
            )

        iv = os.urandom(self.IV_SIZE)
        ciphertext = self._aesgcm.encrypt(iv, plaintext, associated_data=None)
        return Success(value=iv + ciphertext)

    def decrypt(self, encrypted: bytes) -> Result[dict[str, Any], EncryptionError]:
        """Decrypt bytes back to a dictionary.

        Args:
            encrypted: Encrypted bytes from encrypt().

        Returns:
            Success(dict) with the original dictionary.
            Failure(DecryptionError) if decryption fails (wrong key, tampered).
            Failure(SerializationError) if decrypted data is not a JSON object.
        """
        if len(encrypted) < self.MIN_ENCRYPTED_SIZE:
            return Failure(
                error=DecryptionError(
                    code=ErrorCode.DECRYPTION_FAILED,
                    message=(
                        f"Encrypted data too short: {len(encrypted)} bytes "
                        f"(minimum {self.MIN_ENCRYPTED_SIZE} bytes)"
                    ),
                )
            )

        iv = encrypted[: self.IV_SIZE]
        ciphertext = encrypted[self.IV_SIZE :]

        try:
            plaintext = self._aesgcm.decrypt(iv, ciphertext, associated_data=None)
        except InvalidTag:
            return Failure(
                error=DecryptionError(
                    code=ErrorCode.DECRYPTION_FAILED,
                    message="Failed to decrypt cookie value: invalid key or tampered data",
                )
            )

        try:
            data = json.loads(plaintext.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Failure(
                error=SerializationError(
                    code=ErrorCode.INVALID_INPUT,
                    message=f"Failed to deserialize decrypted cookie value: {e}",
                )
            )
        if not isinstance(data, dict):
            return Failure(
                error=SerializationError(
                    code=ErrorCode.INVALID_INPUT,
                    message="Decrypted cookie value is not a JSON object",
                )
            )
        return Success(value=data)

    def seal(self, data: dict[str, Any]) -> Result[str, EncryptionError]:
        """Encrypt a dictionary to a cookie-safe text token.

        Args:
            data: JSON-serializable dictionary.

        Returns:
            Success(str): base64url token without padding.
            Failure(EncryptionError): If encryption fails.
        """
        match self.encrypt(data):
            case Success(value=encrypted):
                token = base64.urlsafe_b64encode(encrypted).rstrip(b"=")
                return Success(value=token.decode("ascii"))
            case Failure(error=error):
                return Failure(error=error)

    def unseal(self, token: str) -> Result[dict[str, Any], EncryptionError]:
        """Decode and decrypt a token produced by seal().

        Args:
            token: base64url token (padding optional).

        Returns:
            Success(dict) with the original dictionary.
            Failure(DecryptionError) if the token is malformed or tampered.
        """
        padded = token + "=" * (-len(token) % 4)
        try:
            encrypted = base64.urlsafe_b64decode(padded.encode("ascii"))
        except (binascii.Error, UnicodeEncodeError, ValueError):
            return Failure(
                error=DecryptionError(
                    code=ErrorCode.DECRYPTION_FAILED,
                    message="Cookie value is not valid base64url",
                )
            )
        return self.decrypt(encrypted)
