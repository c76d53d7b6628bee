"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance
(PEP 544 structural subtyping).

Usage:
    from src.domain.protocols import SecretsServiceProtocol, LoggerProtocol
"""

from src.domain.protocols.access_token_provider_protocol import (
    AccessTokenProviderProtocol,
)
from src.domain.protocols.credential_store_protocol import (
    CookieWriter,
    CredentialStoreProtocol,
)
from src.domain.protocols.encryption_protocol import (
    DecryptionError,
    EncryptionError,
    EncryptionKeyError,
    EncryptionProtocol,
    SerializationError,
)
from src.domain.protocols.identity_exchange_protocol import IdentityExchangeProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.resource_directory_protocol import (
    KmsProtocol,
    ResourceManagerProtocol,
)
from src.domain.protocols.secrets_service_protocol import SecretsServiceProtocol

__all__ = [
    "AccessTokenProviderProtocol",
    "CookieWriter",
    "CredentialStoreProtocol",
    "DecryptionError",
    "EncryptionError",
    "EncryptionKeyError",
    "EncryptionProtocol",
    "IdentityExchangeProtocol",
    "KmsProtocol",
    "LoggerProtocol",
    "ResourceManagerProtocol",
    "SecretsServiceProtocol",
    "SerializationError",
]
