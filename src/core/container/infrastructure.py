"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, structlog)
- Encryption (AES-256-GCM cookie sealing)
- Credential store (encrypted cookies)
- Identity exchange (IAM tokens)
- Token manager + API gateway
- Upstream clients (Lockbox, Resource Manager, KMS)
- Concurrency guard and detail loader
"""

from datetime import timedelta
from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.application.services.concurrency_guard import ConcurrencyGuard
    from src.application.services.detail_loader import SecretDetailLoader
    from src.application.services.token_manager import TokenManager
    from src.domain.protocols.credential_store_protocol import (
        CredentialStoreProtocol,
    )
    from src.domain.protocols.identity_exchange_protocol import (
        IdentityExchangeProtocol,
    )
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.resource_directory_protocol import (
        KmsProtocol,
        ResourceManagerProtocol,
    )
    from src.domain.protocols.secrets_service_protocol import SecretsServiceProtocol
    from src.infrastructure.cloud.api_gateway import CloudApiGateway
    from src.infrastructure.security.encryption_service import EncryptionService


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_encryption_service() -> "EncryptionService":
    """Get encryption service singleton (app-scoped).

    Uses settings.session_encryption_key for AES-256-GCM encryption.

    Raises:
        RuntimeError: If the encryption key is invalid.
    """
    from src.core.result import Failure, Success
    from src.infrastructure.security.encryption_service import EncryptionService

    match EncryptionService.create(settings.session_key_bytes):
        case Success(value=service):
            return service
        case Failure(error=err):
            raise RuntimeError(
                f"Failed to initialize encryption service: {err.message}"
            )


@lru_cache()
def get_credential_store() -> "CredentialStoreProtocol":
    """Get cookie credential store singleton (app-scoped)."""
    from src.infrastructure.session.cookie_credential_store import (
        CookieCredentialStore,
    )

    return CookieCredentialStore(
        encryption=get_encryption_service(),
        secure=settings.secure_cookies,
        credential_max_age=settings.credential_cookie_max_age,
        access_token_max_age=settings.access_token_cookie_max_age,
    )


@lru_cache()
def get_identity_exchange() -> "IdentityExchangeProtocol":
    """Get IAM token exchange singleton (app-scoped)."""
    from src.infrastructure.identity.iam_token_exchange import IamTokenExchange

    return IamTokenExchange(
        token_url=settings.iam_token_url,
        timeout=settings.upstream_timeout,
    )


@lru_cache()
def get_token_manager() -> "TokenManager":
    """Get token manager singleton (app-scoped)."""
    from src.application.services.token_manager import TokenManager

    return TokenManager(
        identity_exchange=get_identity_exchange(),
        logger=get_logger(),
        refresh_buffer=timedelta(seconds=settings.token_refresh_buffer_seconds),
    )


@lru_cache()
def get_api_gateway() -> "CloudApiGateway":
    """Get authenticated upstream gateway singleton (app-scoped)."""
    from src.infrastructure.cloud.api_gateway import CloudApiGateway

    return CloudApiGateway(
        token_provider=get_token_manager(),
        timeout=settings.upstream_timeout,
    )


@lru_cache()
def get_secrets_service() -> "SecretsServiceProtocol":
    """Get Lockbox client singleton (app-scoped)."""
    from src.infrastructure.cloud.lockbox_client import LockboxClient

    return LockboxClient(
        gateway=get_api_gateway(),
        base_url=settings.lockbox_api_url,
        payload_base_url=settings.lockbox_payload_api_url,
    )


@lru_cache()
def get_resource_manager() -> "ResourceManagerProtocol":
    """Get Resource Manager client singleton (app-scoped)."""
    from src.infrastructure.cloud.resource_manager_client import (
        ResourceManagerClient,
    )

    return ResourceManagerClient(
        gateway=get_api_gateway(),
        base_url=settings.resource_manager_api_url,
    )


@lru_cache()
def get_kms() -> "KmsProtocol":
    """Get KMS client singleton (app-scoped)."""
    from src.infrastructure.cloud.resource_manager_client import KmsClient

    return KmsClient(gateway=get_api_gateway(), base_url=settings.kms_api_url)


@lru_cache()
def get_concurrency_guard() -> "ConcurrencyGuard":
    """Get optimistic concurrency guard singleton (app-scoped)."""
    from src.application.services.concurrency_guard import ConcurrencyGuard

    return ConcurrencyGuard(secrets=get_secrets_service(), logger=get_logger())


@lru_cache()
def get_detail_loader() -> "SecretDetailLoader":
    """Get secret detail loader singleton (app-scoped)."""
    from src.application.services.detail_loader import SecretDetailLoader

    return SecretDetailLoader(
        secrets=get_secrets_service(),
        logger=get_logger(),
        retries=settings.detail_load_retries,
        retry_delay=settings.detail_load_retry_delay,
    )
