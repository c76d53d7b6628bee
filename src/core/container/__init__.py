"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_create_secret_handler

The container is organized into modules:
- infrastructure: App-scoped services (logging, encryption, cookie store,
  identity exchange, token manager, gateway, upstream clients)
- handlers: Request-scoped command and query handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_api_gateway,
    get_concurrency_guard,
    get_credential_store,
    get_detail_loader,
    get_encryption_service,
    get_identity_exchange,
    get_kms,
    get_logger,
    get_resource_manager,
    get_secrets_service,
    get_token_manager,
)

# Handlers
from src.core.container.handlers import (
    get_add_secret_version_handler,
    get_begin_session_handler,
    get_cancel_version_destruction_handler,
    get_create_secret_handler,
    get_delete_secret_handler,
    get_get_secret_handler,
    get_get_secret_payload_handler,
    get_list_clouds_handler,
    get_list_folders_handler,
    get_list_kms_keys_handler,
    get_list_secret_versions_handler,
    get_list_secrets_handler,
    get_load_secret_detail_handler,
    get_rollback_secret_version_handler,
    get_schedule_version_destruction_handler,
    get_update_secret_handler,
)

__all__ = [
    # Infrastructure
    "get_api_gateway",
    "get_concurrency_guard",
    "get_credential_store",
    "get_detail_loader",
    "get_encryption_service",
    "get_identity_exchange",
    "get_kms",
    "get_logger",
    "get_resource_manager",
    "get_secrets_service",
    "get_token_manager",
    # Session handlers
    "get_begin_session_handler",
    # Resource query handlers
    "get_list_clouds_handler",
    "get_list_folders_handler",
    "get_list_kms_keys_handler",
    # Secret query handlers
    "get_get_secret_handler",
    "get_get_secret_payload_handler",
    "get_list_secret_versions_handler",
    "get_list_secrets_handler",
    "get_load_secret_detail_handler",
    # Secret command handlers
    "get_add_secret_version_handler",
    "get_cancel_version_destruction_handler",
    "get_create_secret_handler",
    "get_delete_secret_handler",
    "get_rollback_secret_version_handler",
    "get_schedule_version_destruction_handler",
    "get_update_secret_handler",
]
