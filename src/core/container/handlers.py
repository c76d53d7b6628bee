"""Handler dependency factories.

Request-scoped handler instances wired with the app-scoped services from
``infrastructure``. Routers depend on these factories, and tests replace
them through ``app.dependency_overrides``.

Usage:
    @router.post("/secrets")
    async def create_secret(
        handler: CreateSecretHandler = Depends(get_create_secret_handler),
    ):
        result = await handler.handle(command)
"""

from typing import TYPE_CHECKING

from src.core.container.infrastructure import (
    get_concurrency_guard,
    get_detail_loader,
    get_identity_exchange,
    get_kms,
    get_logger,
    get_resource_manager,
    get_secrets_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.add_secret_version_handler import (
        AddSecretVersionHandler,
    )
    from src.application.commands.handlers.begin_session_handler import (
        BeginSessionHandler,
    )
    from src.application.commands.handlers.create_secret_handler import (
        CreateSecretHandler,
    )
    from src.application.commands.handlers.delete_secret_handler import (
        DeleteSecretHandler,
    )
    from src.application.commands.handlers.rollback_secret_version_handler import (
        RollbackSecretVersionHandler,
    )
    from src.application.commands.handlers.update_secret_handler import (
        UpdateSecretHandler,
    )
    from src.application.commands.handlers.version_destruction_handlers import (
        CancelVersionDestructionHandler,
        ScheduleVersionDestructionHandler,
    )
    from src.application.queries.handlers.resource_query_handlers import (
        ListCloudsHandler,
        ListFoldersHandler,
        ListKmsKeysHandler,
    )
    from src.application.queries.handlers.secret_query_handlers import (
        GetSecretHandler,
        GetSecretPayloadHandler,
        ListSecretsHandler,
        ListSecretVersionsHandler,
        LoadSecretDetailHandler,
    )


# ============================================================================
# Session Handler Factories
# ============================================================================


async def get_begin_session_handler() -> "BeginSessionHandler":
    """Get BeginSession command handler (request-scoped)."""
    from src.application.commands.handlers.begin_session_handler import (
        BeginSessionHandler,
    )

    return BeginSessionHandler(
        identity_exchange=get_identity_exchange(),
        resource_manager=get_resource_manager(),
        logger=get_logger(),
    )


# ============================================================================
# Resource Query Handler Factories
# ============================================================================


async def get_list_clouds_handler() -> "ListCloudsHandler":
    """Get ListClouds query handler (request-scoped)."""
    from src.application.queries.handlers.resource_query_handlers import (
        ListCloudsHandler,
    )

    return ListCloudsHandler(resource_manager=get_resource_manager())


async def get_list_folders_handler() -> "ListFoldersHandler":
    """Get ListFolders query handler (request-scoped)."""
    from src.application.queries.handlers.resource_query_handlers import (
        ListFoldersHandler,
    )

    return ListFoldersHandler(resource_manager=get_resource_manager())


async def get_list_kms_keys_handler() -> "ListKmsKeysHandler":
    """Get ListKmsKeys query handler (request-scoped)."""
    from src.application.queries.handlers.resource_query_handlers import (
        ListKmsKeysHandler,
    )

    return ListKmsKeysHandler(kms=get_kms(), logger=get_logger())


# ============================================================================
# Secret Query Handler Factories
# ============================================================================


async def get_list_secrets_handler() -> "ListSecretsHandler":
    """Get ListSecrets query handler (request-scoped)."""
    from src.application.queries.handlers.secret_query_handlers import (
        ListSecretsHandler,
    )

    return ListSecretsHandler(secrets=get_secrets_service())


async def get_get_secret_handler() -> "GetSecretHandler":
    """Get GetSecret query handler (request-scoped)."""
    from src.application.queries.handlers.secret_query_handlers import (
        GetSecretHandler,
    )

    return GetSecretHandler(secrets=get_secrets_service())


async def get_get_secret_payload_handler() -> "GetSecretPayloadHandler":
    """Get GetSecretPayload query handler (request-scoped)."""
    from src.application.queries.handlers.secret_query_handlers import (
        GetSecretPayloadHandler,
    )

    return GetSecretPayloadHandler(secrets=get_secrets_service())


async def get_list_secret_versions_handler() -> "ListSecretVersionsHandler":
    """Get ListSecretVersions query handler (request-scoped)."""
    from src.application.queries.handlers.secret_query_handlers import (
        ListSecretVersionsHandler,
    )

    return ListSecretVersionsHandler(secrets=get_secrets_service())


async def get_load_secret_detail_handler() -> "LoadSecretDetailHandler":
    """Get LoadSecretDetail query handler (request-scoped)."""
    from src.application.queries.handlers.secret_query_handlers import (
        LoadSecretDetailHandler,
    )

    return LoadSecretDetailHandler(loader=get_detail_loader())


# ============================================================================
# Secret Command Handler Factories
# ============================================================================


async def get_create_secret_handler() -> "CreateSecretHandler":
    """Get CreateSecret command handler (request-scoped)."""
    from src.application.commands.handlers.create_secret_handler import (
        CreateSecretHandler,
    )

    return CreateSecretHandler(secrets=get_secrets_service(), logger=get_logger())


async def get_update_secret_handler() -> "UpdateSecretHandler":
    """Get UpdateSecret command handler (request-scoped)."""
    from src.application.commands.handlers.update_secret_handler import (
        UpdateSecretHandler,
    )

    return UpdateSecretHandler(secrets=get_secrets_service(), logger=get_logger())


async def get_delete_secret_handler() -> "DeleteSecretHandler":
    """Get DeleteSecret command handler (request-scoped)."""
    from src.application.commands.handlers.delete_secret_handler import (
        DeleteSecretHandler,
    )

    return DeleteSecretHandler(secrets=get_secrets_service(), logger=get_logger())


async def get_add_secret_version_handler() -> "AddSecretVersionHandler":
    """Get AddSecretVersion command handler (request-scoped, guarded)."""
    from src.application.commands.handlers.add_secret_version_handler import (
        AddSecretVersionHandler,
    )

    return AddSecretVersionHandler(
        secrets=get_secrets_service(),
        guard=get_concurrency_guard(),
        logger=get_logger(),
    )


async def get_rollback_secret_version_handler() -> "RollbackSecretVersionHandler":
    """Get RollbackSecretVersion command handler (request-scoped, guarded)."""
    from src.application.commands.handlers.rollback_secret_version_handler import (
        RollbackSecretVersionHandler,
    )

    return RollbackSecretVersionHandler(
        secrets=get_secrets_service(),
        guard=get_concurrency_guard(),
        logger=get_logger(),
    )


async def get_schedule_version_destruction_handler() -> (
    "ScheduleVersionDestructionHandler"
):
    """Get ScheduleVersionDestruction command handler (request-scoped)."""
    from src.application.commands.handlers.version_destruction_handlers import (
        ScheduleVersionDestructionHandler,
    )

    return ScheduleVersionDestructionHandler(
        secrets=get_secrets_service(), logger=get_logger()
    )


async def get_cancel_version_destruction_handler() -> (
    "CancelVersionDestructionHandler"
):
    """Get CancelVersionDestruction command handler (request-scoped)."""
    from src.application.commands.handlers.version_destruction_handlers import (
        CancelVersionDestructionHandler,
    )

    return CancelVersionDestructionHandler(
        secrets=get_secrets_service(), logger=get_logger()
    )
