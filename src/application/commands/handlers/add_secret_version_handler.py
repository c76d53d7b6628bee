"""AddSecretVersion command handler.

Flow:
1. Require at least one change; validate every key (no network call on failure)
2. If the edit names its base version: concurrency guard (re-fetch + compare)
3. Create the version; the base version id is forwarded upstream
4. Return Success(Operation)

On conflict the mutation is never sent; the caller must reload and reapply.
"""

from src.application.commands.secret_commands import AddSecretVersion
from src.application.services.concurrency_guard import ConcurrencyGuard
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result
from src.domain.entities import Operation
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.secrets_service_protocol import SecretsServiceProtocol
from src.domain.validators import validate_payload_keys
from src.domain.value_objects.secret_version_ref import SecretVersionRef


class AddSecretVersionHandler:
    """Handler for AddSecretVersion command (guarded)."""

    def __init__(
        self,
        secrets: SecretsServiceProtocol,
        guard: ConcurrencyGuard,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            secrets: Secrets service.
            guard: Optimistic concurrency guard.
            logger: Logger.
        """
        self._secrets = secrets
        self._guard = guard
        self._logger = logger

    async def handle(self, cmd: AddSecretVersion) -> Result[Operation, DomainError]:
        """Handle AddSecretVersion command.

        Returns:
            Success(Operation): Upstream addVersion operation.
            Failure(ValidationError): No changes or an invalid key.
            Failure(VersionConflictError): Base version is no longer current.
            Failure(GatewayError): Upstream failure.
        """
        if not cmd.payload_entries:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.EMPTY_VERSION,
                    message="A new version needs at least one payload entry change",
                    field="payload_entries",
                )
            )
        keys = validate_payload_keys(e.key for e in cmd.payload_entries)
        if isinstance(keys, Failure):
            return keys

        if cmd.base_version_id:
            checked = await self._guard.check(
                cmd.session,
                SecretVersionRef(
                    secret_id=cmd.secret_id, version_id=cmd.base_version_id
                ),
            )
            if isinstance(checked, Failure):
                return checked

        result = await self._secrets.add_version(
            cmd.session,
            cmd.secret_id,
            payload_entries=cmd.payload_entries,
            description=cmd.description,
            base_version_id=cmd.base_version_id,
        )
        if isinstance(result, Failure):
            return result

        self._logger.info(
            "secret_version_add_requested",
            secret_id=cmd.secret_id,
            base_version_id=cmd.base_version_id,
            changes=len(cmd.payload_entries),
            removals=sum(1 for e in cmd.payload_entries if e.is_removal),
        )
        return result
