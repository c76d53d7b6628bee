"""RollbackSecretVersion command handler.

A rollback creates a NEW version whose entries are copied from the target
version; history is never rewritten.

Flow:
1. Concurrency guard when a base version id is supplied
2. Load the target version's payload; no entries -> ValidationError
3. Add a version re-setting every entry (text, else binary, else "")
   described as "Rollback to version <first 8 chars>..."
"""

from src.application.commands.secret_commands import RollbackSecretVersion
from src.application.services.concurrency_guard import ConcurrencyGuard
from src.core.constants import ROLLBACK_VERSION_ID_PREFIX_LENGTH
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result
from src.domain.entities import Operation
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.secrets_service_protocol import SecretsServiceProtocol
from src.domain.value_objects.payload_entry_change import PayloadEntryChange
from src.domain.value_objects.secret_version_ref import SecretVersionRef


def rollback_description(version_id: str) -> str:
    """Description of the version created by a rollback.

    Example:
        >>> rollback_description("e6q0123456789abcdef")
        'Rollback to version e6q01234...'
    """
    return f"Rollback to version {version_id[:ROLLBACK_VERSION_ID_PREFIX_LENGTH]}..."


class RollbackSecretVersionHandler:
    """Handler for RollbackSecretVersion command (guarded)."""

    def __init__(
        self,
        secrets: SecretsServiceProtocol,
        guard: ConcurrencyGuard,
        logger: LoggerProtocol,
    ) -> None:
        self._secrets = secrets
        self._guard = guard
        self._logger = logger

    async def handle(
        self, cmd: RollbackSecretVersion
    ) -> Result[Operation, DomainError]:
        """Handle RollbackSecretVersion command.

        Returns:
            Success(Operation): Upstream addVersion operation.
            Failure(VersionConflictError): Base version is no longer current.
            Failure(ValidationError): Target version has no entries.
            Failure(GatewayError): Upstream failure.
        """
        if cmd.base_version_id:
            checked = await self._guard.check(
                cmd.session,
                SecretVersionRef(
                    secret_id=cmd.secret_id, version_id=cmd.base_version_id
                ),
            )
            if isinstance(checked, Failure):
                return checked

        payload = await self._secrets.get_payload(
            cmd.session, cmd.secret_id, version_id=cmd.version_id
        )
        if isinstance(payload, Failure):
            return payload

        if not payload.value.entries:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.EMPTY_VERSION,
                    message="Version has no entries to restore",
                    field="version_id",
                )
            )

        changes = [
            PayloadEntryChange(key=entry.key, text_value=entry.value)
            for entry in payload.value.entries
        ]
        result = await self._secrets.add_version(
            cmd.session,
            cmd.secret_id,
            payload_entries=changes,
            description=rollback_description(cmd.version_id),
            base_version_id=cmd.base_version_id,
        )
        if isinstance(result, Failure):
            return result

        self._logger.info(
            "secret_rollback_requested",
            secret_id=cmd.secret_id,
            target_version_id=cmd.version_id,
            entry_count=len(changes),
        )
        return result
