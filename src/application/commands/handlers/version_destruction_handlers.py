"""Version destruction command handlers (schedule and cancel)."""

from src.application.commands.secret_commands import (
    CancelVersionDestruction,
    ScheduleVersionDestruction,
)
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.entities import Operation
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.secrets_service_protocol import SecretsServiceProtocol


class ScheduleVersionDestructionHandler:
    """Handler for ScheduleVersionDestruction command."""

    def __init__(
        self,
        secrets: SecretsServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._secrets = secrets
        self._logger = logger

    async def handle(
        self, cmd: ScheduleVersionDestruction
    ) -> Result[Operation, DomainError]:
        result = await self._secrets.schedule_version_destruction(
            cmd.session,
            cmd.secret_id,
            cmd.version_id,
            pending_period=cmd.pending_period,
        )
        if isinstance(result, Success):
            self._logger.info(
                "version_destruction_scheduled",
                secret_id=cmd.secret_id,
                version_id=cmd.version_id,
                pending_period=cmd.pending_period,
            )
        return result


class CancelVersionDestructionHandler:
    """Handler for CancelVersionDestruction command."""

    def __init__(
        self,
        secrets: SecretsServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._secrets = secrets
        self._logger = logger

    async def handle(
        self, cmd: CancelVersionDestruction
    ) -> Result[Operation, DomainError]:
        result = await self._secrets.cancel_version_destruction(
            cmd.session, cmd.secret_id, cmd.version_id
        )
        if isinstance(result, Success):
            self._logger.info(
                "version_destruction_cancelled",
                secret_id=cmd.secret_id,
                version_id=cmd.version_id,
            )
        return result
