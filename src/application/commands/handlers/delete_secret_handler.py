"""DeleteSecret command handler."""

from src.application.commands.secret_commands import DeleteSecret
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.entities import Operation
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.secrets_service_protocol import SecretsServiceProtocol


class DeleteSecretHandler:
    """Handler for DeleteSecret command."""

    def __init__(
        self,
        secrets: SecretsServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._secrets = secrets
        self._logger = logger

    async def handle(self, cmd: DeleteSecret) -> Result[Operation, DomainError]:
        result = await self._secrets.delete_secret(cmd.session, cmd.secret_id)
        if isinstance(result, Success):
            self._logger.info("secret_delete_requested", secret_id=cmd.secret_id)
        return result
