"""CreateSecret command handler.

Flow:
1. Require folder id and name; validate the name and every payload key
2. Create the secret (with its initial version when entries are given)
3. Return Success(Operation)

Validation failures never reach the network.
"""

from src.application.commands.secret_commands import CreateSecret
from src.core.errors import DomainError
from src.core.result import Failure, Result
from src.domain.entities import Operation
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.secrets_service_protocol import SecretsServiceProtocol
from src.domain.validators import require, validate_payload_keys, validate_secret_name


class CreateSecretHandler:
    """Handler for CreateSecret command."""

    def __init__(
        self,
        secrets: SecretsServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._secrets = secrets
        self._logger = logger

    async def handle(self, cmd: CreateSecret) -> Result[Operation, DomainError]:
        """Handle CreateSecret command.

        Returns:
            Success(Operation): Upstream create operation.
            Failure(ValidationError): Missing/invalid folder, name or keys.
            Failure(GatewayError): Upstream failure.
        """
        for value, field in ((cmd.folder_id, "folder_id"), (cmd.name, "name")):
            required = require(value, field=field)
            if isinstance(required, Failure):
                return required

        for check in (
            validate_secret_name(cmd.name),
            validate_payload_keys(e.key for e in cmd.payload_entries),
        ):
            if isinstance(check, Failure):
                return check

        result = await self._secrets.create_secret(
            cmd.session,
            folder_id=cmd.folder_id,
            name=cmd.name,
            description=cmd.description,
            labels=cmd.labels,
            kms_key_id=cmd.kms_key_id,
            deletion_protection=cmd.deletion_protection,
            version_description=cmd.version_description,
            payload_entries=cmd.payload_entries,
        )
        if isinstance(result, Failure):
            return result

        self._logger.info(
            "secret_create_requested",
            folder_id=cmd.folder_id,
            operation_id=result.value.id,
            entry_count=len(cmd.payload_entries),
        )
        return result
