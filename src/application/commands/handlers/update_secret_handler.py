"""UpdateSecret command handler.

The update mask is derived from the fields the caller supplied; at least one
field is required.
"""

from src.application.commands.secret_commands import UpdateSecret
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result
from src.domain.entities import Operation
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.secrets_service_protocol import SecretsServiceProtocol
from src.domain.validators import validate_secret_name


def build_update_mask(cmd: UpdateSecret) -> list[str]:
    """Upstream field paths of the supplied fields.

    Example:
        >>> build_update_mask(UpdateSecret(session=s, secret_id="e6q", name="db"))
        ['name']
    """
    fields = {
        "name": cmd.name,
        "description": cmd.description,
        "labels": cmd.labels,
        "deletionProtection": cmd.deletion_protection,
    }
    return [path for path, value in fields.items() if value is not None]


class UpdateSecretHandler:
    """Handler for UpdateSecret command."""

    def __init__(
        self,
        secrets: SecretsServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._secrets = secrets
        self._logger = logger

    async def handle(self, cmd: UpdateSecret) -> Result[Operation, DomainError]:
        """Handle UpdateSecret command.

        Returns:
            Success(Operation): Upstream update operation.
            Failure(ValidationError): Nothing to update or invalid name.
            Failure(GatewayError): Upstream failure.
        """
        update_mask = build_update_mask(cmd)
        if not update_mask:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="At least one field must be provided for update",
                )
            )
        if cmd.name is not None:
            named = validate_secret_name(cmd.name)
            if isinstance(named, Failure):
                return named

        result = await self._secrets.update_secret(
            cmd.session,
            cmd.secret_id,
            update_mask=update_mask,
            name=cmd.name,
            description=cmd.description,
            labels=cmd.labels,
            deletion_protection=cmd.deletion_protection,
        )
        if isinstance(result, Failure):
            return result

        self._logger.info(
            "secret_update_requested",
            secret_id=cmd.secret_id,
            update_mask=",".join(update_mask),
        )
        return result
