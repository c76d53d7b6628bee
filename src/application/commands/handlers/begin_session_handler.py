"""BeginSession command handler.

Flow:
1. Validate the credential is present (no network call otherwise)
2. Exchange credential -> access token (identity service)
3. Validation probe: list clouds (page size 1) with the new token
4. Return Success(Session); the presentation layer persists it

Exchange failures keep the identity service's status. Probe failures are
reported as AuthenticationError ("Token validation failed: ...").

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (adapters are injected via protocols)
"""

from src.application.commands.session_commands import BeginSession
from src.core.constants import PROBE_PAGE_SIZE
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.session import Session
from src.domain.protocols.identity_exchange_protocol import IdentityExchangeProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.resource_directory_protocol import ResourceManagerProtocol
from src.domain.validators import require


class BeginSessionHandler:
    """Handler for BeginSession command (login)."""

    def __init__(
        self,
        identity_exchange: IdentityExchangeProtocol,
        resource_manager: ResourceManagerProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            identity_exchange: Credential -> access token exchange.
            resource_manager: Used for the validation probe.
            logger: Logger.
        """
        self._identity_exchange = identity_exchange
        self._resource_manager = resource_manager
        self._logger = logger

    async def handle(self, cmd: BeginSession) -> Result[Session, DomainError]:
        """Handle BeginSession command.

        Args:
            cmd: BeginSession command.

        Returns:
            Success(Session): Authenticated session to persist.
            Failure(ValidationError): Empty credential.
            Failure(UpstreamError): Exchange rejected or service unreachable.
            Failure(AuthenticationError): Token failed the validation probe.
        """
        validated = require(cmd.credential, field="credential")
        if isinstance(validated, Failure):
            return validated
        credential = validated.value.strip()

        exchanged = await self._identity_exchange.exchange(credential)
        if isinstance(exchanged, Failure):
            self._logger.warning(
                "session_begin_exchange_failed",
                status_code=exchanged.error.status_code,
            )
            return exchanged

        session = Session(
            credential=credential,
            access_token=exchanged.value,
            token_resolved=True,
        )

        match await self._resource_manager.list_clouds(
            session, page_size=PROBE_PAGE_SIZE
        ):
            case Failure(error=error):
                self._logger.warning(
                    "session_begin_validation_failed", reason=error.message
                )
                return Failure(
                    error=AuthenticationError(
                        code=ErrorCode.TOKEN_VALIDATION_FAILED,
                        message=f"Token validation failed: {error.message}",
                    )
                )
            case Success():
                self._logger.info("session_begun", expires_at=_iso(session))
                return Success(value=session)


def _iso(session: Session) -> str | None:
    return session.expires_at.isoformat() if session.expires_at else None
