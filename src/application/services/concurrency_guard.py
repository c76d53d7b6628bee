"""Optimistic concurrency guard for version-creating mutations.

Before a new secret version is created, the secret's current version is
re-fetched and compared with the version the edit started from. A mismatch
means another editor got there first: the mutation is not sent and a
VersionConflictError is returned instead.

The check is advisory. Another write can still land between the check and
the mutation; authoritative detection belongs to the upstream service.

Outcomes:
    - current version differs from expected  -> Failure(VersionConflictError)
    - ids match                              -> Success(None)
    - secret has no current version          -> Success(None)
    - pre-check fetch fails                  -> Success(None), logged
"""

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities.session import Session
from src.domain.errors import VersionConflictError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.secrets_service_protocol import SecretsServiceProtocol
from src.domain.value_objects.secret_version_ref import SecretVersionRef


class ConcurrencyGuard:
    """Compare the expected base version with the server's current version."""

    def __init__(
        self,
        *,
        secrets: SecretsServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._secrets = secrets
        self._logger = logger

    async def check(
        self, session: Session, expected: SecretVersionRef
    ) -> Result[None, VersionConflictError]:
        """Verify ``expected`` is still the secret's current version.

        Args:
            session: Caller's session.
            expected: Secret and version the edit was prepared against.

        Returns:
            Success(None): Safe to proceed (or check inconclusive).
            Failure(VersionConflictError): Current version changed.
        """
        match await self._secrets.get_secret(session, expected.secret_id):
            case Failure(error=error):
                self._logger.warning(
                    "version_check_failed_proceeding",
                    secret_id=expected.secret_id,
                    reason=error.message,
                )
                return Success(value=None)
            case Success(value=secret):
                actual = secret.current_version_id

        if actual is not None and actual != expected.version_id:
            self._logger.warning(
                "secret_version_conflict",
                secret_id=expected.secret_id,
                expected_version_id=expected.version_id,
                actual_version_id=actual,
            )
            return Failure(
                error=VersionConflictError(
                    code=ErrorCode.SECRET_VERSION_CONFLICT,
                    message=(
                        "Secret was modified by someone else. "
                        "Reload it and apply your changes again."
                    ),
                    resource_type="secret",
                    secret_id=expected.secret_id,
                    expected_version_id=expected.version_id,
                    actual_version_id=actual,
                )
            )

        return Success(value=None)
