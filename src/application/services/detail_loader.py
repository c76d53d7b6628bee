"""Secret detail view loader.

Newly created secrets can be briefly invisible to reads (eventual
consistency), so the detail view retries the primary fetch before giving up:

    primary   GET secret           1 + retries attempts, fixed delay between
    secondary list versions        concurrent; failure degrades to []
              get payload          concurrent; one extra retry after the
                                   same delay, then degrades to no entries

When the primary fetch never succeeds the caller gets a DetailLoadError with
``retryable=True`` so the UI can offer a manual retry.
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.entities import Payload, Secret, SecretVersion
from src.domain.entities.session import Session
from src.domain.errors import DetailLoadError, UpstreamError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.secrets_service_protocol import SecretsServiceProtocol


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretDetail:
    """Everything the detail view renders.

    Attributes:
        secret: Secret metadata.
        versions: Versions (empty when the listing failed).
        payload: Entries of the selected version (empty when unavailable).
        selected_version_id: Payload's version id, else the current version id.
    """

    secret: Secret
    versions: list[SecretVersion] = field(default_factory=list)
    payload: Payload = field(default_factory=Payload)
    selected_version_id: str | None = None


class SecretDetailLoader:
    """Load a secret with its versions and payload, tolerating lag."""

    def __init__(
        self,
        *,
        secrets: SecretsServiceProtocol,
        logger: LoggerProtocol,
        retries: int = 3,
        retry_delay: float = 1.5,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize loader.

        Args:
            secrets: Secrets service.
            logger: Logger.
            retries: Extra attempts for the primary fetch.
            retry_delay: Seconds between attempts.
            sleep: Awaitable sleep (replaced in tests).
        """
        self._secrets = secrets
        self._logger = logger
        self._retries = retries
        self._retry_delay = retry_delay
        self._sleep = sleep

    async def load(
        self,
        session: Session,
        secret_id: str,
        version_id: str | None = None,
    ) -> Result[SecretDetail, DetailLoadError | AuthenticationError]:
        """Load the detail view of a secret.

        Args:
            session: Caller's session.
            secret_id: Secret to load.
            version_id: Version whose payload to show (current by default).

        Returns:
            Success(SecretDetail): Secret loaded (secondary data may be empty).
            Failure(AuthenticationError): No token; not retried.
            Failure(DetailLoadError): Primary fetch failed on every attempt.
        """
        primary = await self._load_secret(session, secret_id)
        if isinstance(primary, Failure):
            return primary
        secret = primary.value

        versions_result, payload = await asyncio.gather(
            self._secrets.list_versions(session, secret_id),
            self._load_payload(session, secret_id, version_id),
        )

        versions: list[SecretVersion] = []
        match versions_result:
            case Success(value=page):
                versions = page.items
            case Failure(error=error):
                self._logger.warning(
                    "secret_versions_unavailable",
                    secret_id=secret_id,
                    reason=error.message,
                )

        return Success(
            value=SecretDetail(
                secret=secret,
                versions=versions,
                payload=payload,
                selected_version_id=payload.version_id or secret.current_version_id,
            )
        )

    async def _load_secret(
        self, session: Session, secret_id: str
    ) -> Result[Secret, DetailLoadError | AuthenticationError]:
        attempts = self._retries + 1
        last_error: UpstreamError | None = None

        for attempt in range(1, attempts + 1):
            match await self._secrets.get_secret(session, secret_id):
                case Success(value=secret):
                    if attempt > 1:
                        self._logger.info(
                            "secret_detail_loaded_after_retry",
                            secret_id=secret_id,
                            attempts=attempt,
                        )
                    return Success(value=secret)
                case Failure(error=AuthenticationError() as error):
                    return Failure(error=error)
                case Failure(error=error):
                    last_error = error
                    self._logger.warning(
                        "secret_detail_fetch_failed",
                        secret_id=secret_id,
                        attempt=attempt,
                        max_attempts=attempts,
                        status_code=error.status_code,
                    )
            if attempt < attempts:
                await self._sleep(self._retry_delay)

        assert last_error is not None
        self._logger.error(
            "secret_detail_load_failed",
            secret_id=secret_id,
            attempts=attempts,
            status_code=last_error.status_code,
        )
        return Failure(
            error=DetailLoadError(
                code=ErrorCode.SECRET_DETAIL_LOAD_FAILED,
                message=last_error.message,
                secret_id=secret_id,
                attempts=attempts,
                status_code=last_error.status_code,
                retryable=True,
            )
        )

    async def _load_payload(
        self, session: Session, secret_id: str, version_id: str | None
    ) -> Payload:
        for attempt in (1, 2):
            match await self._secrets.get_payload(
                session, secret_id, version_id=version_id
            ):
                case Success(value=payload):
                    return payload
                case Failure(error=error):
                    self._logger.warning(
                        "secret_payload_fetch_failed",
                        secret_id=secret_id,
                        attempt=attempt,
                        reason=error.message,
                    )
            if attempt == 1:
                await self._sleep(self._retry_delay)
        return Payload()
