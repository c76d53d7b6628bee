"""Access token lifecycle service.

Decides whether a session's cached access token can be sent as-is or must be
refreshed through the identity exchange. Implements
AccessTokenProviderProtocol for the API gateway.

Rules:
    0. Session already resolved for this request: return its token as-is,
       no network call (a failed refresh is not retried within a request).
    1. Token present and usable (``now < expires_at - buffer``): return it,
       no network call.
    2. Otherwise, with a credential: exchange exactly once. Success returns
       the new token; failure is logged and the previous token (possibly
       expired) or None is returned.
    3. No credential: return the stale token if any, else None.

The manager never mutates the session; persisting a refreshed token is the
caller's job (see the authenticated session dependency).

Usage:
    manager = TokenManager(identity_exchange=exchange, logger=logger)
    token = await manager.get_access_token(session)
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from src.core.result import Failure, Success
from src.domain.entities.session import Session
from src.domain.protocols.identity_exchange_protocol import IdentityExchangeProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.access_token import AccessToken


def _utc_now() -> datetime:
    return datetime.now(UTC)


class TokenManager:
    """Resolve the bearer token for a session, refreshing near expiry.

    Dependencies (injected via constructor):
        - IdentityExchangeProtocol: credential -> access token
        - LoggerProtocol: structured logging

    Attributes:
        _refresh_buffer: Window before expiry in which the token is refreshed.
        _clock: Current time source (UTC).
    """

    def __init__(
        self,
        *,
        identity_exchange: IdentityExchangeProtocol,
        logger: LoggerProtocol,
        refresh_buffer: timedelta = timedelta(minutes=5),
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize token manager.

        Args:
            identity_exchange: Identity exchange adapter.
            logger: Logger.
            refresh_buffer: Refresh this long before expiry.
            clock: Returns the current aware datetime.
        """
        self._identity_exchange = identity_exchange
        self._logger = logger
        self._refresh_buffer = refresh_buffer
        self._clock = clock

    async def get_access_token(self, session: Session) -> AccessToken | None:
        """Return the token to use for an upstream call.

        Args:
            session: Caller's session (not modified).

        Returns:
            AccessToken: Usable, freshly exchanged, or stale fallback token.
            None: Nothing to send (unauthenticated).
        """
        current = session.access_token
        if session.token_resolved:
            return current
        if current is not None and current.is_usable(
            buffer=self._refresh_buffer, now=self._clock()
        ):
            return current

        if not session.credential:
            if current is not None:
                self._logger.debug("access_token_stale_without_credential")
            return current

        match await self._identity_exchange.exchange(session.credential):
            case Success(value=token):
                self._logger.info(
                    "access_token_refreshed",
                    expires_at=token.expires_at.isoformat()
                    if token.expires_at
                    else None,
                )
                return token
            case Failure(error=error):
                self._logger.warning(
                    "token_refresh_failed",
                    status_code=error.status_code,
                    reason=error.message,
                    has_fallback_token=current is not None,
                )
                return current
