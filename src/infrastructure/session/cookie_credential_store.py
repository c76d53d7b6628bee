"""Cookie-backed credential store implementing CredentialStoreProtocol.

Three httpOnly cookies, each value sealed with AES-256-GCM:

    oauth_token     long-lived credential        (~1 year)
    iam_token       short-lived access token     (~12 hours)
    iam_expires_at  access token expiry, ISO 8601 (~12 hours)

A cookie that is missing, malformed or fails authentication is treated as
absent, so a tampered session degrades to an anonymous one.
"""

from collections.abc import Mapping

import structlog

from src.core.constants import (
    ACCESS_TOKEN_COOKIE,
    ACCESS_TOKEN_EXPIRES_COOKIE,
    CREDENTIAL_COOKIE,
)
from src.core.result import Failure, Success
from src.domain.entities.session import Session
from src.domain.protocols.credential_store_protocol import CookieWriter
from src.domain.protocols.encryption_protocol import EncryptionProtocol
from src.domain.value_objects.access_token import AccessToken
from src.infrastructure.cloud.mappers import parse_timestamp

logger = structlog.get_logger(__name__)

_VALUE_FIELD = "v"
SESSION_COOKIES = (CREDENTIAL_COOKIE, ACCESS_TOKEN_COOKIE, ACCESS_TOKEN_EXPIRES_COOKIE)


class CookieCredentialStore:
    """Persist sessions in encrypted browser cookies.

    Attributes:
        _encryption: Seals and unseals cookie values.
        _secure: Secure flag for every cookie.
        _credential_max_age: Credential cookie lifetime (seconds).
        _access_token_max_age: Access token and expiry cookie lifetime (seconds).
    """

    def __init__(
        self,
        *,
        encryption: EncryptionProtocol,
        secure: bool,
        credential_max_age: int,
        access_token_max_age: int,
    ) -> None:
        self._encryption = encryption
        self._secure = secure
        self._credential_max_age = credential_max_age
        self._access_token_max_age = access_token_max_age

    def load(self, cookies: Mapping[str, str]) -> Session:
        """Rebuild the session from request cookies.

        Args:
            cookies: Request cookies.

        Returns:
            Session: Anonymous when nothing valid is stored.
        """
        credential = self._read(cookies, CREDENTIAL_COOKIE)
        token_value = self._read(cookies, ACCESS_TOKEN_COOKIE)
        expires_at = parse_timestamp(self._read(cookies, ACCESS_TOKEN_EXPIRES_COOKIE))

        access_token = (
            AccessToken(value=token_value, expires_at=expires_at)
            if token_value
            else None
        )
        return Session(credential=credential, access_token=access_token)

    def persist(self, response: CookieWriter, session: Session) -> None:
        """Write the session's credential, token and expiry cookies.

        Fields the session does not carry are left untouched, except the
        expiry cookie, which is removed when the new token has no expiry.
        """
        if session.credential:
            self._write(
                response,
                CREDENTIAL_COOKIE,
                session.credential,
                self._credential_max_age,
            )
        token = session.access_token
        if token is None:
            return
        self._write(
            response, ACCESS_TOKEN_COOKIE, token.value, self._access_token_max_age
        )
        if token.expires_at is not None:
            self._write(
                response,
                ACCESS_TOKEN_EXPIRES_COOKIE,
                token.expires_at.isoformat(),
                self._access_token_max_age,
            )
        else:
            self._delete(response, ACCESS_TOKEN_EXPIRES_COOKIE)

    def clear(self, response: CookieWriter) -> None:
        """Expire every session cookie."""
        for name in SESSION_COOKIES:
            self._delete(response, name)

    def _read(self, cookies: Mapping[str, str], name: str) -> str | None:
        raw = cookies.get(name)
        if not raw:
            return None
        match self._encryption.unseal(raw):
            case Success(value=data):
                value = data.get(_VALUE_FIELD)
                return value if isinstance(value, str) and value else None
            case Failure(error=error):
                logger.warning(
                    "session_cookie_rejected", cookie=name, reason=error.message
                )
                return None

    def _write(
        self, response: CookieWriter, name: str, value: str, max_age: int
    ) -> None:
        match self._encryption.seal({_VALUE_FIELD: value}):
            case Success(value=sealed):
                response.set_cookie(
                    name,
                    sealed,
                    max_age=max_age,
                    path="/",
                    secure=self._secure,
                    httponly=True,
                    samesite="lax",
                )
            case Failure(error=error):
                logger.error(
                    "session_cookie_seal_failed", cookie=name, reason=error.message
                )

    def _delete(self, response: CookieWriter, name: str) -> None:
        response.delete_cookie(
            name, path="/", secure=self._secure, httponly=True, samesite="lax"
        )
