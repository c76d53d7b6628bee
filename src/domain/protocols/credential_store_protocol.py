"""CredentialStoreProtocol: persist a session across browser requests.

The store owns the wire representation (cookies); everything else works on
the explicit Session entity. The protocol only depends on a cookie mapping
for reads and a minimal cookie writer for writes, so the domain stays free
of web framework imports.

Implementation: src/infrastructure/session/cookie_credential_store.py
"""

from collections.abc import Mapping
from typing import Any, Protocol

from src.domain.entities.session import Session


class CookieWriter(Protocol):
    """Anything that can set and delete cookies (e.g. a Starlette Response)."""

    def set_cookie(self, key: str, value: str = "", *args: Any, **kwargs: Any) -> None:
        """Set a cookie."""
        ...

    def delete_cookie(self, key: str, *args: Any, **kwargs: Any) -> None:
        """Expire a cookie."""
        ...


class CredentialStoreProtocol(Protocol):
    """Load, persist and clear browser sessions."""

    def load(self, cookies: Mapping[str, str]) -> Session:
        """Read the session from request cookies (anonymous if none/invalid)."""
        ...

    def persist(self, response: CookieWriter, session: Session) -> None:
        """Write credential, access token and expiry cookies."""
        ...

    def clear(self, response: CookieWriter) -> None:
        """Expire every session cookie."""
        ...
