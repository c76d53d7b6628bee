"""AccessTokenProviderProtocol: resolve the bearer token for a session.

Implemented by the application-layer TokenManager; consumed by the API
gateway so it never has to know how tokens are refreshed.
"""

from typing import Protocol

from src.domain.entities.session import Session
from src.domain.value_objects.access_token import AccessToken


class AccessTokenProviderProtocol(Protocol):
    """Resolve a usable (or best-effort) access token for a session."""

    async def get_access_token(self, session: Session) -> AccessToken | None:
        """Return the token to send upstream, or None when unauthenticated.

        Never raises on refresh failure: the last known token (possibly
        expired) is returned instead.
        """
        ...
