"""Browser session entity.

Pure business logic, no framework dependencies.

A session holds the long-lived credential and the most recent short-lived
access token for one browser. It is loaded from the credential store at the
start of every request and passed explicitly to whatever needs it; there is
no process-wide session state.

Lifecycle:
    - Created by a successful login exchange + validation probe
    - Destroyed on logout (credential, token and expiry all cleared)
"""

from dataclasses import dataclass, field
from datetime import datetime

from src.domain.value_objects.access_token import AccessToken


@dataclass(frozen=True, slots=True, kw_only=True)
class Session:
    """Per-browser authentication state.

    Business Rules:
        - Authenticated iff both credential and access token are present
        - The access token may be stale; the token manager decides whether
          to refresh it

    Attributes:
        credential: Long-lived credential (opaque, never logged).
        access_token: Last known access token, possibly expired.
        token_resolved: The token was already resolved for the current
            request (refreshed, or kept after a failed refresh). Never
            persisted.
    """

    credential: str | None = None
    access_token: AccessToken | None = None
    token_resolved: bool = field(default=False, compare=False)

    @classmethod
    def anonymous(cls) -> "Session":
        """Return a session with nothing stored."""
        return cls()

    @property
    def is_authenticated(self) -> bool:
        """Whether both credential and access token are present."""
        return bool(self.credential) and self.access_token is not None

    @property
    def expires_at(self) -> datetime | None:
        """Expiry of the stored access token, if known."""
        if self.access_token is None:
            return None
        return self.access_token.expires_at

    def resolved(self, token: AccessToken | None) -> "Session":
        """Return a copy pinned to ``token`` for the rest of the request."""
        return Session(
            credential=self.credential, access_token=token, token_resolved=True
        )

    def __repr__(self) -> str:
        return (
            f"Session(credential={'<redacted>' if self.credential else None}, "
            f"access_token={self.access_token!r})"
        )
