"""Short-lived access token value object.

Immutable pairing of the bearer string with its absolute expiry. The token
is derived from the long-lived credential by the identity exchange and is
replaced whenever it goes stale.

Usage:
    from src.domain.value_objects import AccessToken

    token = AccessToken(value="t1.9euelZ...", expires_at=expires_at)
    if token.is_usable(buffer=timedelta(minutes=5)):
        headers = {"Authorization": f"Bearer {token.value}"}
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessToken:
    """Short-lived bearer token with an absolute expiry.

    Attributes:
        value: Opaque bearer string (never logged).
        expires_at: Timezone-aware expiry, or None when unknown.
    """

    value: str
    expires_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate token after initialization.

        Raises:
            ValueError: If value is empty or expires_at is naive.
        """
        if not self.value:
            raise ValueError("access token value cannot be empty")
        if self.expires_at is not None and self.expires_at.tzinfo is None:
            raise ValueError("expires_at must be timezone-aware")

    def is_usable(
        self,
        *,
        buffer: timedelta = timedelta(minutes=5),
        now: datetime | None = None,
    ) -> bool:
        """Check whether the token can be sent as-is.

        A token is usable strictly before ``expires_at - buffer``; the buffer
        keeps a token from expiring in the middle of a request. A token with
        an unknown expiry is never usable.

        Args:
            buffer: Refresh window before expiry.
            now: Reference time (defaults to current UTC time).

        Returns:
            bool: True if the token should be used without refreshing.
        """
        if self.expires_at is None:
            return False
        current = now or datetime.now(UTC)
        return current < self.expires_at - buffer

    def __repr__(self) -> str:
        return f"AccessToken(value=<redacted>, expires_at={self.expires_at!r})"
