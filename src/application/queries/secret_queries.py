"""Secret queries (CQRS read operations).

Queries are immutable dataclasses with question-like names. They NEVER
change state.
"""

from dataclasses import dataclass

from src.domain.entities.session import Session


@dataclass(frozen=True, kw_only=True)
class ListSecrets:
    """List secrets in a folder (one page).

    Attributes:
        session: Caller's session.
        folder_id: Folder to list (required).
        page_token: Continuation token from a previous page.
    """

    session: Session
    folder_id: str | None
    page_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class GetSecret:
    """Get secret metadata."""

    session: Session
    secret_id: str


@dataclass(frozen=True, kw_only=True)
class GetSecretPayload:
    """Get decrypted entries of a version (current version by default)."""

    session: Session
    secret_id: str
    version_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class ListSecretVersions:
    """List versions of a secret (one page)."""

    session: Session
    secret_id: str
    page_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class LoadSecretDetail:
    """Load the detail view: secret, versions and payload.

    Attributes:
        session: Caller's session.
        secret_id: Secret to show.
        version_id: Version whose payload to show (current by default).
    """

    session: Session
    secret_id: str
    version_id: str | None = None
