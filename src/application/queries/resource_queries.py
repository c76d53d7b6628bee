"""Resource hierarchy queries (clouds, folders, KMS keys)."""

from dataclasses import dataclass

from src.domain.entities.session import Session


@dataclass(frozen=True, kw_only=True)
class ListClouds:
    """List clouds visible to the session."""

    session: Session
    page_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class ListFolders:
    """List folders of a cloud.

    Attributes:
        session: Caller's session.
        cloud_id: Cloud to list (required).
        page_token: Continuation token.
    """

    session: Session
    cloud_id: str | None
    page_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class ListKmsKeys:
    """List KMS keys of a folder (for the create-secret key picker).

    Attributes:
        session: Caller's session.
        folder_id: Folder to list (required).
    """

    session: Session
    folder_id: str | None
