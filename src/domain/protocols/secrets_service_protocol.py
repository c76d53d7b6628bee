"""SecretsServiceProtocol for the upstream secrets service (Lockbox).

Port (interface) for hexagonal architecture. Every method takes the
caller's Session explicitly; the implementation resolves the bearer token
through the API gateway. Methods return Result types; upstream failures are
GatewayError values, never exceptions.

Implementation: src/infrastructure/cloud/lockbox_client.py
"""

from typing import Protocol

from src.core.result import Result
from src.domain.entities import Operation, Page, Payload, Secret, SecretVersion
from src.domain.entities.session import Session
from src.domain.errors import GatewayError
from src.domain.value_objects.payload_entry_change import PayloadEntryChange


class SecretsServiceProtocol(Protocol):
    """Secret, version and payload operations."""

    async def list_secrets(
        self,
        session: Session,
        folder_id: str,
        *,
        page_token: str | None = None,
    ) -> Result[Page[Secret], GatewayError]:
        """List secrets in a folder (one page)."""
        ...

    async def get_secret(
        self, session: Session, secret_id: str
    ) -> Result[Secret, GatewayError]:
        """Fetch secret metadata including its current version."""
        ...

    async def create_secret(
        self,
        session: Session,
        *,
        folder_id: str,
        name: str,
        description: str | None = None,
        labels: dict[str, str] | None = None,
        kms_key_id: str | None = None,
        deletion_protection: bool = False,
        version_description: str | None = None,
        payload_entries: list[PayloadEntryChange] | None = None,
    ) -> Result[Operation, GatewayError]:
        """Create a secret, optionally with an initial version."""
        ...

    async def update_secret(
        self,
        session: Session,
        secret_id: str,
        *,
        update_mask: list[str],
        name: str | None = None,
        description: str | None = None,
        labels: dict[str, str] | None = None,
        deletion_protection: bool | None = None,
    ) -> Result[Operation, GatewayError]:
        """Update the masked metadata fields of a secret."""
        ...

    async def delete_secret(
        self, session: Session, secret_id: str
    ) -> Result[Operation, GatewayError]:
        """Delete a secret."""
        ...

    async def get_payload(
        self,
        session: Session,
        secret_id: str,
        *,
        version_id: str | None = None,
    ) -> Result[Payload, GatewayError]:
        """Fetch decrypted entries of a version (current version by default)."""
        ...

    async def list_versions(
        self,
        session: Session,
        secret_id: str,
        *,
        page_token: str | None = None,
    ) -> Result[Page[SecretVersion], GatewayError]:
        """List versions of a secret (one page)."""
        ...

    async def add_version(
        self,
        session: Session,
        secret_id: str,
        *,
        payload_entries: list[PayloadEntryChange],
        description: str | None = None,
        base_version_id: str | None = None,
    ) -> Result[Operation, GatewayError]:
        """Create a new current version from ``base_version_id`` plus changes."""
        ...

    async def schedule_version_destruction(
        self,
        session: Session,
        secret_id: str,
        version_id: str,
        *,
        pending_period: str | None = None,
    ) -> Result[Operation, GatewayError]:
        """Schedule a version for destruction after ``pending_period``."""
        ...

    async def cancel_version_destruction(
        self, session: Session, secret_id: str, version_id: str
    ) -> Result[Operation, GatewayError]:
        """Cancel a pending version destruction."""
        ...
