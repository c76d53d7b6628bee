"""Ports for browsing the resource hierarchy and encryption keys.

Implementations:
    - src/infrastructure/cloud/resource_manager_client.py (both)
"""

from typing import Protocol

from src.core.result import Result
from src.domain.entities import Cloud, Folder, KmsKey, Page
from src.domain.entities.session import Session
from src.domain.errors import GatewayError


class ResourceManagerProtocol(Protocol):
    """Clouds and folders."""

    async def list_clouds(
        self,
        session: Session,
        *,
        page_size: int | None = None,
        page_token: str | None = None,
    ) -> Result[Page[Cloud], GatewayError]:
        """List clouds visible to the session (one page)."""
        ...

    async def list_folders(
        self,
        session: Session,
        cloud_id: str,
        *,
        page_token: str | None = None,
    ) -> Result[Page[Folder], GatewayError]:
        """List folders of a cloud (one page)."""
        ...


class KmsProtocol(Protocol):
    """KMS symmetric keys."""

    async def list_keys(
        self,
        session: Session,
        folder_id: str,
        *,
        page_token: str | None = None,
    ) -> Result[Page[KmsKey], GatewayError]:
        """List keys in a folder (one page)."""
        ...
