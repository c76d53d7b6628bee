"""Resource hierarchy query handlers (clouds, folders, KMS keys).

The KMS key listing never fails on upstream errors: the create-secret form
falls back to manual key entry, so the handler returns an empty list together
with the error message instead.
"""

from dataclasses import dataclass, field

from src.application.queries.resource_queries import ListClouds, ListFolders, ListKmsKeys
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Cloud, Folder, KmsKey, Page
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.resource_directory_protocol import (
    KmsProtocol,
    ResourceManagerProtocol,
)
from src.domain.validators import require


@dataclass
class KmsKeyListResult:
    """KMS keys for the key picker.

    Attributes:
        keys: Keys found (empty when listing failed).
        error: Upstream error message when listing failed.
    """

    keys: list[KmsKey] = field(default_factory=list)
    error: str | None = None


class ListCloudsHandler:
    """Handler for ListClouds query."""

    def __init__(self, resource_manager: ResourceManagerProtocol) -> None:
        self._resource_manager = resource_manager

    async def handle(self, query: ListClouds) -> Result[Page[Cloud], DomainError]:
        return await self._resource_manager.list_clouds(
            query.session, page_token=query.page_token
        )


class ListFoldersHandler:
    """Handler for ListFolders query."""

    def __init__(self, resource_manager: ResourceManagerProtocol) -> None:
        self._resource_manager = resource_manager

    async def handle(self, query: ListFolders) -> Result[Page[Folder], DomainError]:
        """Handle ListFolders query.

        Returns:
            Success(Page[Folder]): One page of folders.
            Failure(ValidationError): cloud_id missing.
            Failure(GatewayError): Upstream failure.
        """
        cloud = require(query.cloud_id, field="cloud_id")
        if isinstance(cloud, Failure):
            return cloud
        return await self._resource_manager.list_folders(
            query.session, cloud.value, page_token=query.page_token
        )


class ListKmsKeysHandler:
    """Handler for ListKmsKeys query."""

    def __init__(self, kms: KmsProtocol, logger: LoggerProtocol) -> None:
        self._kms = kms
        self._logger = logger

    async def handle(
        self, query: ListKmsKeys
    ) -> Result[KmsKeyListResult, DomainError]:
        """Handle ListKmsKeys query.

        Returns:
            Success(KmsKeyListResult): Keys, or no keys plus the error message.
            Failure(ValidationError): folder_id missing.
        """
        folder = require(query.folder_id, field="folder_id")
        if isinstance(folder, Failure):
            return folder

        match await self._kms.list_keys(query.session, folder.value):
            case Success(value=page):
                return Success(value=KmsKeyListResult(keys=page.items))
            case Failure(error=error):
                self._logger.warning(
                    "kms_keys_unavailable",
                    folder_id=folder.value,
                    reason=error.message,
                )
                return Success(value=KmsKeyListResult(error=error.message))
