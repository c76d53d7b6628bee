"""Resource Manager and KMS API clients.

Implement ResourceManagerProtocol (clouds, folders) and KmsProtocol (keys)
over the CloudApiGateway.
"""

from src.core.constants import DEFAULT_PAGE_SIZE
from src.core.result import Failure, Result, Success
from src.domain.entities import Cloud, Folder, KmsKey, Page
from src.domain.entities.session import Session
from src.domain.errors import GatewayError
from src.infrastructure.cloud.api_gateway import CloudApiGateway
from src.infrastructure.cloud.mappers import ResourceMapper


class ResourceManagerClient:
    """Clouds and folders (``/clouds``, ``/folders``)."""

    def __init__(self, *, gateway: CloudApiGateway, base_url: str) -> None:
        self._gateway = gateway
        self._base_url = base_url
        self._mapper = ResourceMapper()

    async def list_clouds(
        self,
        session: Session,
        *,
        page_size: int | None = None,
        page_token: str | None = None,
    ) -> Result[Page[Cloud], GatewayError]:
        result = await self._gateway.request(
            session,
            service="resource_manager",
            base_url=self._base_url,
            path="/clouds",
            params={
                "pageSize": page_size or DEFAULT_PAGE_SIZE,
                "pageToken": page_token,
            },
            operation="list_clouds",
        )
        match result:
            case Success(value=data):
                return Success(value=self._mapper.map_cloud_page(data))
            case Failure(error=error):
                return Failure(error=error)

    async def list_folders(
        self,
        session: Session,
        cloud_id: str,
        *,
        page_token: str | None = None,
    ) -> Result[Page[Folder], GatewayError]:
        result = await self._gateway.request(
            session,
            service="resource_manager",
            base_url=self._base_url,
            path="/folders",
            params={
                "cloudId": cloud_id,
                "pageSize": DEFAULT_PAGE_SIZE,
                "pageToken": page_token,
            },
            operation="list_folders",
        )
        match result:
            case Success(value=data):
                return Success(value=self._mapper.map_folder_page(data))
            case Failure(error=error):
                return Failure(error=error)


class KmsClient:
    """KMS symmetric keys (``/keys``)."""

    def __init__(self, *, gateway: CloudApiGateway, base_url: str) -> None:
        self._gateway = gateway
        self._base_url = base_url
        self._mapper = ResourceMapper()

    async def list_keys(
        self,
        session: Session,
        folder_id: str,
        *,
        page_token: str | None = None,
    ) -> Result[Page[KmsKey], GatewayError]:
        result = await self._gateway.request(
            session,
            service="kms",
            base_url=self._base_url,
            path="/keys",
            params={
                "folderId": folder_id,
                "pageSize": DEFAULT_PAGE_SIZE,
                "pageToken": page_token,
            },
            operation="list_kms_keys",
        )
        match result:
            case Success(value=data):
                return Success(value=self._mapper.map_key_page(data))
            case Failure(error=error):
                return Failure(error=error)
