"""Secret query handlers.

Architecture:
- Application layer handlers (orchestrate data retrieval)
- Returns Result[T, DomainError] (explicit error handling)
- Queries are side-effect free
"""

from src.application.queries.secret_queries import (
    GetSecret,
    GetSecretPayload,
    ListSecrets,
    ListSecretVersions,
    LoadSecretDetail,
)
from src.application.services.detail_loader import SecretDetail, SecretDetailLoader
from src.core.errors import DomainError
from src.core.result import Failure, Result
from src.domain.entities import Page, Payload, Secret, SecretVersion
from src.domain.protocols.secrets_service_protocol import SecretsServiceProtocol
from src.domain.validators import require


class ListSecretsHandler:
    """Handler for ListSecrets query."""

    def __init__(self, secrets: SecretsServiceProtocol) -> None:
        self._secrets = secrets

    async def handle(self, query: ListSecrets) -> Result[Page[Secret], DomainError]:
        """Handle ListSecrets query.

        Returns:
            Success(Page[Secret]): One page of secrets.
            Failure(ValidationError): folder_id missing.
            Failure(GatewayError): Upstream failure.
        """
        folder = require(query.folder_id, field="folder_id")
        if isinstance(folder, Failure):
            return folder
        return await self._secrets.list_secrets(
            query.session, folder.value, page_token=query.page_token
        )


class GetSecretHandler:
    """Handler for GetSecret query."""

    def __init__(self, secrets: SecretsServiceProtocol) -> None:
        self._secrets = secrets

    async def handle(self, query: GetSecret) -> Result[Secret, DomainError]:
        return await self._secrets.get_secret(query.session, query.secret_id)


class GetSecretPayloadHandler:
    """Handler for GetSecretPayload query."""

    def __init__(self, secrets: SecretsServiceProtocol) -> None:
        self._secrets = secrets

    async def handle(self, query: GetSecretPayload) -> Result[Payload, DomainError]:
        return await self._secrets.get_payload(
            query.session, query.secret_id, version_id=query.version_id
        )


class ListSecretVersionsHandler:
    """Handler for ListSecretVersions query."""

    def __init__(self, secrets: SecretsServiceProtocol) -> None:
        self._secrets = secrets

    async def handle(
        self, query: ListSecretVersions
    ) -> Result[Page[SecretVersion], DomainError]:
        return await self._secrets.list_versions(
            query.session, query.secret_id, page_token=query.page_token
        )


class LoadSecretDetailHandler:
    """Handler for LoadSecretDetail query (retrying detail view load)."""

    def __init__(self, loader: SecretDetailLoader) -> None:
        self._loader = loader

    async def handle(
        self, query: LoadSecretDetail
    ) -> Result[SecretDetail, DomainError]:
        return await self._loader.load(
            query.session, query.secret_id, version_id=query.version_id
        )
