"""Lockbox API client implementing SecretsServiceProtocol.

Control-plane calls (secrets, versions, mutations) go to
``settings.lockbox_api_url``; payload reads go to the data plane at
``settings.lockbox_payload_api_url``. Every call is made through the
CloudApiGateway with the caller's session.

Lockbox REST endpoints:
    GET    /secrets?folderId&pageSize&pageToken
    GET    /secrets/{id}
    POST   /secrets
    PATCH  /secrets/{id}
    DELETE /secrets/{id}
    GET    /secrets/{id}/versions?pageSize&pageToken
    POST   /secrets/{id}:addVersion
    POST   /secrets/{id}:scheduleVersionDestruction
    POST   /secrets/{id}:cancelVersionDestruction
    GET    /secrets/{id}/payload?versionId        (data plane)
"""

from typing import Any
from urllib.parse import quote

from src.core.constants import DEFAULT_PAGE_SIZE, RESPONSE_BODY_MAX_LENGTH
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities import Operation, Page, Payload, Secret, SecretVersion
from src.domain.entities.session import Session
from src.domain.errors import GatewayError, UpstreamError
from src.domain.value_objects.payload_entry_change import PayloadEntryChange
from src.infrastructure.cloud.api_gateway import CloudApiGateway
from src.infrastructure.cloud.mappers import OperationMapper, SecretMapper

SERVICE_NAME = "lockbox"


def _secret_path(secret_id: str, suffix: str = "") -> str:
    """Build a secret path with the id escaped as a single segment."""
    return f"/secrets/{quote(secret_id, safe='')}{suffix}"


class LockboxClient:
    """Secrets service adapter over the Lockbox REST API.

    Thread-safe: holds no per-request state.
    """

    def __init__(
        self,
        *,
        gateway: CloudApiGateway,
        base_url: str,
        payload_base_url: str,
    ) -> None:
        """Initialize Lockbox client.

        Args:
            gateway: Authenticated upstream gateway.
            base_url: Control-plane base URL.
            payload_base_url: Data-plane base URL (payload reads).
        """
        self._gateway = gateway
        self._base_url = base_url
        self._payload_base_url = payload_base_url
        self._secrets = SecretMapper()
        self._operations = OperationMapper()

    async def list_secrets(
        self,
        session: Session,
        folder_id: str,
        *,
        page_token: str | None = None,
    ) -> Result[Page[Secret], GatewayError]:
        result = await self._gateway.request(
            session,
            service=SERVICE_NAME,
            base_url=self._base_url,
            path="/secrets",
            params={
                "folderId": folder_id,
                "pageSize": DEFAULT_PAGE_SIZE,
                "pageToken": page_token,
            },
            operation="list_secrets",
        )
        match result:
            case Success(value=data):
                return Success(value=self._secrets.map_secret_page(data))
            case Failure(error=error):
                return Failure(error=error)

    async def get_secret(
        self, session: Session, secret_id: str
    ) -> Result[Secret, GatewayError]:
        # A missing secret must surface as an error, not as an empty object.
        result = await self._gateway.request(
            session,
            service=SERVICE_NAME,
            base_url=self._base_url,
            path=_secret_path(secret_id),
            operation="get_secret",
            empty_not_found=False,
        )
        match result:
            case Success(value=data):
                secret = self._secrets.map_secret(data)
                if secret is None:
                    return Failure(error=_invalid_response("get_secret", data))
                return Success(value=secret)
            case Failure(error=error):
                return Failure(error=error)

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
        body: dict[str, Any] = {
            "folderId": folder_id,
            "name": name,
            "deletionProtection": deletion_protection,
        }
        if description is not None:
            body["description"] = description
        if labels:
            body["labels"] = labels
        if kms_key_id:
            body["kmsKeyId"] = kms_key_id
        if version_description is not None:
            body["versionDescription"] = version_description
        if payload_entries:
            body["versionPayloadEntries"] = [e.to_api() for e in payload_entries]

        return await self._mutate(
            session, path="/secrets", body=body, operation="create_secret"
        )

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
        body: dict[str, Any] = {"updateMask": ",".join(update_mask)}
        if name is not None:
            body["name"] = name
        if description is not None:
            body["description"] = description
        if labels is not None:
            body["labels"] = labels
        if deletion_protection is not None:
            body["deletionProtection"] = deletion_protection

        return await self._mutate(
            session,
            path=_secret_path(secret_id),
            body=body,
            operation="update_secret",
            method="PATCH",
        )

    async def delete_secret(
        self, session: Session, secret_id: str
    ) -> Result[Operation, GatewayError]:
        return await self._mutate(
            session,
            path=_secret_path(secret_id),
            body=None,
            operation="delete_secret",
            method="DELETE",
        )

    async def get_payload(
        self,
        session: Session,
        secret_id: str,
        *,
        version_id: str | None = None,
    ) -> Result[Payload, GatewayError]:
        result = await self._gateway.request(
            session,
            service=SERVICE_NAME,
            base_url=self._payload_base_url,
            path=_secret_path(secret_id, "/payload"),
            params={"versionId": version_id},
            operation="get_payload",
        )
        match result:
            case Success(value=data):
                return Success(value=self._secrets.map_payload(data))
            case Failure(error=error):
                return Failure(error=error)

    async def list_versions(
        self,
        session: Session,
        secret_id: str,
        *,
        page_token: str | None = None,
    ) -> Result[Page[SecretVersion], GatewayError]:
        result = await self._gateway.request(
            session,
            service=SERVICE_NAME,
            base_url=self._base_url,
            path=_secret_path(secret_id, "/versions"),
            params={"pageSize": DEFAULT_PAGE_SIZE, "pageToken": page_token},
            operation="list_versions",
        )
        match result:
            case Success(value=data):
                return Success(
                    value=self._secrets.map_version_page(data, secret_id=secret_id)
                )
            case Failure(error=error):
                return Failure(error=error)

    async def add_version(
        self,
        session: Session,
        secret_id: str,
        *,
        payload_entries: list[PayloadEntryChange],
        description: str | None = None,
        base_version_id: str | None = None,
    ) -> Result[Operation, GatewayError]:
        body: dict[str, Any] = {
            "payloadEntries": [e.to_api() for e in payload_entries],
        }
        if description is not None:
            body["description"] = description
        if base_version_id:
            body["baseVersionId"] = base_version_id

        return await self._mutate(
            session,
            path=_secret_path(secret_id, ":addVersion"),
            body=body,
            operation="add_version",
        )

    async def schedule_version_destruction(
        self,
        session: Session,
        secret_id: str,
        version_id: str,
        *,
        pending_period: str | None = None,
    ) -> Result[Operation, GatewayError]:
        body: dict[str, Any] = {"versionId": version_id}
        if pending_period:
            body["pendingPeriod"] = pending_period

        return await self._mutate(
            session,
            path=_secret_path(secret_id, ":scheduleVersionDestruction"),
            body=body,
            operation="schedule_version_destruction",
        )

    async def cancel_version_destruction(
        self, session: Session, secret_id: str, version_id: str
    ) -> Result[Operation, GatewayError]:
        return await self._mutate(
            session,
            path=_secret_path(secret_id, ":cancelVersionDestruction"),
            body={"versionId": version_id},
            operation="cancel_version_destruction",
        )

    async def _mutate(
        self,
        session: Session,
        *,
        path: str,
        body: dict[str, Any] | None,
        operation: str,
        method: str = "POST",
    ) -> Result[Operation, GatewayError]:
        """Send a mutation and decode the returned Operation.

        A 404 is always an error here: an empty body does not mean "nothing
        to change".
        """
        result = await self._gateway.request(
            session,
            service=SERVICE_NAME,
            base_url=self._base_url,
            path=path,
            method=method,
            json_data=body,
            operation=operation,
            empty_not_found=False,
        )
        match result:
            case Success(value=data):
                return Success(value=self._operations.map_operation(data))
            case Failure(error=error):
                return Failure(error=error)


def _invalid_response(operation: str, data: dict[str, Any]) -> UpstreamError:
    return UpstreamError(
        code=ErrorCode.UPSTREAM_INVALID_RESPONSE,
        message=f"Lockbox returned an unexpected {operation} response",
        status_code=502,
        service=SERVICE_NAME,
        response_body=str(data)[:RESPONSE_BODY_MAX_LENGTH],
    )
