"""Secret, version and payload request/response schemas.

Includes:
- Request schemas (client → API) with ``to_*`` helpers for commands
- Response schemas (API → client) built from domain entities

Names and payload keys are validated by the command handlers, not here, so
invalid values come back as 400 Problem Details with the offending field.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.application.services.detail_loader import SecretDetail
from src.domain.entities import (
    Operation,
    Page,
    Payload,
    PayloadEntry,
    Secret,
    SecretVersion,
)
from src.domain.value_objects.payload_entry_change import PayloadEntryChange


# =============================================================================
# Request Schemas
# =============================================================================


class PayloadEntryRequest(BaseModel):
    """One payload entry change.

    Attributes:
        key: Entry key (letters, digits, '_', '-', '.').
        text_value: New value; null removes the key from the new version.
    """

    key: str = Field(..., description="Entry key", examples=["DB_PASSWORD"])
    text_value: str | None = Field(
        None, description="Entry value (null removes the key)"
    )

    def to_change(self) -> PayloadEntryChange:
        return PayloadEntryChange(key=self.key, text_value=self.text_value)


class SecretCreateRequest(BaseModel):
    """Request schema for creating a secret."""

    folder_id: str = Field(..., min_length=1, description="Target folder")
    name: str = Field(..., description="Secret name", examples=["app-db"])
    description: str | None = Field(None, description="Secret description")
    labels: dict[str, str] | None = Field(None, description="Secret labels")
    kms_key_id: str | None = Field(
        None, description="KMS key (service-managed key when omitted)"
    )
    deletion_protection: bool = Field(False, description="Block deletion")
    version_description: str | None = Field(
        None, description="Description of the initial version"
    )
    payload_entries: list[PayloadEntryRequest] = Field(
        default_factory=list, description="Initial entries"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "folder_id": "b1g0folder",
                "name": "app-db",
                "description": "Database credentials",
                "payload_entries": [
                    {"key": "DB_USER", "text_value": "app"},
                    {"key": "DB_PASSWORD", "text_value": "s3cr3t"},
                ],
            }
        }
    )


class SecretUpdateRequest(BaseModel):
    """Request schema for updating secret metadata.

    Only the fields that are present are changed.
    """

    name: str | None = Field(None, description="New name")
    description: str | None = Field(None, description="New description")
    labels: dict[str, str] | None = Field(None, description="Replacement labels")
    deletion_protection: bool | None = Field(
        None, description="New deletion protection flag"
    )


class VersionCreateRequest(BaseModel):
    """Request schema for adding a secret version.

    Attributes:
        payload_entries: Entry changes applied on top of the base version.
        description: Version description.
        base_version_id: Version the edit started from. When given, the
            request fails with 409 if the secret has moved on since.
    """

    payload_entries: list[PayloadEntryRequest] = Field(
        default_factory=list, description="Entry changes (at least one)"
    )
    description: str | None = Field(None, description="Version description")
    base_version_id: str | None = Field(
        None, description="Version the edit started from"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "payload_entries": [{"key": "DB_PASSWORD", "text_value": "n3w"}],
                "description": "Rotate password",
                "base_version_id": "e6qv1abcdefgh",
            }
        }
    )


class RollbackCreateRequest(BaseModel):
    """Request schema for rolling a secret back to an older version."""

    version_id: str = Field(..., min_length=1, description="Version to restore")
    base_version_id: str | None = Field(
        None, description="Current version when the rollback was initiated"
    )


class VersionDestructionRequest(BaseModel):
    """Request schema for scheduling version destruction."""

    pending_period: str | None = Field(
        None,
        description="Delay before destruction (duration in seconds)",
        examples=["604800s"],
    )


# =============================================================================
# Response Schemas
# =============================================================================


class SecretVersionResponse(BaseModel):
    """Single secret version (keys only, no values)."""

    id: str = Field(..., description="Version identifier")
    secret_id: str = Field(..., description="Owning secret")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    destroy_at: datetime | None = Field(
        None, description="Scheduled destruction timestamp"
    )
    description: str = Field("", description="Version description")
    status: str = Field(..., description="Version status", examples=["ACTIVE"])
    payload_entry_keys: list[str] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, version: SecretVersion) -> "SecretVersionResponse":
        return cls(
            id=version.id,
            secret_id=version.secret_id,
            created_at=version.created_at,
            destroy_at=version.destroy_at,
            description=version.description,
            status=version.status.value,
            payload_entry_keys=list(version.payload_entry_keys),
        )


class SecretVersionListResponse(BaseModel):
    """One page of versions."""

    versions: list[SecretVersionResponse] = Field(default_factory=list)
    next_page_token: str | None = Field(None, description="Continuation token")

    @classmethod
    def from_page(cls, page: Page[SecretVersion]) -> "SecretVersionListResponse":
        return cls(
            versions=[SecretVersionResponse.from_entity(v) for v in page.items],
            next_page_token=page.next_page_token,
        )


class SecretResponse(BaseModel):
    """Secret metadata."""

    id: str = Field(..., description="Secret identifier")
    folder_id: str = Field(..., description="Folder the secret lives in")
    name: str = Field(..., description="Secret name")
    description: str = Field("", description="Secret description")
    labels: dict[str, str] = Field(default_factory=dict)
    kms_key_id: str | None = Field(None, description="KMS key (null = managed)")
    status: str = Field(..., description="Secret status", examples=["ACTIVE"])
    current_version: SecretVersionResponse | None = Field(
        None, description="Current version"
    )
    deletion_protection: bool = Field(False, description="Deletion blocked")
    created_at: datetime | None = Field(None, description="Creation timestamp")

    @classmethod
    def from_entity(cls, secret: Secret) -> "SecretResponse":
        return cls(
            id=secret.id,
            folder_id=secret.folder_id,
            name=secret.name,
            description=secret.description,
            labels=dict(secret.labels),
            kms_key_id=secret.kms_key_id,
            status=secret.status.value,
            current_version=(
                SecretVersionResponse.from_entity(secret.current_version)
                if secret.current_version
                else None
            ),
            deletion_protection=secret.deletion_protection,
            created_at=secret.created_at,
        )


class SecretListResponse(BaseModel):
    """One page of secrets."""

    secrets: list[SecretResponse] = Field(default_factory=list)
    next_page_token: str | None = Field(None, description="Continuation token")

    @classmethod
    def from_page(cls, page: Page[Secret]) -> "SecretListResponse":
        return cls(
            secrets=[SecretResponse.from_entity(s) for s in page.items],
            next_page_token=page.next_page_token,
        )


class PayloadEntryResponse(BaseModel):
    """Single decrypted entry."""

    key: str
    text_value: str | None = None
    binary_value: str | None = None

    @classmethod
    def from_entity(cls, entry: PayloadEntry) -> "PayloadEntryResponse":
        return cls(
            key=entry.key,
            text_value=entry.text_value,
            binary_value=entry.binary_value,
        )


class PayloadResponse(BaseModel):
    """Decrypted entries of one version."""

    version_id: str = Field("", description="Version the entries belong to")
    entries: list[PayloadEntryResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, payload: Payload) -> "PayloadResponse":
        return cls(
            version_id=payload.version_id,
            entries=[PayloadEntryResponse.from_entity(e) for e in payload.entries],
        )


class SecretDetailResponse(BaseModel):
    """Everything the secret detail view shows."""

    secret: SecretResponse
    versions: list[SecretVersionResponse] = Field(default_factory=list)
    payload: PayloadResponse
    selected_version_id: str | None = Field(
        None, description="Version whose payload is shown"
    )

    @classmethod
    def from_dto(cls, detail: SecretDetail) -> "SecretDetailResponse":
        return cls(
            secret=SecretResponse.from_entity(detail.secret),
            versions=[SecretVersionResponse.from_entity(v) for v in detail.versions],
            payload=PayloadResponse.from_entity(detail.payload),
            selected_version_id=detail.selected_version_id,
        )


class OperationErrorResponse(BaseModel):
    """Failure details of an upstream operation."""

    code: int
    message: str


class OperationResponse(BaseModel):
    """Upstream operation started by a mutation."""

    id: str = Field(..., description="Operation identifier")
    description: str = Field("", description="Operation description")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    done: bool = Field(False, description="Whether the operation finished")
    metadata: dict[str, Any] = Field(default_factory=dict)
    error: OperationErrorResponse | None = None
    response: dict[str, Any] | None = None

    @classmethod
    def from_entity(cls, operation: Operation) -> "OperationResponse":
        return cls(
            id=operation.id,
            description=operation.description,
            created_at=operation.created_at,
            done=operation.done,
            metadata=dict(operation.metadata),
            error=(
                OperationErrorResponse(
                    code=operation.error.code, message=operation.error.message
                )
                if operation.error
                else None
            ),
            response=operation.response,
        )
