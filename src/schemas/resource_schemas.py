"""Resource hierarchy response schemas (clouds, folders, KMS keys)."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.application.queries.handlers.resource_query_handlers import KmsKeyListResult
from src.domain.entities import Cloud, Folder, KmsKey, Page


class CloudResponse(BaseModel):
    """Single cloud."""

    id: str = Field(..., description="Cloud identifier")
    name: str = Field(..., description="Cloud name")
    description: str = Field("", description="Cloud description")
    created_at: datetime | None = Field(None, description="Creation timestamp")

    @classmethod
    def from_entity(cls, cloud: Cloud) -> "CloudResponse":
        return cls(
            id=cloud.id,
            name=cloud.name,
            description=cloud.description,
            created_at=cloud.created_at,
        )


class CloudListResponse(BaseModel):
    """One page of clouds."""

    clouds: list[CloudResponse] = Field(default_factory=list)
    next_page_token: str | None = Field(None, description="Continuation token")

    @classmethod
    def from_page(cls, page: Page[Cloud]) -> "CloudListResponse":
        return cls(
            clouds=[CloudResponse.from_entity(c) for c in page.items],
            next_page_token=page.next_page_token,
        )


class FolderResponse(BaseModel):
    """Single folder."""

    id: str = Field(..., description="Folder identifier")
    cloud_id: str = Field(..., description="Owning cloud")
    name: str = Field(..., description="Folder name")
    description: str = Field("", description="Folder description")
    status: str = Field("", description="Folder status", examples=["ACTIVE"])
    created_at: datetime | None = Field(None, description="Creation timestamp")

    @classmethod
    def from_entity(cls, folder: Folder) -> "FolderResponse":
        return cls(
            id=folder.id,
            cloud_id=folder.cloud_id,
            name=folder.name,
            description=folder.description,
            status=folder.status,
            created_at=folder.created_at,
        )


class FolderListResponse(BaseModel):
    """One page of folders."""

    folders: list[FolderResponse] = Field(default_factory=list)
    next_page_token: str | None = Field(None, description="Continuation token")

    @classmethod
    def from_page(cls, page: Page[Folder]) -> "FolderListResponse":
        return cls(
            folders=[FolderResponse.from_entity(f) for f in page.items],
            next_page_token=page.next_page_token,
        )


class KmsKeyResponse(BaseModel):
    """Single symmetric KMS key."""

    id: str = Field(..., description="Key identifier")
    name: str = Field(..., description="Key name")
    description: str = Field("", description="Key description")
    status: str = Field("", description="Key status", examples=["ACTIVE"])
    default_algorithm: str = Field(
        "", description="Default algorithm", examples=["AES_256"]
    )

    @classmethod
    def from_entity(cls, key: KmsKey) -> "KmsKeyResponse":
        return cls(
            id=key.id,
            name=key.name,
            description=key.description,
            status=key.status,
            default_algorithm=key.default_algorithm,
        )


class KmsKeyListResponse(BaseModel):
    """KMS keys of a folder.

    Listing KMS keys needs extra permissions. When it fails, ``keys`` is
    empty and ``error`` says why, so the client can fall back to entering
    a key id by hand.
    """

    keys: list[KmsKeyResponse] = Field(default_factory=list)
    error: str | None = Field(None, description="Why keys could not be listed")

    @classmethod
    def from_dto(cls, dto: KmsKeyListResult) -> "KmsKeyListResponse":
        return cls(
            keys=[KmsKeyResponse.from_entity(k) for k in dto.keys],
            error=dto.error,
        )
