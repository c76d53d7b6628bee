"""Upstream cloud API adapters (Lockbox, Resource Manager, KMS)."""

from src.infrastructure.cloud.api_gateway import CloudApiGateway
from src.infrastructure.cloud.lockbox_client import LockboxClient
from src.infrastructure.cloud.resource_manager_client import (
    KmsClient,
    ResourceManagerClient,
)

__all__ = ["CloudApiGateway", "KmsClient", "LockboxClient", "ResourceManagerClient"]
