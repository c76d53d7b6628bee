"""Lockbox secret, version and payload mapper.

Converts Lockbox REST JSON into domain entities. Missing optional fields get
explicit defaults; items without an ``id`` are skipped with a warning.

Lockbox Secret Response Structure:
    {
        "id": "e6q...",
        "folderId": "b1g...",
        "createdAt": "2024-05-01T10:00:00Z",
        "name": "db-credentials",
        "description": "",
        "labels": {"env": "prod"},
        "kmsKeyId": "abj...",
        "status": "ACTIVE",
        "currentVersion": {
            "id": "e6q...",
            "secretId": "e6q...",
            "createdAt": "2024-05-01T10:00:00Z",
            "status": "ACTIVE",
            "payloadEntryKeys": ["DB_HOST", "DB_PASSWORD"]
        },
        "deletionProtection": false
    }
"""

from typing import Any

import structlog

from src.domain.entities import Page, Payload, PayloadEntry, Secret, SecretVersion
from src.domain.enums import SecretStatus, VersionStatus
from src.infrastructure.cloud.mappers.timestamps import parse_timestamp

logger = structlog.get_logger(__name__)


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return value if isinstance(value, str) and value else None


def _labels(data: dict[str, Any]) -> dict[str, str]:
    labels = data.get("labels")
    if not isinstance(labels, dict):
        return {}
    return {str(k): str(v) for k, v in labels.items()}


def _next_page_token(data: dict[str, Any]) -> str | None:
    return _optional_str(data, "nextPageToken")


class SecretMapper:
    """Mapper for Lockbox secrets, versions and payloads.

    Thread-safe: No mutable state, can be shared across requests.
    """

    def map_version(
        self, data: dict[str, Any], *, secret_id: str = ""
    ) -> SecretVersion | None:
        """Map one version object.

        Args:
            data: Version JSON.
            secret_id: Fallback owning secret id when ``secretId`` is absent.

        Returns:
            SecretVersion, or None when the object has no id.
        """
        version_id = _str(data, "id")
        if not version_id:
            logger.warning("lockbox_version_mapping_skipped", reason="missing_id")
            return None
        keys = data.get("payloadEntryKeys")
        return SecretVersion(
            id=version_id,
            secret_id=_str(data, "secretId") or secret_id,
            created_at=parse_timestamp(data.get("createdAt")),
            destroy_at=parse_timestamp(data.get("destroyAt")),
            description=_str(data, "description"),
            status=VersionStatus.parse(data.get("status")),
            payload_entry_keys=[k for k in keys if isinstance(k, str)]
            if isinstance(keys, list)
            else [],
        )

    def map_secret(self, data: dict[str, Any]) -> Secret | None:
        """Map one secret object.

        Returns:
            Secret, or None when the object has no id.
        """
        secret_id = _str(data, "id")
        if not secret_id:
            logger.warning("lockbox_secret_mapping_skipped", reason="missing_id")
            return None
        current = data.get("currentVersion")
        current_version = (
            self.map_version(current, secret_id=secret_id)
            if isinstance(current, dict)
            else None
        )
        return Secret(
            id=secret_id,
            folder_id=_str(data, "folderId"),
            name=_str(data, "name"),
            description=_str(data, "description"),
            labels=_labels(data),
            kms_key_id=_optional_str(data, "kmsKeyId"),
            status=SecretStatus.parse(data.get("status")),
            current_version=current_version,
            deletion_protection=bool(data.get("deletionProtection", False)),
            created_at=parse_timestamp(data.get("createdAt")),
        )

    def map_secret_page(self, data: dict[str, Any]) -> Page[Secret]:
        """Map a ``{"secrets": [...], "nextPageToken": ...}`` list response."""
        raw = data.get("secrets")
        items = [
            secret
            for item in (raw if isinstance(raw, list) else [])
            if isinstance(item, dict) and (secret := self.map_secret(item))
        ]
        return Page(items=items, next_page_token=_next_page_token(data))

    def map_version_page(
        self, data: dict[str, Any], *, secret_id: str
    ) -> Page[SecretVersion]:
        """Map a ``{"versions": [...], "nextPageToken": ...}`` list response."""
        raw = data.get("versions")
        items = [
            version
            for item in (raw if isinstance(raw, list) else [])
            if isinstance(item, dict)
            and (version := self.map_version(item, secret_id=secret_id))
        ]
        return Page(items=items, next_page_token=_next_page_token(data))

    def map_payload(self, data: dict[str, Any]) -> Payload:
        """Map a payload response (``{"versionId", "entries"}``).

        An empty response (see the gateway's empty-not-found rule) maps to a
        payload with no entries.
        """
        raw = data.get("entries")
        entries = [
            PayloadEntry(
                key=_str(item, "key"),
                text_value=item.get("textValue")
                if isinstance(item.get("textValue"), str)
                else None,
                binary_value=item.get("binaryValue")
                if isinstance(item.get("binaryValue"), str)
                else None,
            )
            for item in (raw if isinstance(raw, list) else [])
            if isinstance(item, dict) and _str(item, "key")
        ]
        return Payload(version_id=_str(data, "versionId"), entries=entries)
