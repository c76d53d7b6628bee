"""Resource Manager and KMS mapper (clouds, folders, keys)."""

from typing import Any

import structlog

from src.domain.entities import Cloud, Folder, KmsKey, Page
from src.infrastructure.cloud.mappers.timestamps import parse_timestamp

logger = structlog.get_logger(__name__)


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _items(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    raw = data.get(key)
    if not isinstance(raw, list):
        return []
    items = [item for item in raw if isinstance(item, dict) and _str(item, "id")]
    if len(items) != len(raw):
        logger.warning(
            "resource_mapping_skipped",
            collection=key,
            skipped=len(raw) - len(items),
        )
    return items


def _next_page_token(data: dict[str, Any]) -> str | None:
    return _str(data, "nextPageToken") or None


class ResourceMapper:
    """Mapper for clouds, folders and KMS keys.

    Thread-safe: No mutable state, can be shared across requests.
    """

    def map_cloud_page(self, data: dict[str, Any]) -> Page[Cloud]:
        """Map a ``{"clouds": [...]}`` list response."""
        return Page(
            items=[
                Cloud(
                    id=item["id"],
                    name=_str(item, "name"),
                    description=_str(item, "description"),
                    created_at=parse_timestamp(item.get("createdAt")),
                )
                for item in _items(data, "clouds")
            ],
            next_page_token=_next_page_token(data),
        )

    def map_folder_page(self, data: dict[str, Any]) -> Page[Folder]:
        """Map a ``{"folders": [...]}`` list response."""
        return Page(
            items=[
                Folder(
                    id=item["id"],
                    cloud_id=_str(item, "cloudId"),
                    name=_str(item, "name"),
                    description=_str(item, "description"),
                    status=_str(item, "status"),
                    created_at=parse_timestamp(item.get("createdAt")),
                )
                for item in _items(data, "folders")
            ],
            next_page_token=_next_page_token(data),
        )

    def map_key_page(self, data: dict[str, Any]) -> Page[KmsKey]:
        """Map a ``{"keys": [...]}`` list response."""
        return Page(
            items=[
                KmsKey(
                    id=item["id"],
                    name=_str(item, "name"),
                    description=_str(item, "description"),
                    status=_str(item, "status"),
                    default_algorithm=_str(item, "defaultAlgorithm"),
                )
                for item in _items(data, "keys")
            ],
            next_page_token=_next_page_token(data),
        )
