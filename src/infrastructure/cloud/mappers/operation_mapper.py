"""Operation mapper.

Every Lockbox mutation answers with an Operation:

    {
        "id": "e6q...",
        "description": "Add secret version",
        "createdAt": "2024-05-01T10:00:00Z",
        "done": true,
        "metadata": {"secretId": "e6q...", "versionId": "e6q..."},
        "response": {...}
    }
"""

from typing import Any

from src.domain.entities import Operation, OperationError
from src.infrastructure.cloud.mappers.timestamps import parse_timestamp


class OperationMapper:
    """Mapper for upstream Operation objects."""

    def map_operation(self, data: dict[str, Any]) -> Operation:
        """Map an Operation response.

        Unknown or missing fields fall back to defaults; an empty response
        maps to an Operation with an empty id.
        """
        raw_error = data.get("error")
        error = None
        if isinstance(raw_error, dict):
            code = raw_error.get("code")
            error = OperationError(
                code=code if isinstance(code, int) else 0,
                message=str(raw_error.get("message") or ""),
            )
        metadata = data.get("metadata")
        response = data.get("response")
        return Operation(
            id=str(data.get("id") or ""),
            description=str(data.get("description") or ""),
            created_at=parse_timestamp(data.get("createdAt")),
            done=bool(data.get("done", False)),
            metadata=metadata if isinstance(metadata, dict) else {},
            error=error,
            response=response if isinstance(response, dict) else None,
        )
