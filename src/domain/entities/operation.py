"""Long-running operation returned by every upstream mutation."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class OperationError:
    """Error recorded on a finished operation.

    Attributes:
        code: Upstream (gRPC) status code.
        message: Error message.
    """

    code: int
    message: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Operation:
    """Upstream operation handle.

    Attributes:
        id: Operation identifier.
        description: Operation description.
        created_at: Creation time (None if not reported).
        done: Whether the operation has finished.
        metadata: Operation metadata (e.g. secretId, versionId).
        error: Failure details when the operation failed.
        response: Result resource when the operation succeeded.
    """

    id: str
    description: str = ""
    created_at: datetime | None = None
    done: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)
    error: OperationError | None = None
    response: dict[str, Any] | None = None
