"""Resource hierarchy entities: clouds and folders."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class Cloud:
    """Top-level resource container.

    Attributes:
        id: Cloud identifier.
        name: Display name.
        description: Free-form description.
        created_at: Creation time (None if not reported).
    """

    id: str
    name: str
    description: str = ""
    created_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Folder:
    """Folder inside a cloud; secrets and keys live in folders.

    Attributes:
        id: Folder identifier.
        cloud_id: Owning cloud.
        name: Display name.
        description: Free-form description.
        status: Upstream folder status string.
        created_at: Creation time (None if not reported).
    """

    id: str
    cloud_id: str
    name: str
    description: str = ""
    status: str = ""
    created_at: datetime | None = None
