"""Secret version entity (immutable payload snapshot)."""

from dataclasses import dataclass, field
from datetime import datetime

from src.domain.enums import VersionStatus


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretVersion:
    """Immutable snapshot of a secret's payload keys.

    Attributes:
        id: Version identifier.
        secret_id: Owning secret.
        created_at: Creation time (None if not reported).
        destroy_at: Scheduled destruction time, if any.
        description: Free-form change description.
        status: Lifecycle status.
        payload_entry_keys: Keys stored in this version (values not included).
    """

    id: str
    secret_id: str
    created_at: datetime | None = None
    destroy_at: datetime | None = None
    description: str = ""
    status: VersionStatus = VersionStatus.STATUS_UNSPECIFIED
    payload_entry_keys: list[str] = field(default_factory=list)

    @property
    def is_scheduled_for_destruction(self) -> bool:
        """Whether destruction is pending and can still be cancelled."""
        return self.status == VersionStatus.SCHEDULED_FOR_DESTRUCTION
