"""Secret entity.

A named container of key/value payload entries plus metadata. Exactly one
version is current at a time; its id is the optimistic-concurrency marker
used when editing.
"""

from dataclasses import dataclass, field
from datetime import datetime

from src.domain.entities.secret_version import SecretVersion
from src.domain.enums import SecretStatus
from src.domain.value_objects.secret_version_ref import SecretVersionRef


@dataclass(frozen=True, slots=True, kw_only=True)
class Secret:
    """Lockbox secret metadata.

    Attributes:
        id: Secret identifier.
        folder_id: Folder the secret lives in.
        name: Secret name.
        description: Free-form description.
        labels: Key/value labels.
        kms_key_id: Encryption key reference (None = service-managed key).
        status: Lifecycle status.
        current_version: Active version (None while the secret has none).
        deletion_protection: Whether deletion is blocked upstream.
        created_at: Creation time (None if not reported).
    """

    id: str
    folder_id: str
    name: str
    description: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    kms_key_id: str | None = None
    status: SecretStatus = SecretStatus.STATUS_UNSPECIFIED
    current_version: SecretVersion | None = None
    deletion_protection: bool = False
    created_at: datetime | None = None

    @property
    def current_version_id(self) -> str | None:
        """Id of the current version, if any."""
        if self.current_version is None or not self.current_version.id:
            return None
        return self.current_version.id

    def version_ref(self) -> SecretVersionRef | None:
        """Concurrency token for an edit starting from the current version."""
        version_id = self.current_version_id
        if version_id is None:
            return None
        return SecretVersionRef(secret_id=self.id, version_id=version_id)
