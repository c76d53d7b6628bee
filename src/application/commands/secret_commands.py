"""Secret commands (CQRS write operations).

Every command carries the caller's Session explicitly; handlers pass it on
to the upstream clients. All mutations return the upstream Operation.
"""

from dataclasses import dataclass, field

from src.domain.entities.session import Session
from src.domain.value_objects.payload_entry_change import PayloadEntryChange


@dataclass(frozen=True, kw_only=True)
class CreateSecret:
    """Create a secret, optionally with an initial version.

    Attributes:
        session: Caller's session.
        folder_id: Target folder.
        name: Secret name (letters, digits, '_', '-', '.').
        description: Optional description.
        labels: Optional labels.
        kms_key_id: Optional KMS key (service-managed key when omitted).
        deletion_protection: Block deletion upstream.
        version_description: Description of the initial version.
        payload_entries: Initial entries.
    """

    session: Session
    folder_id: str
    name: str
    description: str | None = None
    labels: dict[str, str] | None = None
    kms_key_id: str | None = None
    deletion_protection: bool = False
    version_description: str | None = None
    payload_entries: list[PayloadEntryChange] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class UpdateSecret:
    """Update secret metadata.

    Only fields that are not None are sent; they also form the update mask.

    Attributes:
        session: Caller's session.
        secret_id: Secret to update.
        name: New name.
        description: New description.
        labels: Replacement labels.
        deletion_protection: New deletion protection flag.
    """

    session: Session
    secret_id: str
    name: str | None = None
    description: str | None = None
    labels: dict[str, str] | None = None
    deletion_protection: bool | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteSecret:
    """Delete a secret.

    Attributes:
        session: Caller's session.
        secret_id: Secret to delete.
    """

    session: Session
    secret_id: str


@dataclass(frozen=True, kw_only=True)
class AddSecretVersion:
    """Create a new current version from the base version plus changes.

    When ``base_version_id`` is given the edit is guarded: if the secret's
    current version has moved on, the command fails with a conflict instead
    of overwriting someone else's version.

    Attributes:
        session: Caller's session.
        secret_id: Secret to version.
        payload_entries: Set/remove changes (at least one).
        description: Version description.
        base_version_id: Version the edit started from.
    """

    session: Session
    secret_id: str
    payload_entries: list[PayloadEntryChange]
    description: str | None = None
    base_version_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class RollbackSecretVersion:
    """Make the entries of an older version current again.

    Attributes:
        session: Caller's session.
        secret_id: Secret to roll back.
        version_id: Version whose entries are restored.
        base_version_id: Version the rollback was initiated from (guarded).
    """

    session: Session
    secret_id: str
    version_id: str
    base_version_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class ScheduleVersionDestruction:
    """Schedule a version for destruction.

    Attributes:
        session: Caller's session.
        secret_id: Owning secret.
        version_id: Version to destroy.
        pending_period: Delay before destruction, e.g. "604800s".
    """

    session: Session
    secret_id: str
    version_id: str
    pending_period: str | None = None


@dataclass(frozen=True, kw_only=True)
class CancelVersionDestruction:
    """Cancel a scheduled version destruction.

    Attributes:
        session: Caller's session.
        secret_id: Owning secret.
        version_id: Version to keep.
    """

    session: Session
    secret_id: str
    version_id: str
