"""Optimistic-concurrency token for secret edits."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretVersionRef:
    """The (secret, version) pair an edit was prepared against.

    A mutation against ``secret_id`` must be rejected client-side when the
    secret's current version on the server differs from ``version_id``.

    Attributes:
        secret_id: Secret being edited.
        version_id: Current version id observed when the edit started.
    """

    secret_id: str
    version_id: str
