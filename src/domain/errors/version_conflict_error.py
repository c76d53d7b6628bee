"""Optimistic-concurrency conflict.

Returned when a guarded mutation was prepared against a version that is no
longer the secret's current version. The caller must discard in-progress
edits and reload before retrying.
"""

from dataclasses import dataclass

from src.core.errors import ConflictError


@dataclass(frozen=True, slots=True, kw_only=True)
class VersionConflictError(ConflictError):
    """Secret's current version changed since the edit started.

    Attributes:
        code: ErrorCode.SECRET_VERSION_CONFLICT.
        message: Human-readable message.
        resource_type: Always "secret".
        secret_id: Secret that was being edited.
        expected_version_id: Version the edit was prepared against.
        actual_version_id: Version currently active on the server.
    """

    secret_id: str
    expected_version_id: str
    actual_version_id: str
