"""Secret and secret version lifecycle statuses (as reported by Lockbox)."""

from enum import Enum


class SecretStatus(str, Enum):
    """Secret lifecycle status."""

    STATUS_UNSPECIFIED = "STATUS_UNSPECIFIED"
    CREATING = "CREATING"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

    @classmethod
    def parse(cls, value: str | None) -> "SecretStatus":
        """Map an upstream status string, falling back to STATUS_UNSPECIFIED."""
        try:
            return cls(value)
        except ValueError:
            return cls.STATUS_UNSPECIFIED


class VersionStatus(str, Enum):
    """Secret version lifecycle status."""

    STATUS_UNSPECIFIED = "STATUS_UNSPECIFIED"
    ACTIVE = "ACTIVE"
    SCHEDULED_FOR_DESTRUCTION = "SCHEDULED_FOR_DESTRUCTION"
    DESTROYED = "DESTROYED"

    @classmethod
    def parse(cls, value: str | None) -> "VersionStatus":
        """Map an upstream status string, falling back to STATUS_UNSPECIFIED."""
        try:
            return cls(value)
        except ValueError:
            return cls.STATUS_UNSPECIFIED
