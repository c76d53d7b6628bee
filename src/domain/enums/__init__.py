"""Domain enums."""

from src.domain.enums.secret_status import SecretStatus, VersionStatus

__all__ = ["SecretStatus", "VersionStatus"]
