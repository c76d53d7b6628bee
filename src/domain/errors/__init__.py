"""Domain errors package.

Usage:
    from src.domain.errors import UpstreamError, VersionConflictError
"""

from src.domain.errors.detail_load_error import DetailLoadError
from src.domain.errors.upstream_error import GatewayError, UpstreamError
from src.domain.errors.version_conflict_error import VersionConflictError

__all__ = [
    "DetailLoadError",
    "GatewayError",
    "UpstreamError",
    "VersionConflictError",
]
