"""Domain value objects (immutable, no identity)."""

from src.domain.value_objects.access_token import AccessToken
from src.domain.value_objects.payload_entry_change import PayloadEntryChange
from src.domain.value_objects.secret_version_ref import SecretVersionRef

__all__ = [
    "AccessToken",
    "PayloadEntryChange",
    "SecretVersionRef",
]
