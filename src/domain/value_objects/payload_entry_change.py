"""Payload entry change value object.

Describes one change applied on top of a base secret version when a new
version is created:

- ``PayloadEntryChange(key="DB_HOST", text_value="db.local")`` sets/overwrites a key
- ``PayloadEntryChange(key="DB_HOST")`` removes the key from the new version

Keys are restricted to letters, digits, ``_``, ``-`` and ``.``; use
``validate_payload_keys`` before any network call.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class PayloadEntryChange:
    """Single set-or-remove change to a secret payload.

    Attributes:
        key: Entry key.
        text_value: New value, or None to remove the key.
    """

    key: str
    text_value: str | None = None

    @property
    def is_removal(self) -> bool:
        """Whether this change removes the key."""
        return self.text_value is None

    def to_api(self) -> dict[str, Any]:
        """Serialize to the upstream ``payloadEntries`` item shape."""
        if self.text_value is None:
            return {"key": self.key}
        return {"key": self.key, "textValue": self.text_value}
