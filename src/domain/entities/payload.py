"""Decrypted secret payload."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, kw_only=True)
class PayloadEntry:
    """One decrypted key/value entry.

    Attributes:
        key: Entry key.
        text_value: Text value, if the entry is textual.
        binary_value: Base64 value, if the entry is binary.
    """

    key: str
    text_value: str | None = None
    binary_value: str | None = None

    @property
    def value(self) -> str:
        """Display value: text, else binary, else empty string."""
        return self.text_value or self.binary_value or ""


@dataclass(frozen=True, slots=True, kw_only=True)
class Payload:
    """Entries of one secret version.

    Attributes:
        version_id: Version the entries belong to ("" when unknown).
        entries: Decrypted entries.
    """

    version_id: str = ""
    entries: list[PayloadEntry] = field(default_factory=list)

    def as_dict(self) -> dict[str, str]:
        """Entries as a key -> display value mapping."""
        return {entry.key: entry.value for entry in self.entries}
