"""KMS symmetric key entity (encryption key reference for secrets)."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class KmsKey:
    """Encryption key that can protect a secret.

    Attributes:
        id: Key identifier.
        name: Display name.
        description: Free-form description.
        status: Upstream key status string.
        default_algorithm: Default encryption algorithm.
    """

    id: str
    name: str
    description: str = ""
    status: str = ""
    default_algorithm: str = ""
