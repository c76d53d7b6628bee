"""Domain validators."""

from src.domain.validators.functions import (
    is_valid_payload_key,
    require,
    validate_payload_keys,
    validate_secret_name,
)

__all__ = [
    "is_valid_payload_key",
    "require",
    "validate_payload_keys",
    "validate_secret_name",
]
