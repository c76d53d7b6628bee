"""Input validation functions for secret names and payload keys.

Validators run before any network call. They return a Result so handlers
can short-circuit with a ValidationError.
"""

from collections.abc import Iterable

from src.core.constants import PAYLOAD_KEY_PATTERN, SECRET_NAME_PATTERN
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success


def is_valid_payload_key(key: str) -> bool:
    """Check a payload key against the allowed character set.

    Example:
        >>> is_valid_payload_key("bad-key.1_2")
        True
        >>> is_valid_payload_key("bad key!")
        False
    """
    return PAYLOAD_KEY_PATTERN.fullmatch(key) is not None


def validate_payload_keys(
    keys: Iterable[str],
    *,
    field: str = "payload_entries",
) -> Result[None, ValidationError]:
    """Validate every key, failing on the first invalid one.

    Args:
        keys: Keys to check.
        field: Field name reported in the error.

    Returns:
        Success(None) if all keys are valid.
        Failure(ValidationError) naming the first invalid key.
    """
    for key in keys:
        if not is_valid_payload_key(key):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_PAYLOAD_KEY,
                    message=(
                        f"Invalid key '{key}': only latin letters, digits, "
                        "'_', '-' and '.' are allowed"
                    ),
                    field=field,
                )
            )
    return Success(value=None)


def validate_secret_name(name: str) -> Result[None, ValidationError]:
    """Validate a secret name.

    Args:
        name: Proposed secret name.

    Returns:
        Success(None) if valid, Failure(ValidationError) otherwise.
    """
    if SECRET_NAME_PATTERN.fullmatch(name) is None:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_SECRET_NAME,
                message=(
                    f"Invalid secret name '{name}': only latin letters, digits, "
                    "'_', '-' and '.' are allowed"
                ),
                field="name",
            )
        )
    return Success(value=None)


def require(value: str | None, *, field: str) -> Result[str, ValidationError]:
    """Require a non-blank string field.

    Args:
        value: Field value.
        field: Field name reported in the error.

    Returns:
        Success(value) or Failure(ValidationError) with FIELD_REQUIRED.
    """
    if value is None or not value.strip():
        return Failure(
            error=ValidationError(
                code=ErrorCode.FIELD_REQUIRED,
                message=f"{field} is required",
                field=field,
            )
        )
    return Success(value=value)
