"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, *_REQUIRED)
- Authentication errors (NOT_AUTHENTICATED, TOKEN_*)
- Conflict errors (*_CONFLICT)
- Upstream errors (UPSTREAM_*)
- Encryption errors (ENCRYPTION_*, DECRYPTION_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_INPUT = "invalid_input"
    INVALID_PAYLOAD_KEY = "invalid_payload_key"
    INVALID_SECRET_NAME = "invalid_secret_name"
    FIELD_REQUIRED = "field_required"
    EMPTY_VERSION = "empty_version"

    # Authentication errors
    NOT_AUTHENTICATED = "not_authenticated"
    TOKEN_VALIDATION_FAILED = "token_validation_failed"
    TOKEN_EXCHANGE_FAILED = "token_exchange_failed"

    # Conflict errors
    SECRET_VERSION_CONFLICT = "secret_version_conflict"

    # Upstream (cloud API) errors
    UPSTREAM_REQUEST_FAILED = "upstream_request_failed"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_INVALID_RESPONSE = "upstream_invalid_response"

    # Detail view loading
    SECRET_DETAIL_LOAD_FAILED = "secret_detail_load_failed"

    # Encryption errors
    ENCRYPTION_KEY_INVALID = "encryption_key_invalid"
    ENCRYPTION_FAILED = "encryption_failed"
    DECRYPTION_FAILED = "decryption_failed"
