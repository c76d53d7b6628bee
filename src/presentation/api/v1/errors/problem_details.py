"""RFC 7807 Problem Details for HTTP APIs.

Pydantic models for structured error responses. Besides the standard
members, two extension members let the console UI recover from failures:
``retryable`` (detail view load failed, offer a retry) and the version ids
of an optimistic-concurrency conflict (discard edits, reload).

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message

    Examples:
        >>> error = ErrorDetail(
        ...     field="payload_entries",
        ...     code="invalid_payload_key",
        ...     message="Invalid key 'bad key!'",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors (for validation failures)
        trace_id: Optional request trace ID for debugging
        retryable: Whether the client may retry the same request
        expected_version_id: Version an edit was prepared against (conflicts)
        actual_version_id: Version currently active upstream (conflicts)

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/secret_version_conflict",
        ...     title="Resource Conflict",
        ...     status=409,
        ...     detail="Secret was modified by someone else.",
        ...     instance="/api/v1/secrets/e6q123/versions",
        ...     expected_version_id="e6qv1",
        ...     actual_version_id="e6qv2",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/validation_failed"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Validation Failed"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[400],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Invalid key 'bad key!'"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/secrets"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
    retryable: bool | None = Field(
        None,
        description="Whether retrying the same request may succeed",
    )
    expected_version_id: str | None = Field(
        None,
        description="Version the rejected edit was based on",
    )
    actual_version_id: str | None = Field(
        None,
        description="Current version of the secret",
    )
