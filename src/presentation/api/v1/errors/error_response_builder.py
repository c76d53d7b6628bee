"""Error response builder for RFC 7807 Problem Details.

Converts domain errors returned by handlers into Problem Details JSON
responses with the matching HTTP status.

Status mapping:
    AuthenticationError   -> 401
    ValidationError       -> 400 (with field errors)
    ConflictError         -> 409 (version ids for VersionConflictError)
    UpstreamError         -> upstream status, passed through
    DetailLoadError       -> status of the last failed attempt, retryable
    anything else         -> 500

Exports:
    ErrorResponseBuilder: Utility class for building RFC 7807 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    ValidationError,
)
from src.domain.errors import DetailLoadError, UpstreamError, VersionConflictError
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_TITLES: dict[int, str] = {
    400: "Bad Request",
    401: "Authentication Required",
    403: "Access Denied",
    404: "Resource Not Found",
    409: "Resource Conflict",
    429: "Too Many Requests",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}


class ErrorResponseBuilder:
    """Build RFC 7807 Problem Details error responses.

    Example:
        >>> match await handler.handle(command):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str | None = None,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 7807 JSON response.

        Args:
            error: Error returned by a handler.
            request: FastAPI Request object (for instance URL).
            trace_id: Request trace ID (defaults to the current one).

        Returns:
            JSONResponse with ProblemDetails content.
        """
        status_code = ErrorResponseBuilder.get_status_code(error)
        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder.get_title(error, status_code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            trace_id=trace_id or get_trace_id(),
        )

        match error:
            case ValidationError(field=field) if field:
                problem.errors = [
                    ErrorDetail(
                        field=field,
                        code=error.code.value,
                        message=error.message,
                    )
                ]
            case VersionConflictError():
                problem.expected_version_id = error.expected_version_id
                problem.actual_version_id = error.actual_version_id
            case DetailLoadError():
                problem.retryable = error.retryable
            case UpstreamError():
                problem.retryable = error.is_transient

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(error: DomainError) -> int:
        """Map a domain error to an HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(upstream_404)
            404
        """
        match error:
            case AuthenticationError():
                return status.HTTP_401_UNAUTHORIZED
            case ValidationError():
                return status.HTTP_400_BAD_REQUEST
            case ConflictError():
                return status.HTTP_409_CONFLICT
            case UpstreamError(status_code=code) | DetailLoadError(status_code=code):
                return code if 400 <= code <= 599 else status.HTTP_502_BAD_GATEWAY
            case _:
                return status.HTTP_500_INTERNAL_SERVER_ERROR

    @staticmethod
    def get_title(error: DomainError, status_code: int) -> str:
        """Human-readable title for an error."""
        match error:
            case ValidationError():
                return "Validation Failed"
            case DetailLoadError():
                return "Secret Unavailable"
            case UpstreamError():
                return _TITLES.get(status_code, "Upstream Request Failed")
            case _:
                return _TITLES.get(status_code, "Error")
