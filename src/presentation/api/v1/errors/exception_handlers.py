"""Global exception handlers for the FastAPI application.

Catches exceptions that escape the routers (HTTPException raised by
dependencies, request validation, anything unexpected) and converts them to
RFC 7807 Problem Details responses.

Handlers:
    http_exception_handler: Converts HTTPException to Problem Details
    validation_exception_handler: Converts RequestValidationError to Problem Details
    generic_exception_handler: Catches all unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from src.core.config import settings
from src.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

logger = structlog.get_logger(__name__)

# HTTP status code to (title, slug) mapping
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
    502: ("Bad Gateway", "bad-gateway"),
    503: ("Service Unavailable", "service-unavailable"),
}


def _status_info(status_code: int) -> tuple[str, str]:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to a Problem Details response.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by a dependency, or by routing (404, 405).

    Returns:
        JSONResponse with ProblemDetails.
    """
    assert isinstance(exc, HTTPException)

    trace_id = getattr(request.state, "trace_id", None)
    title, slug = _status_info(exc.status_code)

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to Problem Details with field errors.

    Example:
        >>> # POST /api/v1/secrets without folder_id
        >>> # {
        >>> #   "type": ".../errors/validation-failed",
        >>> #   "status": 422,
        >>> #   "errors": [
        >>> #     {"field": "folder_id", "code": "missing", "message": "Field required"}
        >>> #   ]
        >>> # }
    """
    assert isinstance(exc, RequestValidationError)

    trace_id = getattr(request.state, "trace_id", None)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "folder_id"] -> "folder_id"
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p not in ("body", "query", "path")]
        field_name = ".".join(field_parts) if field_parts else "unknown"

        field_errors.append(
            ErrorDetail(
                field=field_name,
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/validation-failed",
        title="Validation Failed",
        status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors or None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    The response never carries exception details; those go to the log
    together with the trace id the client receives.
    """
    trace_id = getattr(request.state, "trace_id", None)

    logger.error(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        exc_message=str(exc),
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
        exc_info=exc,
    )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Report the trace ID if it persists.",
        instance=str(request.url.path),
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application.

    Example:
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
