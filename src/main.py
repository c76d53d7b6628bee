"""
Main FastAPI application entry point.

Wires the trace middleware, RFC 7807 exception handlers and the v1 routers,
and configures structured logging at startup.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.api.v1 import v1_router
from src.presentation.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup: configure logging (the logger factory configures structlog).

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    logger.info("application_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Web console API for managing cloud secrets and their versions",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Request correlation
app.add_middleware(TraceMiddleware)

# RFC 7807 error responses
register_exception_handlers(app)

app.include_router(v1_router)


@app.get("/")
async def root() -> dict[str, str]:
    """
    Root endpoint - basic status.

    Returns:
        dict: Service name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        dict: Health status indicator.
    """
    return {"status": "healthy"}


@app.get("/config")
async def get_config() -> JSONResponse:
    """
    Configuration debug endpoint (development only).

    Returns:
        JSONResponse: Configuration details (no secrets).
    """
    if not settings.is_development:
        return JSONResponse(
            status_code=403,
            content={"detail": "Config endpoint only available in development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "base_url": settings.api_base_url,
                "v1_prefix": settings.api_v1_prefix,
            },
            "upstream": {
                "iam_token_url": settings.iam_token_url,
                "lockbox_api_url": settings.lockbox_api_url,
                "lockbox_payload_api_url": settings.lockbox_payload_api_url,
                "resource_manager_api_url": settings.resource_manager_api_url,
                "kms_api_url": settings.kms_api_url,
                "timeout": settings.upstream_timeout,
            },
            "session": {
                "encryption_key": "<redacted>",
                "cookie_secure": settings.secure_cookies,
            },
        }
    )
