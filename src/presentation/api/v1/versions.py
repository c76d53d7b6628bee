"""Secret versions router.

Versions are immutable: editing a secret adds a version, rolling back adds a
version that re-sets the entries of an older one. Both can be guarded with
``base_version_id``; a stale base answers 409 with the expected and actual
version ids so the client can reload.

Endpoints:
    GET    /api/v1/secrets/{secret_id}/versions                        - List
    POST   /api/v1/secrets/{secret_id}/versions                        - Add
    POST   /api/v1/secrets/{secret_id}/rollbacks                       - Roll back
    POST   /api/v1/secrets/{secret_id}/versions/{version_id}/destruction
           - Schedule destruction
    DELETE /api/v1/secrets/{secret_id}/versions/{version_id}/destruction
           - Cancel scheduled destruction
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Query, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.add_secret_version_handler import (
    AddSecretVersionHandler,
)
from src.application.commands.handlers.rollback_secret_version_handler import (
    RollbackSecretVersionHandler,
)
from src.application.commands.handlers.version_destruction_handlers import (
    CancelVersionDestructionHandler,
    ScheduleVersionDestructionHandler,
)
from src.application.commands.secret_commands import (
    AddSecretVersion,
    CancelVersionDestruction,
    RollbackSecretVersion,
    ScheduleVersionDestruction,
)
from src.application.queries.handlers.secret_query_handlers import (
    ListSecretVersionsHandler,
)
from src.application.queries.secret_queries import ListSecretVersions
from src.core.container import (
    get_add_secret_version_handler,
    get_cancel_version_destruction_handler,
    get_list_secret_versions_handler,
    get_rollback_secret_version_handler,
    get_schedule_version_destruction_handler,
)
from src.core.result import Failure, Success
from src.domain.entities.session import Session
from src.presentation.api.middleware.session_dependencies import (
    get_authenticated_session,
)
from src.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.secret_schemas import (
    OperationResponse,
    RollbackCreateRequest,
    SecretVersionListResponse,
    VersionCreateRequest,
    VersionDestructionRequest,
)

router = APIRouter(prefix="/secrets/{secret_id}", tags=["Secret Versions"])

SecretId = Annotated[str, Path(min_length=1, description="Secret identifier")]
VersionId = Annotated[str, Path(min_length=1, description="Version identifier")]
AuthSession = Annotated[Session, Depends(get_authenticated_session)]

_ERRORS = {
    400: {"description": "Invalid input", "model": ProblemDetails},
    401: {"description": "Not authenticated", "model": ProblemDetails},
    404: {"description": "Secret or version not found", "model": ProblemDetails},
}
_GUARDED_ERRORS = {
    **_ERRORS,
    409: {
        "description": "Secret changed since the edit started",
        "model": ProblemDetails,
    },
}


@router.get(
    "/versions",
    response_model=SecretVersionListResponse,
    responses=_ERRORS,
    summary="List versions",
)
async def list_versions(
    request: Request,
    secret_id: SecretId,
    session: AuthSession,
    handler: Annotated[
        ListSecretVersionsHandler, Depends(get_list_secret_versions_handler)
    ],
    page_token: Annotated[str | None, Query(description="Continuation token")] = None,
) -> SecretVersionListResponse | JSONResponse:
    """GET /api/v1/secrets/{secret_id}/versions → 200 OK"""
    query = ListSecretVersions(
        session=session, secret_id=secret_id, page_token=page_token
    )
    match await handler.handle(query):
        case Success(value=page):
            return SecretVersionListResponse.from_page(page)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.post(
    "/versions",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=OperationResponse,
    responses=_GUARDED_ERRORS,
    summary="Add version",
    description=(
        "Create a new current version from the base version plus entry "
        "changes. A null value removes the key."
    ),
)
async def add_version(
    request: Request,
    secret_id: SecretId,
    session: AuthSession,
    data: VersionCreateRequest,
    handler: Annotated[
        AddSecretVersionHandler, Depends(get_add_secret_version_handler)
    ],
) -> OperationResponse | JSONResponse:
    """POST /api/v1/secrets/{secret_id}/versions → 202 Accepted"""
    command = AddSecretVersion(
        session=session,
        secret_id=secret_id,
        payload_entries=[entry.to_change() for entry in data.payload_entries],
        description=data.description,
        base_version_id=data.base_version_id,
    )
    match await handler.handle(command):
        case Success(value=operation):
            return OperationResponse.from_entity(operation)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.post(
    "/rollbacks",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=OperationResponse,
    responses=_GUARDED_ERRORS,
    summary="Roll back to a version",
    description="Add a version that restores every entry of an older version.",
)
async def create_rollback(
    request: Request,
    secret_id: SecretId,
    session: AuthSession,
    data: RollbackCreateRequest,
    handler: Annotated[
        RollbackSecretVersionHandler, Depends(get_rollback_secret_version_handler)
    ],
) -> OperationResponse | JSONResponse:
    """POST /api/v1/secrets/{secret_id}/rollbacks → 202 Accepted"""
    command = RollbackSecretVersion(
        session=session,
        secret_id=secret_id,
        version_id=data.version_id,
        base_version_id=data.base_version_id,
    )
    match await handler.handle(command):
        case Success(value=operation):
            return OperationResponse.from_entity(operation)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.post(
    "/versions/{version_id}/destruction",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=OperationResponse,
    responses=_ERRORS,
    summary="Schedule version destruction",
)
async def schedule_version_destruction(
    request: Request,
    secret_id: SecretId,
    version_id: VersionId,
    session: AuthSession,
    handler: Annotated[
        ScheduleVersionDestructionHandler,
        Depends(get_schedule_version_destruction_handler),
    ],
    data: Annotated[VersionDestructionRequest | None, Body()] = None,
) -> OperationResponse | JSONResponse:
    """POST .../versions/{version_id}/destruction → 202 Accepted"""
    command = ScheduleVersionDestruction(
        session=session,
        secret_id=secret_id,
        version_id=version_id,
        pending_period=data.pending_period if data else None,
    )
    match await handler.handle(command):
        case Success(value=operation):
            return OperationResponse.from_entity(operation)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.delete(
    "/versions/{version_id}/destruction",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=OperationResponse,
    responses=_ERRORS,
    summary="Cancel version destruction",
)
async def cancel_version_destruction(
    request: Request,
    secret_id: SecretId,
    version_id: VersionId,
    session: AuthSession,
    handler: Annotated[
        CancelVersionDestructionHandler,
        Depends(get_cancel_version_destruction_handler),
    ],
) -> OperationResponse | JSONResponse:
    """DELETE .../versions/{version_id}/destruction → 202 Accepted"""
    command = CancelVersionDestruction(
        session=session, secret_id=secret_id, version_id=version_id
    )
    match await handler.handle(command):
        case Success(value=operation):
            return OperationResponse.from_entity(operation)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
