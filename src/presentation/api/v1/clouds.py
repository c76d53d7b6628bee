"""Resource hierarchy routers (clouds, folders, KMS keys).

Read-only navigation used to pick the folder whose secrets are managed and
the KMS key a new secret is encrypted with.

Endpoints:
    GET /api/v1/clouds                  - List clouds
    GET /api/v1/folders?cloud_id=...    - List folders of a cloud
    GET /api/v1/kms/keys?folder_id=...  - List KMS keys of a folder
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.queries.handlers.resource_query_handlers import (
    ListCloudsHandler,
    ListFoldersHandler,
    ListKmsKeysHandler,
)
from src.application.queries.resource_queries import (
    ListClouds,
    ListFolders,
    ListKmsKeys,
)
from src.core.container import (
    get_list_clouds_handler,
    get_list_folders_handler,
    get_list_kms_keys_handler,
)
from src.core.result import Failure, Success
from src.domain.entities.session import Session
from src.presentation.api.middleware.session_dependencies import (
    get_authenticated_session,
)
from src.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.resource_schemas import (
    CloudListResponse,
    FolderListResponse,
    KmsKeyListResponse,
)

clouds_router = APIRouter(prefix="/clouds", tags=["Clouds"])
folders_router = APIRouter(prefix="/folders", tags=["Folders"])
kms_router = APIRouter(prefix="/kms", tags=["KMS"])

_ERRORS = {
    400: {"description": "Missing parameter", "model": ProblemDetails},
    401: {"description": "Not authenticated", "model": ProblemDetails},
}


@clouds_router.get(
    "",
    response_model=CloudListResponse,
    responses=_ERRORS,
    summary="List clouds",
)
async def list_clouds(
    request: Request,
    session: Annotated[Session, Depends(get_authenticated_session)],
    handler: Annotated[ListCloudsHandler, Depends(get_list_clouds_handler)],
    page_token: Annotated[str | None, Query(description="Continuation token")] = None,
) -> CloudListResponse | JSONResponse:
    """GET /api/v1/clouds → 200 OK"""
    match await handler.handle(ListClouds(session=session, page_token=page_token)):
        case Success(value=page):
            return CloudListResponse.from_page(page)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@folders_router.get(
    "",
    response_model=FolderListResponse,
    responses=_ERRORS,
    summary="List folders",
)
async def list_folders(
    request: Request,
    session: Annotated[Session, Depends(get_authenticated_session)],
    handler: Annotated[ListFoldersHandler, Depends(get_list_folders_handler)],
    cloud_id: Annotated[str | None, Query(description="Cloud to list")] = None,
    page_token: Annotated[str | None, Query(description="Continuation token")] = None,
) -> FolderListResponse | JSONResponse:
    """GET /api/v1/folders?cloud_id=... → 200 OK (400 without cloud_id)"""
    query = ListFolders(session=session, cloud_id=cloud_id, page_token=page_token)
    match await handler.handle(query):
        case Success(value=page):
            return FolderListResponse.from_page(page)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@kms_router.get(
    "/keys",
    response_model=KmsKeyListResponse,
    responses=_ERRORS,
    summary="List KMS keys",
    description=(
        "Keys for the create-secret key picker. An upstream failure is "
        "reported in `error` with an empty list instead of an error status."
    ),
)
async def list_kms_keys(
    request: Request,
    session: Annotated[Session, Depends(get_authenticated_session)],
    handler: Annotated[ListKmsKeysHandler, Depends(get_list_kms_keys_handler)],
    folder_id: Annotated[str | None, Query(description="Folder to list")] = None,
) -> KmsKeyListResponse | JSONResponse:
    """GET /api/v1/kms/keys?folder_id=... → 200 OK (400 without folder_id)"""
    match await handler.handle(ListKmsKeys(session=session, folder_id=folder_id)):
        case Success(value=result):
            return KmsKeyListResponse.from_dto(result)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
