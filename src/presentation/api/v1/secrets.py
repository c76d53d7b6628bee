"""Secrets resource router.

Every mutation answers 202 Accepted with the upstream Operation it started.

Endpoints:
    GET    /api/v1/secrets?folder_id=...          - List secrets of a folder
    POST   /api/v1/secrets                        - Create secret
    GET    /api/v1/secrets/{secret_id}            - Get secret metadata
    PATCH  /api/v1/secrets/{secret_id}            - Update secret metadata
    DELETE /api/v1/secrets/{secret_id}            - Delete secret
    GET    /api/v1/secrets/{secret_id}/detail     - Secret + versions + payload
    GET    /api/v1/secrets/{secret_id}/payload    - Decrypted entries
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.create_secret_handler import (
    CreateSecretHandler,
)
from src.application.commands.handlers.delete_secret_handler import (
    DeleteSecretHandler,
)
from src.application.commands.handlers.update_secret_handler import (
    UpdateSecretHandler,
)
from src.application.commands.secret_commands import (
    CreateSecret,
    DeleteSecret,
    UpdateSecret,
)
from src.application.queries.handlers.secret_query_handlers import (
    GetSecretHandler,
    GetSecretPayloadHandler,
    ListSecretsHandler,
    LoadSecretDetailHandler,
)
from src.application.queries.secret_queries import (
    GetSecret,
    GetSecretPayload,
    ListSecrets,
    LoadSecretDetail,
)
from src.core.container import (
    get_create_secret_handler,
    get_delete_secret_handler,
    get_get_secret_handler,
    get_get_secret_payload_handler,
    get_list_secrets_handler,
    get_load_secret_detail_handler,
    get_update_secret_handler,
)
from src.core.result import Failure, Success
from src.domain.entities.session import Session
from src.presentation.api.middleware.session_dependencies import (
    get_authenticated_session,
)
from src.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.secret_schemas import (
    OperationResponse,
    PayloadResponse,
    SecretCreateRequest,
    SecretDetailResponse,
    SecretListResponse,
    SecretResponse,
    SecretUpdateRequest,
)

router = APIRouter(prefix="/secrets", tags=["Secrets"])

SecretId = Annotated[str, Path(min_length=1, description="Secret identifier")]
AuthSession = Annotated[Session, Depends(get_authenticated_session)]

_ERRORS = {
    400: {"description": "Invalid input", "model": ProblemDetails},
    401: {"description": "Not authenticated", "model": ProblemDetails},
    404: {"description": "Secret not found", "model": ProblemDetails},
}


@router.get(
    "",
    response_model=SecretListResponse,
    responses=_ERRORS,
    summary="List secrets",
)
async def list_secrets(
    request: Request,
    session: AuthSession,
    handler: Annotated[ListSecretsHandler, Depends(get_list_secrets_handler)],
    folder_id: Annotated[str | None, Query(description="Folder to list")] = None,
    page_token: Annotated[str | None, Query(description="Continuation token")] = None,
) -> SecretListResponse | JSONResponse:
    """GET /api/v1/secrets?folder_id=... → 200 OK (400 without folder_id)"""
    query = ListSecrets(session=session, folder_id=folder_id, page_token=page_token)
    match await handler.handle(query):
        case Success(value=page):
            return SecretListResponse.from_page(page)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.post(
    "",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=OperationResponse,
    responses=_ERRORS,
    summary="Create secret",
    description=(
        "Create a secret with optional initial entries. The name and entry "
        "keys are validated before anything is sent upstream."
    ),
)
async def create_secret(
    request: Request,
    session: AuthSession,
    data: SecretCreateRequest,
    handler: Annotated[CreateSecretHandler, Depends(get_create_secret_handler)],
) -> OperationResponse | JSONResponse:
    """POST /api/v1/secrets → 202 Accepted"""
    command = CreateSecret(
        session=session,
        folder_id=data.folder_id,
        name=data.name,
        description=data.description,
        labels=data.labels,
        kms_key_id=data.kms_key_id,
        deletion_protection=data.deletion_protection,
        version_description=data.version_description,
        payload_entries=[entry.to_change() for entry in data.payload_entries],
    )
    match await handler.handle(command):
        case Success(value=operation):
            return OperationResponse.from_entity(operation)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.get(
    "/{secret_id}",
    response_model=SecretResponse,
    responses=_ERRORS,
    summary="Get secret",
)
async def get_secret(
    request: Request,
    secret_id: SecretId,
    session: AuthSession,
    handler: Annotated[GetSecretHandler, Depends(get_get_secret_handler)],
) -> SecretResponse | JSONResponse:
    """GET /api/v1/secrets/{secret_id} → 200 OK"""
    match await handler.handle(GetSecret(session=session, secret_id=secret_id)):
        case Success(value=secret):
            return SecretResponse.from_entity(secret)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.patch(
    "/{secret_id}",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=OperationResponse,
    responses=_ERRORS,
    summary="Update secret",
    description="Change name, description, labels or deletion protection.",
)
async def update_secret(
    request: Request,
    secret_id: SecretId,
    session: AuthSession,
    data: SecretUpdateRequest,
    handler: Annotated[UpdateSecretHandler, Depends(get_update_secret_handler)],
) -> OperationResponse | JSONResponse:
    """PATCH /api/v1/secrets/{secret_id} → 202 Accepted"""
    command = UpdateSecret(
        session=session,
        secret_id=secret_id,
        name=data.name,
        description=data.description,
        labels=data.labels,
        deletion_protection=data.deletion_protection,
    )
    match await handler.handle(command):
        case Success(value=operation):
            return OperationResponse.from_entity(operation)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.delete(
    "/{secret_id}",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=OperationResponse,
    responses=_ERRORS,
    summary="Delete secret",
)
async def delete_secret(
    request: Request,
    secret_id: SecretId,
    session: AuthSession,
    handler: Annotated[DeleteSecretHandler, Depends(get_delete_secret_handler)],
) -> OperationResponse | JSONResponse:
    """DELETE /api/v1/secrets/{secret_id} → 202 Accepted"""
    match await handler.handle(DeleteSecret(session=session, secret_id=secret_id)):
        case Success(value=operation):
            return OperationResponse.from_entity(operation)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.get(
    "/{secret_id}/detail",
    response_model=SecretDetailResponse,
    responses={
        **_ERRORS,
        503: {
            "description": "Secret could not be loaded; retryable is set",
            "model": ProblemDetails,
        },
    },
    summary="Load secret detail view",
    description=(
        "Secret metadata with its versions and the payload of the selected "
        "version. The secret fetch is retried to ride out read-after-create "
        "lag; versions and payload degrade to empty on failure."
    ),
)
async def get_secret_detail(
    request: Request,
    secret_id: SecretId,
    session: AuthSession,
    handler: Annotated[
        LoadSecretDetailHandler, Depends(get_load_secret_detail_handler)
    ],
    version_id: Annotated[
        str | None, Query(description="Version whose payload to show")
    ] = None,
) -> SecretDetailResponse | JSONResponse:
    """GET /api/v1/secrets/{secret_id}/detail → 200 OK"""
    query = LoadSecretDetail(
        session=session, secret_id=secret_id, version_id=version_id
    )
    match await handler.handle(query):
        case Success(value=detail):
            return SecretDetailResponse.from_dto(detail)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.get(
    "/{secret_id}/payload",
    response_model=PayloadResponse,
    responses=_ERRORS,
    summary="Get secret payload",
    description="Decrypted entries of a version (current version by default).",
)
async def get_secret_payload(
    request: Request,
    secret_id: SecretId,
    session: AuthSession,
    handler: Annotated[
        GetSecretPayloadHandler, Depends(get_get_secret_payload_handler)
    ],
    version_id: Annotated[str | None, Query(description="Version to read")] = None,
) -> PayloadResponse | JSONResponse:
    """GET /api/v1/secrets/{secret_id}/payload → 200 OK"""
    query = GetSecretPayload(
        session=session, secret_id=secret_id, version_id=version_id
    )
    match await handler.handle(query):
        case Success(value=payload):
            return PayloadResponse.from_entity(payload)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
