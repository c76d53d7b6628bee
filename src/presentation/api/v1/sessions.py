"""Sessions resource router.

The browser holds exactly one session, addressed as ``current``.

Endpoints:
    POST   /api/v1/sessions/current - Log in with a long-lived credential
    GET    /api/v1/sessions/current - Authentication status
    DELETE /api/v1/sessions/current - Log out (clear session cookies)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.handlers.begin_session_handler import (
    BeginSessionHandler,
)
from src.application.commands.session_commands import BeginSession
from src.core.container import get_begin_session_handler, get_credential_store
from src.core.result import Failure, Success
from src.domain.entities.session import Session
from src.domain.protocols.credential_store_protocol import CredentialStoreProtocol
from src.presentation.api.middleware.session_dependencies import get_session
from src.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.session_schemas import SessionCreateRequest, SessionStatusResponse

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.post(
    "/current",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionStatusResponse,
    responses={
        400: {"description": "Empty credential", "model": ProblemDetails},
        401: {"description": "Token validation failed", "model": ProblemDetails},
        503: {"description": "Identity service unreachable", "model": ProblemDetails},
    },
    summary="Log in",
    description=(
        "Exchange the credential for an access token, validate it with a "
        "cheap authenticated call and store both in encrypted cookies."
    ),
)
async def create_session(
    request: Request,
    response: Response,
    data: SessionCreateRequest,
    handler: Annotated[BeginSessionHandler, Depends(get_begin_session_handler)],
    store: Annotated[CredentialStoreProtocol, Depends(get_credential_store)],
) -> SessionStatusResponse | JSONResponse:
    """Log in.

    POST /api/v1/sessions/current → 201 Created

    Returns:
        SessionStatusResponse on success (cookies set).
        JSONResponse with Problem Details on failure (400/401/5xx).
    """
    command = BeginSession(credential=data.credential.get_secret_value())

    match await handler.handle(command):
        case Success(value=session):
            store.persist(response, session)
            return SessionStatusResponse.from_session(session)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.get(
    "/current",
    response_model=SessionStatusResponse,
    summary="Get session status",
    description="Whether the browser is logged in and when its token expires.",
)
async def get_current_session(
    session: Annotated[Session, Depends(get_session)],
) -> SessionStatusResponse:
    """Get authentication status.

    GET /api/v1/sessions/current → 200 OK
    """
    return SessionStatusResponse.from_session(session)


@router.delete(
    "/current",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Log out",
    description="Clear the credential, access token and expiry cookies.",
)
async def delete_current_session(
    response: Response,
    store: Annotated[CredentialStoreProtocol, Depends(get_credential_store)],
) -> None:
    """Log out.

    DELETE /api/v1/sessions/current → 204 No Content
    """
    store.clear(response)
