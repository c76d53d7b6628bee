"""Session dependencies.

FastAPI dependencies that rebuild the caller's Session from encrypted
cookies. Routes that talk to the cloud APIs depend on
``get_authenticated_session``; the session routes use ``get_session``.

Usage:
    @router.get("/secrets")
    async def list_secrets(
        session: Session = Depends(get_authenticated_session),
    ):
        ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, Response, status

from src.application.services.token_manager import TokenManager
from src.core.container import get_credential_store, get_token_manager
from src.domain.entities.session import Session
from src.domain.protocols.credential_store_protocol import CredentialStoreProtocol


async def get_session(
    request: Request,
    store: Annotated[CredentialStoreProtocol, Depends(get_credential_store)],
) -> Session:
    """Load the session from request cookies.

    Returns:
        Session: Anonymous when no valid cookies are present.
    """
    return store.load(request.cookies)


async def get_authenticated_session(
    response: Response,
    session: Annotated[Session, Depends(get_session)],
    store: Annotated[CredentialStoreProtocol, Depends(get_credential_store)],
    token_manager: Annotated[TokenManager, Depends(get_token_manager)],
) -> Session:
    """Return a session carrying a usable access token.

    Resolves the access token once per request, refreshing it through the
    identity exchange when it is near expiry. The returned session is pinned
    to that token, so later upstream calls of the same request never retry
    the exchange. A refreshed token is written back to the cookies of the
    outgoing response.

    Raises:
        HTTPException 401: No credential and no access token.
    """
    token = await token_manager.get_access_token(session)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    resolved = session.resolved(token)
    if token is not session.access_token:
        store.persist(response, resolved)
    return resolved
