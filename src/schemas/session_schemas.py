"""Session request and response schemas.

Pydantic schemas for the current-session resource (login, status, logout).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from src.domain.entities.session import Session


# =============================================================================
# Request Schemas
# =============================================================================


class SessionCreateRequest(BaseModel):
    """Request schema for login.

    Attributes:
        credential: Long-lived OAuth token.
    """

    credential: SecretStr = Field(
        ...,
        description="Long-lived OAuth credential exchanged for access tokens",
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"credential": "y0_AgAAAAAA..."}}
    )


# =============================================================================
# Response Schemas
# =============================================================================


class SessionStatusResponse(BaseModel):
    """Authentication status of the calling browser.

    Attributes:
        authenticated: Whether credential and access token are stored.
        expires_at: Expiry of the stored access token.
    """

    authenticated: bool = Field(..., description="Whether the session is logged in")
    expires_at: datetime | None = Field(
        None, description="Access token expiry (refreshed automatically)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "authenticated": True,
                "expires_at": "2026-10-20T06:00:00Z",
            }
        }
    )

    @classmethod
    def from_session(cls, session: Session) -> "SessionStatusResponse":
        """Build status from a session."""
        return cls(
            authenticated=session.is_authenticated,
            expires_at=session.expires_at,
        )
