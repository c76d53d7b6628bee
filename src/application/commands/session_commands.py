"""Session commands (CQRS write operations).

Commands represent user intent to change session state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class BeginSession:
    """Log in with a long-lived credential.

    The credential is exchanged for an access token, then validated with a
    cheap authenticated probe before the session is considered established.

    Attributes:
        credential: OAuth token pasted by the operator.

    Example:
        >>> result = await handler.handle(BeginSession(credential="y0_AgAAAA..."))
    """

    credential: str

    def __repr__(self) -> str:
        return "BeginSession(credential=<redacted>)"
