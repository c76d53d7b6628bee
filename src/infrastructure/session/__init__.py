"""Browser session persistence."""

from src.infrastructure.session.cookie_credential_store import CookieCredentialStore

__all__ = ["CookieCredentialStore"]
