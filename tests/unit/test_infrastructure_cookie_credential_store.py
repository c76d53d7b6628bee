"""Unit tests for CookieCredentialStore.

Tests cover:
- Persist then load restores the session
- Cookie attributes (httpOnly, SameSite, Secure, Max-Age)
- Tampered or foreign cookies treated as absent
- Token without expiry removes the expiry cookie
- Clear expires every session cookie
"""

import os
from datetime import UTC, datetime

import pytest
from fastapi import Response

from src.core.constants import (
    ACCESS_TOKEN_COOKIE,
    ACCESS_TOKEN_EXPIRES_COOKIE,
    CREDENTIAL_COOKIE,
)
from src.domain.entities.session import Session
from src.domain.value_objects.access_token import AccessToken
from src.infrastructure.security.encryption_service import EncryptionService
from src.infrastructure.session.cookie_credential_store import CookieCredentialStore

EXPIRES_AT = datetime(2024, 5, 1, 22, 0, tzinfo=UTC)


def make_store(*, secure: bool = False, key: bytes | None = None):
    encryption = EncryptionService.create(key or os.urandom(32)).value
    return CookieCredentialStore(
        encryption=encryption,
        secure=secure,
        credential_max_age=31536000,
        access_token_max_age=43200,
    )


def set_cookie_headers(response: Response) -> dict[str, str]:
    headers = {}
    for name, value in response.raw_headers:
        if name == b"set-cookie":
            text = value.decode()
            headers[text.split("=", 1)[0]] = text
    return headers


def cookie_jar(response: Response) -> dict[str, str]:
    return {
        name: header.split("=", 1)[1].split(";", 1)[0]
        for name, header in set_cookie_headers(response).items()
    }


@pytest.mark.unit
class TestCookieCredentialStore:
    """Test CookieCredentialStore."""

    def test_persist_then_load(self):
        store = make_store()
        session = Session(
            credential="y0_cred",
            access_token=AccessToken(value="t1.token", expires_at=EXPIRES_AT),
        )
        response = Response()

        store.persist(response, session)

        assert store.load(cookie_jar(response)) == session

    def test_cookie_values_are_encrypted(self):
        store = make_store()
        response = Response()

        store.persist(response, Session(credential="y0_cred"))

        jar = cookie_jar(response)
        assert set(jar) == {CREDENTIAL_COOKIE}
        assert "y0_cred" not in jar[CREDENTIAL_COOKIE]

    def test_cookie_attributes(self):
        store = make_store(secure=True)
        response = Response()

        store.persist(
            response,
            Session(
                credential="y0_cred",
                access_token=AccessToken(value="t1.token", expires_at=EXPIRES_AT),
            ),
        )

        headers = set_cookie_headers(response)
        credential = headers[CREDENTIAL_COOKIE].lower()
        assert "httponly" in credential
        assert "samesite=lax" in credential
        assert "secure" in credential
        assert "max-age=31536000" in credential
        assert "max-age=43200" in headers[ACCESS_TOKEN_COOKIE].lower()

    def test_insecure_cookies_in_development(self):
        store = make_store(secure=False)
        response = Response()

        store.persist(response, Session(credential="y0_cred"))

        assert "secure" not in set_cookie_headers(response)[CREDENTIAL_COOKIE].lower()

    def test_load_empty_cookies_is_anonymous(self):
        assert make_store().load({}) == Session.anonymous()

    def test_tampered_cookie_treated_as_absent(self):
        store = make_store()
        response = Response()
        store.persist(response, Session(credential="y0_cred"))
        jar = cookie_jar(response)
        value = jar[CREDENTIAL_COOKIE]
        replacement = "B" if value[20] == "A" else "A"
        jar[CREDENTIAL_COOKIE] = value[:20] + replacement + value[21:]

        assert store.load(jar).credential is None

    def test_foreign_key_cookie_treated_as_absent(self):
        response = Response()
        make_store().persist(response, Session(credential="y0_cred"))

        assert make_store().load(cookie_jar(response)) == Session.anonymous()

    def test_garbage_cookie_treated_as_absent(self):
        session = make_store().load({ACCESS_TOKEN_COOKIE: "garbage"})

        assert session.access_token is None

    def test_token_without_expiry_deletes_expiry_cookie(self):
        store = make_store()
        response = Response()

        store.persist(
            response,
            Session(
                credential="y0_cred",
                access_token=AccessToken(value="t1.token", expires_at=None),
            ),
        )

        headers = set_cookie_headers(response)
        assert "max-age=0" in headers[ACCESS_TOKEN_EXPIRES_COOKIE].lower()
        loaded = store.load(cookie_jar(response))
        assert loaded.access_token == AccessToken(value="t1.token", expires_at=None)

    def test_clear_expires_all_cookies(self):
        response = Response()

        make_store().clear(response)

        headers = set_cookie_headers(response)
        assert set(headers) == {
            CREDENTIAL_COOKIE,
            ACCESS_TOKEN_COOKIE,
            ACCESS_TOKEN_EXPIRES_COOKIE,
        }
        assert all("max-age=0" in h.lower() for h in headers.values())
