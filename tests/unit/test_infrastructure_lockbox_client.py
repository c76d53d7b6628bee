"""Unit tests for LockboxClient.

Tests cover:
- Secret listing (paging params, mapping, empty-not-found)
- Get secret (404 is an error)
- Create/update/delete request bodies and Operation decoding
- Payload read from the data plane (create then read returns the entries)
- Version mutations (add version, schedule/cancel destruction)
- Mutations never apply the empty-not-found rule
- Secret ids escaped as a single path segment

Uses pytest-httpx with a real CloudApiGateway and a mocked token provider.
"""

import json
from unittest.mock import AsyncMock

import pytest

from src.core.result import Failure, Success
from src.domain.entities import Operation, Payload, PayloadEntry
from src.domain.enums import SecretStatus, VersionStatus
from src.domain.value_objects.payload_entry_change import PayloadEntryChange
from src.infrastructure.cloud.api_gateway import CloudApiGateway
from src.infrastructure.cloud.lockbox_client import LockboxClient
from tests.conftest import make_token

CONTROL_URL = "https://cpl.lockbox.test/lockbox/v1"
DATA_URL = "https://dpl.lockbox.test/lockbox/v1"

SECRET_JSON = {
    "id": "e6q1",
    "folderId": "b1g",
    "name": "db-credentials",
    "status": "ACTIVE",
    "labels": {"env": "prod"},
    "currentVersion": {
        "id": "V1",
        "secretId": "e6q1",
        "status": "ACTIVE",
        "payloadEntryKeys": ["A", "B"],
    },
    "deletionProtection": True,
    "createdAt": "2024-05-01T10:00:00Z",
}

OPERATION_JSON = {
    "id": "op1",
    "description": "Create secret",
    "done": False,
    "metadata": {"secretId": "e6q1", "versionId": "V1"},
}


@pytest.fixture
def client() -> LockboxClient:
    token_provider = AsyncMock()
    token_provider.get_access_token.return_value = make_token("t1.lockbox")
    gateway = CloudApiGateway(token_provider=token_provider, timeout=5.0)
    return LockboxClient(
        gateway=gateway, base_url=CONTROL_URL, payload_base_url=DATA_URL
    )


def sent_json(request) -> dict:
    return json.loads(request.content)


# =============================================================================
# Reads
# =============================================================================


@pytest.mark.unit
class TestLockboxReads:
    """Test secret, version and payload reads."""

    async def test_list_secrets(self, client, session, httpx_mock):
        httpx_mock.add_response(
            json={"secrets": [SECRET_JSON], "nextPageToken": "p2"}
        )

        result = await client.list_secrets(session, "b1g")

        assert isinstance(result, Success)
        page = result.value
        assert [s.id for s in page.items] == ["e6q1"]
        assert page.items[0].status == SecretStatus.ACTIVE
        assert page.items[0].current_version_id == "V1"
        assert page.next_page_token == "p2"

        request = httpx_mock.get_request()
        assert str(request.url).startswith(f"{CONTROL_URL}/secrets?")
        assert request.url.params["folderId"] == "b1g"
        assert request.url.params["pageSize"] == "100"
        assert "pageToken" not in request.url.params

    async def test_list_secrets_empty_not_found(self, client, session, httpx_mock):
        httpx_mock.add_response(status_code=404, text="")

        result = await client.list_secrets(session, "b1g", page_token="p2")

        assert isinstance(result, Success)
        assert result.value.items == []
        assert result.value.next_page_token is None
        assert httpx_mock.get_request().url.params["pageToken"] == "p2"

    async def test_get_secret(self, client, session, httpx_mock):
        httpx_mock.add_response(json=SECRET_JSON)

        result = await client.get_secret(session, "e6q1")

        assert isinstance(result, Success)
        assert result.value.name == "db-credentials"
        assert result.value.deletion_protection is True
        assert httpx_mock.get_request().url == f"{CONTROL_URL}/secrets/e6q1"

    async def test_get_secret_empty_404_is_error(self, client, session, httpx_mock):
        httpx_mock.add_response(status_code=404, text="")

        result = await client.get_secret(session, "e6q1")

        assert isinstance(result, Failure)
        assert result.error.status_code == 404

    async def test_get_secret_without_id_is_invalid_response(
        self, client, session, httpx_mock
    ):
        httpx_mock.add_response(json={"name": "no-id"})

        result = await client.get_secret(session, "e6q1")

        assert isinstance(result, Failure)
        assert result.error.status_code == 502

    async def test_get_payload_from_data_plane(self, client, session, httpx_mock):
        httpx_mock.add_response(
            json={
                "versionId": "V1",
                "entries": [
                    {"key": "A", "textValue": "1"},
                    {"key": "CERT", "binaryValue": "AAEC"},
                ],
            }
        )

        result = await client.get_payload(session, "e6q1", version_id="V1")

        assert result == Success(
            value=Payload(
                version_id="V1",
                entries=[
                    PayloadEntry(key="A", text_value="1"),
                    PayloadEntry(key="CERT", binary_value="AAEC"),
                ],
            )
        )
        request = httpx_mock.get_request()
        assert str(request.url).startswith(f"{DATA_URL}/secrets/e6q1/payload")
        assert request.url.params["versionId"] == "V1"

    async def test_get_payload_current_version_omits_param(
        self, client, session, httpx_mock
    ):
        httpx_mock.add_response(status_code=404, text="")

        result = await client.get_payload(session, "e6q1")

        assert result == Success(value=Payload())
        assert "versionId" not in httpx_mock.get_request().url.params

    async def test_list_versions(self, client, session, httpx_mock):
        httpx_mock.add_response(
            json={
                "versions": [
                    {"id": "V2", "status": "ACTIVE"},
                    {
                        "id": "V1",
                        "status": "SCHEDULED_FOR_DESTRUCTION",
                        "destroyAt": "2024-05-08T10:00:00Z",
                    },
                ]
            }
        )

        result = await client.list_versions(session, "e6q1")

        assert isinstance(result, Success)
        versions = result.value.items
        assert [v.id for v in versions] == ["V2", "V1"]
        assert all(v.secret_id == "e6q1" for v in versions)
        assert versions[1].status == VersionStatus.SCHEDULED_FOR_DESTRUCTION
        assert versions[1].is_scheduled_for_destruction


# =============================================================================
# Mutations
# =============================================================================


@pytest.mark.unit
class TestLockboxMutations:
    """Test mutation request bodies and Operation decoding."""

    async def test_create_secret_body(self, client, session, httpx_mock):
        httpx_mock.add_response(json=OPERATION_JSON)

        result = await client.create_secret(
            session,
            folder_id="b1g",
            name="app",
            description="App secrets",
            labels={"env": "prod"},
            kms_key_id="abj1",
            deletion_protection=True,
            version_description="initial",
            payload_entries=[PayloadEntryChange(key="A", text_value="1")],
        )

        assert isinstance(result, Success)
        assert isinstance(result.value, Operation)
        assert result.value.id == "op1"
        assert result.value.metadata == {"secretId": "e6q1", "versionId": "V1"}

        request = httpx_mock.get_request()
        assert request.method == "POST"
        assert request.url == f"{CONTROL_URL}/secrets"
        assert sent_json(request) == {
            "folderId": "b1g",
            "name": "app",
            "description": "App secrets",
            "labels": {"env": "prod"},
            "kmsKeyId": "abj1",
            "deletionProtection": True,
            "versionDescription": "initial",
            "versionPayloadEntries": [{"key": "A", "textValue": "1"}],
        }

    async def test_create_secret_minimal_body(self, client, session, httpx_mock):
        httpx_mock.add_response(json=OPERATION_JSON)

        await client.create_secret(session, folder_id="b1g", name="app")

        assert sent_json(httpx_mock.get_request()) == {
            "folderId": "b1g",
            "name": "app",
            "deletionProtection": False,
        }

    async def test_create_then_read_payload(self, client, session, httpx_mock):
        httpx_mock.add_response(method="POST", json=OPERATION_JSON)
        httpx_mock.add_response(
            method="GET",
            json={
                "versionId": "V1",
                "entries": [
                    {"key": "A", "textValue": "1"},
                    {"key": "B", "textValue": "2"},
                ],
            },
        )

        created = await client.create_secret(
            session,
            folder_id="b1g",
            name="app",
            payload_entries=[
                PayloadEntryChange(key="A", text_value="1"),
                PayloadEntryChange(key="B", text_value="2"),
            ],
        )
        assert isinstance(created, Success)
        secret_id = created.value.metadata["secretId"]

        payload = await client.get_payload(session, secret_id)

        assert isinstance(payload, Success)
        assert payload.value.as_dict() == {"A": "1", "B": "2"}
        create_request, read_request = httpx_mock.get_requests()
        assert sent_json(create_request)["versionPayloadEntries"] == [
            {"key": "A", "textValue": "1"},
            {"key": "B", "textValue": "2"},
        ]
        assert read_request.url.path.endswith("/secrets/e6q1/payload")

    async def test_update_secret_sends_mask(self, client, session, httpx_mock):
        httpx_mock.add_response(json=OPERATION_JSON)

        await client.update_secret(
            session,
            "e6q1",
            update_mask=["name", "deletion_protection"],
            name="renamed",
            deletion_protection=False,
        )

        request = httpx_mock.get_request()
        assert request.method == "PATCH"
        assert request.url == f"{CONTROL_URL}/secrets/e6q1"
        assert sent_json(request) == {
            "updateMask": "name,deletion_protection",
            "name": "renamed",
            "deletionProtection": False,
        }

    async def test_delete_secret(self, client, session, httpx_mock):
        httpx_mock.add_response(json={"id": "op2", "done": True})

        result = await client.delete_secret(session, "e6q1")

        assert isinstance(result, Success)
        assert result.value.done is True
        request = httpx_mock.get_request()
        assert request.method == "DELETE"
        assert request.content == b""

    async def test_add_version_body(self, client, session, httpx_mock):
        httpx_mock.add_response(json=OPERATION_JSON)

        await client.add_version(
            session,
            "e6q1",
            payload_entries=[
                PayloadEntryChange(key="A", text_value="2"),
                PayloadEntryChange(key="OLD"),
            ],
            description="rotate",
            base_version_id="V1",
        )

        request = httpx_mock.get_request()
        assert request.url == f"{CONTROL_URL}/secrets/e6q1:addVersion"
        assert sent_json(request) == {
            "payloadEntries": [{"key": "A", "textValue": "2"}, {"key": "OLD"}],
            "description": "rotate",
            "baseVersionId": "V1",
        }

    async def test_schedule_version_destruction(self, client, session, httpx_mock):
        httpx_mock.add_response(json=OPERATION_JSON)

        await client.schedule_version_destruction(
            session, "e6q1", "V1", pending_period="604800s"
        )

        request = httpx_mock.get_request()
        assert request.url == f"{CONTROL_URL}/secrets/e6q1:scheduleVersionDestruction"
        assert sent_json(request) == {"versionId": "V1", "pendingPeriod": "604800s"}

    async def test_cancel_version_destruction(self, client, session, httpx_mock):
        httpx_mock.add_response(json=OPERATION_JSON)

        await client.cancel_version_destruction(session, "e6q1", "V1")

        request = httpx_mock.get_request()
        assert request.url == f"{CONTROL_URL}/secrets/e6q1:cancelVersionDestruction"
        assert sent_json(request) == {"versionId": "V1"}

    async def test_mutation_failure_passed_through(self, client, session, httpx_mock):
        httpx_mock.add_response(
            status_code=400, json={"message": "Deletion protection is enabled"}
        )

        result = await client.delete_secret(session, "e6q1")

        assert isinstance(result, Failure)
        assert result.error.status_code == 400
        assert result.error.message == "Deletion protection is enabled"

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda c, s: c.delete_secret(s, "gone"),
            lambda c, s: c.update_secret(s, "gone", update_mask=["name"], name="x"),
            lambda c, s: c.add_version(
                s, "gone", payload_entries=[PayloadEntryChange(key="A", text_value="1")]
            ),
            lambda c, s: c.schedule_version_destruction(s, "gone", "V1"),
            lambda c, s: c.cancel_version_destruction(s, "gone", "V1"),
        ],
        ids=["delete", "update", "add-version", "schedule", "cancel"],
    )
    async def test_mutation_empty_404_is_error(
        self, client, session, httpx_mock, mutate
    ):
        httpx_mock.add_response(status_code=404, text="")

        result = await mutate(client, session)

        assert isinstance(result, Failure)
        assert result.error.status_code == 404
        assert result.error.message == "HTTP 404"


@pytest.mark.unit
class TestLockboxPaths:
    """Secret ids are escaped as a single path segment."""

    @pytest.mark.parametrize(
        ("secret_id", "expected"),
        [
            ("x:addVersion", b"/lockbox/v1/secrets/x%3AaddVersion"),
            ("a/b?c=1", b"/lockbox/v1/secrets/a%2Fb%3Fc%3D1"),
        ],
    )
    async def test_get_secret_escapes_id(
        self, client, session, httpx_mock, secret_id, expected
    ):
        httpx_mock.add_response(status_code=404, text="")

        await client.get_secret(session, secret_id)

        assert httpx_mock.get_request().url.raw_path == expected

    async def test_mutation_suffix_kept_after_escaped_id(
        self, client, session, httpx_mock
    ):
        httpx_mock.add_response(json=OPERATION_JSON)

        await client.cancel_version_destruction(session, "a:b", "V1")

        assert (
            httpx_mock.get_request().url.raw_path
            == b"/lockbox/v1/secrets/a%3Ab:cancelVersionDestruction"
        )
