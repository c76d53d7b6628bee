"""API tests for the secrets resource.

Tests cover:
- Listing requires folder_id (400) and passes paging tokens
- Create/update/delete answer 202 with the upstream Operation
- Invalid names or keys answer 400 before anything is sent upstream
- Detail view, including the retryable load failure
- Payload read for a specific version
- Upstream errors passed through with their status
"""

from datetime import UTC, datetime

import pytest

from src.application.services.detail_loader import SecretDetail
from src.core.container import (
    get_create_secret_handler,
    get_delete_secret_handler,
    get_get_secret_handler,
    get_get_secret_payload_handler,
    get_list_secrets_handler,
    get_load_secret_detail_handler,
    get_update_secret_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Success
from src.domain.entities import (
    Operation,
    Page,
    Payload,
    PayloadEntry,
    Secret,
    SecretVersion,
)
from src.domain.enums import SecretStatus, VersionStatus
from src.domain.errors import DetailLoadError, UpstreamError
from src.domain.value_objects.payload_entry_change import PayloadEntryChange

CREATED_AT = datetime(2024, 5, 1, 10, 0, tzinfo=UTC)

VERSION = SecretVersion(
    id="V1",
    secret_id="e6q1",
    status=VersionStatus.ACTIVE,
    payload_entry_keys=["A"],
)
SECRET = Secret(
    id="e6q1",
    folder_id="b1g",
    name="app",
    status=SecretStatus.ACTIVE,
    current_version=VERSION,
    created_at=CREATED_AT,
)
OPERATION = Operation(
    id="op1",
    description="Create secret",
    metadata={"secretId": "e6q1", "versionId": "V1"},
)


@pytest.mark.api
class TestListSecrets:
    """Test GET /api/v1/secrets."""

    def test_list(self, client, authenticated, stub_handler):
        handler = stub_handler(
            get_list_secrets_handler,
            Success(value=Page(items=[SECRET], next_page_token="p2")),
        )

        response = client.get(
            "/api/v1/secrets", params={"folder_id": "b1g", "page_token": "p1"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["secrets"][0]["id"] == "e6q1"
        assert body["secrets"][0]["status"] == "ACTIVE"
        assert body["secrets"][0]["current_version"]["id"] == "V1"
        assert body["next_page_token"] == "p2"
        query = handler.handle.await_args.args[0]
        assert (query.folder_id, query.page_token) == ("b1g", "p1")

    def test_missing_folder_id(self, client, authenticated, stub_handler):
        stub_handler(
            get_list_secrets_handler,
            Failure(
                error=ValidationError(
                    code=ErrorCode.FIELD_REQUIRED,
                    message="folder_id is required",
                    field="folder_id",
                )
            ),
        )

        response = client.get("/api/v1/secrets")

        assert response.status_code == 400
        body = response.json()
        assert body["type"].endswith("/errors/field_required")
        assert body["errors"][0]["field"] == "folder_id"

    def test_upstream_status_passed_through(
        self, client, authenticated, stub_handler
    ):
        stub_handler(
            get_list_secrets_handler,
            Failure(
                error=UpstreamError(
                    code=ErrorCode.UPSTREAM_REQUEST_FAILED,
                    message="Permission denied",
                    status_code=403,
                    service="lockbox",
                )
            ),
        )

        response = client.get("/api/v1/secrets", params={"folder_id": "b1g"})

        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied"


@pytest.mark.api
class TestSecretMutations:
    """Test POST, PATCH and DELETE on secrets."""

    def test_create(self, client, authenticated, stub_handler):
        handler = stub_handler(get_create_secret_handler, Success(value=OPERATION))

        response = client.post(
            "/api/v1/secrets",
            json={
                "folder_id": "b1g",
                "name": "app",
                "labels": {"env": "prod"},
                "payload_entries": [
                    {"key": "A", "text_value": "1"},
                    {"key": "B", "text_value": "2"},
                ],
            },
        )

        assert response.status_code == 202
        assert response.json()["metadata"] == {"secretId": "e6q1", "versionId": "V1"}
        command = handler.handle.await_args.args[0]
        assert command.session == authenticated
        assert command.labels == {"env": "prod"}
        assert command.payload_entries == [
            PayloadEntryChange(key="A", text_value="1"),
            PayloadEntryChange(key="B", text_value="2"),
        ]

    def test_create_invalid_key(self, client, authenticated, stub_handler):
        stub_handler(
            get_create_secret_handler,
            Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_PAYLOAD_KEY,
                    message="Invalid key: bad key!",
                    field="payload_entries",
                )
            ),
        )

        response = client.post(
            "/api/v1/secrets",
            json={
                "folder_id": "b1g",
                "name": "app",
                "payload_entries": [{"key": "bad key!", "text_value": "1"}],
            },
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "invalid_payload_key"

    def test_create_missing_folder_is_422(self, client, authenticated):
        response = client.post("/api/v1/secrets", json={"name": "app"})

        assert response.status_code == 422
        fields = [e["field"] for e in response.json()["errors"]]
        assert "folder_id" in fields

    def test_update(self, client, authenticated, stub_handler):
        handler = stub_handler(get_update_secret_handler, Success(value=OPERATION))

        response = client.patch(
            "/api/v1/secrets/e6q1", json={"deletion_protection": False}
        )

        assert response.status_code == 202
        command = handler.handle.await_args.args[0]
        assert command.secret_id == "e6q1"
        assert command.deletion_protection is False
        assert command.name is None

    def test_delete(self, client, authenticated, stub_handler):
        handler = stub_handler(
            get_delete_secret_handler,
            Success(value=Operation(id="op2", done=True)),
        )

        response = client.delete("/api/v1/secrets/e6q1")

        assert response.status_code == 202
        assert response.json()["done"] is True
        assert handler.handle.await_args.args[0].secret_id == "e6q1"


@pytest.mark.api
class TestSecretReads:
    """Test secret, detail and payload reads."""

    def test_get_secret(self, client, authenticated, stub_handler):
        stub_handler(get_get_secret_handler, Success(value=SECRET))

        response = client.get("/api/v1/secrets/e6q1")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "app"
        assert body["kms_key_id"] is None

    def test_get_secret_not_found(self, client, authenticated, stub_handler):
        stub_handler(
            get_get_secret_handler,
            Failure(
                error=UpstreamError(
                    code=ErrorCode.UPSTREAM_REQUEST_FAILED,
                    message="HTTP 404",
                    status_code=404,
                    service="lockbox",
                )
            ),
        )

        assert client.get("/api/v1/secrets/e6q1").status_code == 404

    def test_detail(self, client, authenticated, stub_handler):
        handler = stub_handler(
            get_load_secret_detail_handler,
            Success(
                value=SecretDetail(
                    secret=SECRET,
                    versions=[VERSION],
                    payload=Payload(
                        version_id="V1",
                        entries=[PayloadEntry(key="A", text_value="1")],
                    ),
                    selected_version_id="V1",
                )
            ),
        )

        response = client.get(
            "/api/v1/secrets/e6q1/detail", params={"version_id": "V1"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["secret"]["id"] == "e6q1"
        assert [v["id"] for v in body["versions"]] == ["V1"]
        assert body["payload"]["entries"] == [
            {"key": "A", "text_value": "1", "binary_value": None}
        ]
        assert body["selected_version_id"] == "V1"
        assert handler.handle.await_args.args[0].version_id == "V1"

    def test_detail_load_failure_is_retryable(
        self, client, authenticated, stub_handler
    ):
        stub_handler(
            get_load_secret_detail_handler,
            Failure(
                error=DetailLoadError(
                    code=ErrorCode.SECRET_DETAIL_LOAD_FAILED,
                    message="Secret not found",
                    secret_id="e6q1",
                    attempts=4,
                    status_code=404,
                )
            ),
        )

        response = client.get("/api/v1/secrets/e6q1/detail")

        assert response.status_code == 404
        body = response.json()
        assert body["retryable"] is True
        assert body["type"].endswith("/errors/secret_detail_load_failed")

    def test_payload(self, client, authenticated, stub_handler):
        handler = stub_handler(
            get_get_secret_payload_handler,
            Success(
                value=Payload(
                    version_id="V0",
                    entries=[PayloadEntry(key="CERT", binary_value="AAEC")],
                )
            ),
        )

        response = client.get(
            "/api/v1/secrets/e6q1/payload", params={"version_id": "V0"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "version_id": "V0",
            "entries": [{"key": "CERT", "text_value": None, "binary_value": "AAEC"}],
        }
        query = handler.handle.await_args.args[0]
        assert (query.secret_id, query.version_id) == ("e6q1", "V0")
