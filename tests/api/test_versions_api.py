"""API tests for secret versions (add, rollback, destruction).

Tests cover:
- Version listing
- Add version with set/remove changes and base version guard
- Stale base version answered with 409 and both version ids
- Rollback and empty-version rejection
- Schedule (with and without body) and cancel destruction
"""

import pytest

from src.core.container import (
    get_add_secret_version_handler,
    get_cancel_version_destruction_handler,
    get_list_secret_versions_handler,
    get_rollback_secret_version_handler,
    get_schedule_version_destruction_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Success
from src.domain.entities import Operation, Page, SecretVersion
from src.domain.enums import VersionStatus
from src.domain.errors import VersionConflictError
from src.domain.value_objects.payload_entry_change import PayloadEntryChange

BASE_URL = "/api/v1/secrets/e6q1"
OPERATION = Operation(id="op1", metadata={"secretId": "e6q1", "versionId": "V3"})

CONFLICT = Failure(
    error=VersionConflictError(
        code=ErrorCode.SECRET_VERSION_CONFLICT,
        message="Secret was modified since the edit started; reload and retry",
        resource_type="secret",
        secret_id="e6q1",
        expected_version_id="V1",
        actual_version_id="V2",
    )
)


@pytest.mark.api
class TestListVersions:
    """Test GET .../versions."""

    def test_list(self, client, authenticated, stub_handler):
        handler = stub_handler(
            get_list_secret_versions_handler,
            Success(
                value=Page(
                    items=[
                        SecretVersion(
                            id="V1",
                            secret_id="e6q1",
                            status=VersionStatus.SCHEDULED_FOR_DESTRUCTION,
                        )
                    ]
                )
            ),
        )

        response = client.get(f"{BASE_URL}/versions", params={"page_token": "p2"})

        assert response.status_code == 200
        body = response.json()
        assert body["versions"][0]["status"] == "SCHEDULED_FOR_DESTRUCTION"
        assert body["next_page_token"] is None
        assert handler.handle.await_args.args[0].page_token == "p2"


@pytest.mark.api
class TestAddVersion:
    """Test POST .../versions."""

    def test_add_version(self, client, authenticated, stub_handler):
        handler = stub_handler(get_add_secret_version_handler, Success(value=OPERATION))

        response = client.post(
            f"{BASE_URL}/versions",
            json={
                "payload_entries": [
                    {"key": "A", "text_value": "2"},
                    {"key": "OLD", "text_value": None},
                ],
                "description": "rotate",
                "base_version_id": "V1",
            },
        )

        assert response.status_code == 202
        assert response.json()["id"] == "op1"
        command = handler.handle.await_args.args[0]
        assert command.secret_id == "e6q1"
        assert command.base_version_id == "V1"
        assert command.description == "rotate"
        assert command.payload_entries == [
            PayloadEntryChange(key="A", text_value="2"),
            PayloadEntryChange(key="OLD"),
        ]

    def test_stale_base_version_is_conflict(
        self, client, authenticated, stub_handler
    ):
        stub_handler(get_add_secret_version_handler, CONFLICT)

        response = client.post(
            f"{BASE_URL}/versions",
            json={
                "payload_entries": [{"key": "A", "text_value": "2"}],
                "base_version_id": "V1",
            },
        )

        assert response.status_code == 409
        body = response.json()
        assert body["type"].endswith("/errors/secret_version_conflict")
        assert body["expected_version_id"] == "V1"
        assert body["actual_version_id"] == "V2"


@pytest.mark.api
class TestRollback:
    """Test POST .../rollbacks."""

    def test_rollback(self, client, authenticated, stub_handler):
        handler = stub_handler(
            get_rollback_secret_version_handler, Success(value=OPERATION)
        )

        response = client.post(
            f"{BASE_URL}/rollbacks",
            json={"version_id": "V0", "base_version_id": "V2"},
        )

        assert response.status_code == 202
        command = handler.handle.await_args.args[0]
        assert (command.version_id, command.base_version_id) == ("V0", "V2")

    def test_rollback_conflict(self, client, authenticated, stub_handler):
        stub_handler(get_rollback_secret_version_handler, CONFLICT)

        response = client.post(
            f"{BASE_URL}/rollbacks",
            json={"version_id": "V0", "base_version_id": "V1"},
        )

        assert response.status_code == 409

    def test_rollback_to_empty_version(self, client, authenticated, stub_handler):
        stub_handler(
            get_rollback_secret_version_handler,
            Failure(
                error=ValidationError(
                    code=ErrorCode.EMPTY_VERSION,
                    message="Version V0 has no entries to restore",
                    field="version_id",
                )
            ),
        )

        response = client.post(f"{BASE_URL}/rollbacks", json={"version_id": "V0"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["code"] == "empty_version"

    def test_rollback_requires_version_id(self, client, authenticated):
        response = client.post(f"{BASE_URL}/rollbacks", json={"version_id": ""})

        assert response.status_code == 422


@pytest.mark.api
class TestVersionDestruction:
    """Test POST and DELETE .../versions/{version_id}/destruction."""

    def test_schedule_with_pending_period(self, client, authenticated, stub_handler):
        handler = stub_handler(
            get_schedule_version_destruction_handler, Success(value=OPERATION)
        )

        response = client.post(
            f"{BASE_URL}/versions/V1/destruction",
            json={"pending_period": "604800s"},
        )

        assert response.status_code == 202
        command = handler.handle.await_args.args[0]
        assert (command.version_id, command.pending_period) == ("V1", "604800s")

    def test_schedule_without_body(self, client, authenticated, stub_handler):
        handler = stub_handler(
            get_schedule_version_destruction_handler, Success(value=OPERATION)
        )

        response = client.post(f"{BASE_URL}/versions/V1/destruction")

        assert response.status_code == 202
        assert handler.handle.await_args.args[0].pending_period is None

    def test_cancel(self, client, authenticated, stub_handler):
        handler = stub_handler(
            get_cancel_version_destruction_handler, Success(value=OPERATION)
        )

        response = client.delete(f"{BASE_URL}/versions/V1/destruction")

        assert response.status_code == 202
        command = handler.handle.await_args.args[0]
        assert (command.secret_id, command.version_id) == ("e6q1", "V1")
