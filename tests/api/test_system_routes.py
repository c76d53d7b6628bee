"""API tests for root, health and config endpoints."""

import pytest

from src.core.config import settings


@pytest.mark.api
class TestSystemRoutes:
    """Test service-level routes."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json() == {
            "message": settings.app_name,
            "status": "operational",
            "version": settings.app_version,
        }

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
        assert "X-Trace-Id" in response.headers

    def test_config_hidden_outside_development(self, client):
        assert client.get("/config").status_code == 403

    def test_unknown_route_is_problem_details(self, client):
        response = client.get("/api/v1/nope")

        assert response.status_code == 404
        body = response.json()
        assert body["status"] == 404
        assert body["trace_id"] == response.headers["X-Trace-Id"]
