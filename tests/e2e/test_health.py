"""End-to-end tests for the health endpoint."""

from fastapi.testclient import TestClient

from leaf.interface.api.app import create_app
from tests.di import build_test_container


def test_health_check():
    """Health endpoint reports the service as healthy."""
    client = TestClient(create_app(build_test_container()))

    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
