"""API tests for the service-level endpoints."""

import pytest

pytestmark = pytest.mark.integration


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": "1.0.0"}


def test_root_lists_api_base(client):
    body = client.get("/").json()

    assert body["api_base"] == "/api"
    assert body["endpoints"]["stores"] == "/api/stores"


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/nowhere")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
