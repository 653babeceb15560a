"""Tests for the health endpoint and the bundled browser client."""

from fastapi.testclient import TestClient


def test_health_check(client: TestClient):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "secure-task-manager"}


def test_client_is_served_at_root(client: TestClient):
    response = client.get("/")
    assert response.status_code == 200
    assert "Secure Task Manager" in response.text

    script = client.get("/app.js")
    assert script.status_code == 200
    assert "localStorage" in script.text


def test_unknown_api_path_uses_message_shape(client: TestClient):
    response = client.get("/api/nonexistent")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_wrong_method_uses_message_shape(client: TestClient):
    response = client.patch("/api/health")
    assert response.status_code == 405
    assert "message" in response.json()
