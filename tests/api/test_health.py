from fastapi.testclient import TestClient

from recall.api.main import create_app


def test_health_check():
    client = TestClient(create_app())
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}


def test_health_check_should_echo_correlation_id():
    client = TestClient(create_app())
    response = client.get("/api/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"
