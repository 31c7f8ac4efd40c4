"""Health endpoint tests."""

from fastapi.testclient import TestClient

from maestro.main import app

client = TestClient(app)


def test_health_endpoint():
    """Test health check returns healthy status."""
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["serviceName"] == "maestro-agents"
    assert data["version"] == "0.1.0"
    assert "timestamp" in data
    assert "activeAgents" in data
    assert "geminiConfigured" in data


def test_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["service"] == "maestro-agents"
