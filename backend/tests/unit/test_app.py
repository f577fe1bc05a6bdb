def test_root_returns_message(client):
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "People Directory API"


def test_health_returns_status(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] in ("healthy", "degraded")
    assert "version" in data
    assert data["version"] == "0.1.0"
    assert "services" in data
