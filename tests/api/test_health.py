import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from ideaforge.boundary.db import get_async_db
from ideaforge.main import create_app

@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)

def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}

def test_health_check_db(client):
    session = AsyncMock()
    client.app.dependency_overrides[get_async_db] = lambda: session

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Database connection OK"}
    session.execute.assert_awaited_once()

def test_health_check_db_unavailable(client):
    session = AsyncMock()
    session.execute.side_effect = ConnectionRefusedError("db down")
    client.app.dependency_overrides[get_async_db] = lambda: session

    response = client.get("/api/v1/health/db")

    assert response.status_code == 503
    assert response.json()["detail"] == "Database unavailable"
