from datetime import datetime, timedelta

import pytest
from starlette.testclient import TestClient

from ettu.app import VERSION, AppState, build_router
from ettu.database import Database


def _parse_timestamp(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.fixture
def client_without_db():
    return TestClient(build_router(AppState()))


@pytest.fixture
def database():
    db = Database.connect("sqlite://")
    yield db
    db.close()


def test_health_without_database(client_without_db):
    response = client_without_db.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "not_configured"
    assert body["version"] == VERSION
    assert "error" not in body


def test_health_timestamp_is_utc(client_without_db):
    body = client_without_db.get("/health").json()
    stamp = _parse_timestamp(body["timestamp"])
    assert stamp.utcoffset() == timedelta(0)


def test_health_with_connected_database(database):
    client = TestClient(build_router(AppState(db=database)))
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"


def test_health_with_failing_database():
    db = Database.connect("sqlite://")
    db.close()
    client = TestClient(build_router(AppState(db=db)))
    response = client.get("/health")
    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "unhealthy"
    assert body["database"] == "disconnected"
    assert "closed" in body["error"]


def test_metrics_is_plain_text(client_without_db):
    response = client_without_db.get("/metrics")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text.startswith("#")


def test_api_status(client_without_db):
    response = client_without_db.get("/api/v1/status")
    assert response.status_code == 200
    assert response.text == "API is running"


def test_unknown_route_is_not_found(client_without_db):
    assert client_without_db.get("/api/v1/missing").status_code == 404


def test_cors_allows_any_origin(client_without_db):
    response = client_without_db.get("/api/v1/status", headers={"Origin": "https://app.example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight_allows_patch(client_without_db):
    response = client_without_db.options(
        "/api/v1/status",
        headers={"Origin": "https://app.example.com", "Access-Control-Request-Method": "PATCH"},
    )
    assert response.status_code == 200
    assert "PATCH" in response.headers["access-control-allow-methods"]


def test_cors_preflight_rejects_unlisted_method(client_without_db):
    response = client_without_db.options(
        "/api/v1/status",
        headers={"Origin": "https://app.example.com", "Access-Control-Request-Method": "TRACE"},
    )
    assert response.status_code == 400