"""Health probes: liveness always up, readiness follows the database."""

import palette_picker.infrastructure.database as db_module


async def test_liveness_returns_healthy(client):
    response = await client.get("/api/v1/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "palette-picker-api"


async def test_readiness_with_database_is_ready(client):
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database_is_503(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json()["reason"] == "database_unavailable"


async def test_readiness_with_failing_database_is_503(client, monkeypatch):
    async def failing_check():
        return False

    monkeypatch.setattr(db_module.db_manager, "health_check", failing_check)
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 503
    assert response.json() == {
        "status": "not_ready", "reason": "database_unavailable",
    }
