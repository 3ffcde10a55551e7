"""Health Probes: liveness and readiness.

Tests cover:
    - Liveness always 200
    - Readiness 503 when no database is initialized
    - Readiness 200 with a reachable database or the memory backend
"""

from app.infrastructure import database
from app.infrastructure.database import DatabaseSessionManager


async def test_liveness(client):
    res = await client.get("/api/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_without_database_is_503(client, monkeypatch):
    monkeypatch.setattr(database, "db_manager", None)
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_readiness_with_database(client, monkeypatch):
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    monkeypatch.setattr(database, "db_manager", manager)
    res = await client.get("/api/health/ready")
    await manager.dispose()
    assert res.status_code == 200
    assert res.json()["checks"]["storage"] == "healthy"


async def test_readiness_with_memory_backend(memory_client):
    res = await memory_client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["storage"] == "memory"
