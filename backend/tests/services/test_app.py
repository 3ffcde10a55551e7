"""Application Assembly: API docs and the static frontend mount.

Tests cover:
    - /openapi.json carries the API title and the employee routes
    - A configured static_dir is served at / while /api/* still reaches the API
    - A missing static_dir mounts nothing
"""

from httpx import ASGITransport, AsyncClient

from app.api import dependencies
from app.config import Settings
from app.infrastructure.memory_employee_repository import MemoryEmployeeRepository
from app.main import create_app


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def test_openapi_document(client):
    res = await client.get("/openapi.json")
    assert res.status_code == 200
    doc = res.json()
    assert doc["info"]["title"] == "Employee Registry API"
    assert "/api/employees" in doc["paths"]
    assert "/api/employees/{employee_id}" in doc["paths"]


async def test_docs_page_served(client):
    res = await client.get("/docs")
    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]


async def test_static_dir_served_at_root(tmp_path, monkeypatch):
    (tmp_path / "index.html").write_text("<h1>Employees</h1>")
    monkeypatch.setattr(dependencies, "memory_repository", MemoryEmployeeRepository())
    app = create_app(Settings(static_dir=str(tmp_path), log_format="text"))

    async with _client(app) as c:
        res = await c.get("/")
        assert res.status_code == 200
        assert "<h1>Employees</h1>" in res.text

        res = await c.get("/api/employees")
        assert res.status_code == 200
        assert res.json() == []


async def test_missing_static_dir_mounts_nothing(tmp_path, monkeypatch):
    monkeypatch.setattr(dependencies, "memory_repository", MemoryEmployeeRepository())
    app = create_app(Settings(static_dir=str(tmp_path / "absent"), log_format="text"))

    async with _client(app) as c:
        assert (await c.get("/")).status_code == 404
        assert (await c.get("/api/employees")).status_code == 200
