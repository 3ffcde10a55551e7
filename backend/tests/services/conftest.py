"""Service test fixtures: FastAPI test clients over both storage backends.

Invariants:
    - Every test gets a fresh in-memory SQLite database (or a fresh memory store)
    - get_employee_repository is overridden; lifespan is not run by ASGITransport
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.api import dependencies
from app.api.dependencies import get_employee_repository
from app.infrastructure.employee_repository import SqlEmployeeRepository
from app.infrastructure.memory_employee_repository import MemoryEmployeeRepository
from app.main import app


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with the SQL repository on the test DB."""
    async def override_repository():
        async with test_session_factory() as session:
            yield SqlEmployeeRepository(session)

    app.dependency_overrides[get_employee_repository] = override_repository

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def memory_client(monkeypatch):
    """FastAPI test client running with the memory backend, no override."""
    monkeypatch.setattr(dependencies, "memory_repository", MemoryEmployeeRepository())
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
