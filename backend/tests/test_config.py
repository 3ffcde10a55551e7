"""Settings: environment-driven configuration.

Tests:
    - postgresql:// URLs are rewritten for asyncpg
    - Defaults point at a local SQLite file with the SQL backend
    - Environment overrides are case-insensitive
"""

import pytest
from pydantic import ValidationError

from app.config import Settings


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@db:5432/hr")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/hr"


def test_sqlite_url_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///./x.db")
    assert settings.database_url == "sqlite+aiosqlite:///./x.db"


def test_storage_backend_from_env(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    assert Settings().storage_backend == "memory"


def test_unknown_storage_backend_rejected():
    with pytest.raises(ValidationError):
        Settings(storage_backend="redis")
