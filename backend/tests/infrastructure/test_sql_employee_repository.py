"""SQL Repository: backend error translation and schema constraints.

Tests cover:
    - is_unique_violation recognises SQLite messages and PostgreSQL SQLSTATE
    - Unique IntegrityError -> EmailConflictError, other IntegrityError -> StorageFailureError
    - Operational errors -> StorageFailureError after rollback
    - The database itself rejects case-insensitive duplicate emails
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError, OperationalError

from app.core.errors import EmailConflictError, StorageFailureError
from app.infrastructure.employee_repository import (
    SqlEmployeeRepository, is_unique_violation,
)
from app.models.employee import Employee
from tests.factories import make_record


class _PgError(Exception):
    sqlstate = "23505"


def _make_mock_db():
    """Create a mock AsyncSession with required methods."""
    db = AsyncMock()
    db.add_all = MagicMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    db.execute = AsyncMock()
    return db


def test_is_unique_violation_sqlite_message():
    exc = IntegrityError(
        "INSERT", {}, Exception("UNIQUE constraint failed: index 'uq_employees_email_lower'"),
    )
    assert is_unique_violation(exc)


def test_is_unique_violation_postgres_sqlstate():
    assert is_unique_violation(IntegrityError("INSERT", {}, _PgError("dup")))


def test_is_unique_violation_false_for_check_constraint():
    exc = IntegrityError("INSERT", {}, Exception("CHECK constraint failed: ck_employees_age"))
    assert not is_unique_violation(exc)


async def test_unique_integrity_error_becomes_email_conflict():
    db = _make_mock_db()
    db.commit.side_effect = IntegrityError(
        "INSERT", {}, Exception("UNIQUE constraint failed"),
    )
    with pytest.raises(EmailConflictError) as exc_info:
        await SqlEmployeeRepository(db).create(make_record())
    assert exc_info.value.email == "alice@co.com"
    db.rollback.assert_awaited_once()


async def test_other_integrity_error_becomes_storage_failure():
    db = _make_mock_db()
    db.commit.side_effect = IntegrityError(
        "INSERT", {}, Exception("CHECK constraint failed"),
    )
    with pytest.raises(StorageFailureError):
        await SqlEmployeeRepository(db).create(make_record())


async def test_operational_error_on_insert_becomes_storage_failure():
    db = _make_mock_db()
    db.commit.side_effect = OperationalError("INSERT", {}, Exception("disk I/O error"))
    with pytest.raises(StorageFailureError) as exc_info:
        await SqlEmployeeRepository(db).create(make_record())
    assert exc_info.value.message == "Failed to insert employee."
    assert "disk" not in exc_info.value.message
    db.rollback.assert_awaited_once()


async def test_operational_error_on_list_becomes_storage_failure():
    db = _make_mock_db()
    db.execute.side_effect = OperationalError("SELECT", {}, Exception("locked"))
    with pytest.raises(StorageFailureError):
        await SqlEmployeeRepository(db).list_all()


async def test_operational_error_on_delete_rolls_back():
    db = _make_mock_db()
    db.execute.side_effect = OperationalError("DELETE", {}, Exception("locked"))
    with pytest.raises(StorageFailureError):
        await SqlEmployeeRepository(db).delete(1)
    db.rollback.assert_awaited_once()


async def test_database_enforces_case_insensitive_unique_email(test_db):
    values = {
        "name": "Alice Smith", "email": "alice@co.com", "gender": "Female",
        "age": 30, "department": "Engineering",
    }
    await test_db.execute(insert(Employee).values(**values))
    await test_db.commit()
    with pytest.raises(IntegrityError):
        await test_db.execute(
            insert(Employee).values(**{**values, "email": "ALICE@CO.COM"}),
        )
    await test_db.rollback()


async def test_database_enforces_age_range(test_db):
    with pytest.raises(IntegrityError):
        await test_db.execute(insert(Employee).values(
            name="Old Timer", email="old@co.com", gender="Male",
            age=70, department="Archive",
        ))
    await test_db.rollback()
