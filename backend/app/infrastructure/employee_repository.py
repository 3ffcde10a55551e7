"""SQL Employee Repository: durable EmployeeRepository over an AsyncSession.

Invariants:
    - Email uniqueness is enforced by the database (unique index on lower(email)),
      so the check and the write are one atomic statement
    - Every failed write is rolled back before the error leaves this module
    - IntegrityError on the email index -> EmailConflictError;
      any other SQLAlchemyError -> StorageFailureError (details logged, never returned)
    - update/delete decide NotFound from the affected row count, not a prior read
    - Ids outside 1..MAX_EMPLOYEE_ID are NotFound without a query (drivers overflow on them)
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import (
    MAX_EMPLOYEE_ID, EmployeeId, EmployeeRecord, Gender, StoredEmployee,
)
from app.core.errors import (
    EmailConflictError, ResourceNotFoundError, StorageFailureError,
)
from app.models.employee import Employee

logger = logging.getLogger(__name__)

# SQLSTATE unique_violation (PostgreSQL); SQLite only reports it in the message
_UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """True when the integrity error comes from a UNIQUE constraint/index."""
    orig = exc.orig
    for attr in ("sqlstate", "pgcode"):
        if getattr(orig, attr, None) == _UNIQUE_VIOLATION:
            return True
    return "unique" in str(orig).lower()


def _to_stored(row: Employee) -> StoredEmployee:
    return StoredEmployee(
        id=EmployeeId(row.id),
        name=row.name,
        email=row.email,
        gender=Gender(row.gender),
        age=row.age,
        department=row.department,
    )


def _require_issuable_id(employee_id: EmployeeId) -> None:
    if not 1 <= employee_id <= MAX_EMPLOYEE_ID:
        raise ResourceNotFoundError("Employee", employee_id)


def _column_values(record: EmployeeRecord) -> dict:
    return {
        "name": record.name,
        "email": record.email,
        "gender": record.gender.value,
        "age": record.age,
        "department": record.department,
    }


class SqlEmployeeRepository:
    """EmployeeRepository backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, record: EmployeeRecord) -> StoredEmployee:
        created = await self.create_many([record])
        return created[0]

    async def create_many(
        self, records: list[EmployeeRecord],
    ) -> list[StoredEmployee]:
        """Insert all records in one transaction; all or nothing."""
        rows = [Employee(**_column_values(r)) for r in records]
        try:
            self._db.add_all(rows)
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            conflict_email = records[0].email if len(records) == 1 else None
            raise self._translate(e, "insert employee", conflict_email)
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"Employee insert failed: {e}", extra={"operation": "insert"})
            raise StorageFailureError("insert employee")
        return [_to_stored(row) for row in rows]

    async def list_all(self) -> list[StoredEmployee]:
        try:
            result = await self._db.execute(
                select(Employee).order_by(Employee.id),
            )
        except SQLAlchemyError as e:
            logger.error(f"Employee listing failed: {e}", extra={"operation": "select"})
            raise StorageFailureError("fetch employees")
        return [_to_stored(row) for row in result.scalars().all()]

    async def get(self, employee_id: EmployeeId) -> StoredEmployee:
        _require_issuable_id(employee_id)
        try:
            row = await self._db.get(Employee, employee_id)
        except SQLAlchemyError as e:
            logger.error(
                f"Employee lookup failed: {e}",
                extra={"operation": "select", "employee_id": employee_id},
            )
            raise StorageFailureError("fetch employee")
        if row is None:
            raise ResourceNotFoundError("Employee", employee_id)
        return _to_stored(row)

    async def update(
        self, employee_id: EmployeeId, record: EmployeeRecord,
    ) -> StoredEmployee:
        """Replace all five fields of an existing row."""
        _require_issuable_id(employee_id)
        stmt = (
            update(Employee)
            .where(Employee.id == employee_id)
            .values(**_column_values(record))
        )
        try:
            result = await self._db.execute(stmt)
            if result.rowcount == 0:
                await self._db.rollback()
                raise ResourceNotFoundError("Employee", employee_id)
            await self._db.commit()
        except IntegrityError as e:
            await self._db.rollback()
            raise self._translate(e, "update employee", record.email, employee_id)
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Employee update failed: {e}",
                extra={"operation": "update", "employee_id": employee_id},
            )
            raise StorageFailureError("update employee")
        return StoredEmployee.from_record(employee_id, record)

    async def delete(self, employee_id: EmployeeId) -> None:
        _require_issuable_id(employee_id)
        stmt = delete(Employee).where(Employee.id == employee_id)
        try:
            result = await self._db.execute(stmt)
            if result.rowcount == 0:
                await self._db.rollback()
                raise ResourceNotFoundError("Employee", employee_id)
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Employee delete failed: {e}",
                extra={"operation": "delete", "employee_id": employee_id},
            )
            raise StorageFailureError("delete employee")

    @staticmethod
    def _translate(
        exc: IntegrityError,
        operation: str,
        email: str | None,
        employee_id: int | None = None,
    ) -> Exception:
        if is_unique_violation(exc):
            return EmailConflictError(email)
        logger.error(
            f"Integrity error during {operation}: {exc}",
            extra={"operation": operation, "employee_id": employee_id},
        )
        return StorageFailureError(operation)
