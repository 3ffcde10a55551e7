"""In-Memory Employee Repository: process-local EmployeeRepository.

Invariants:
    - The row dict and the id counter live together in one instance; neither is exposed
    - _next_id only grows, so deleted ids are never reissued
    - Every mutation holds _lock, so the email check and the write are atomic
    - Email index keys fold ASCII letters only, matching SQLite lower(email)
    - Snapshots returned to callers are frozen StoredEmployee values

Design Decisions:
    - asyncio.Lock over threading.Lock: callers are coroutines on one event loop
"""

import asyncio
import string

from app.core.domain_types import EmployeeId, EmployeeRecord, StoredEmployee
from app.core.errors import EmailConflictError, ResourceNotFoundError


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _email_key(email: str) -> str:
    return email.translate(_ASCII_LOWER)


class MemoryEmployeeRepository:
    """EmployeeRepository backed by a dict. State is lost on restart."""

    def __init__(self):
        self._rows: dict[EmployeeId, StoredEmployee] = {}
        self._ids_by_email: dict[str, EmployeeId] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def create(self, record: EmployeeRecord) -> StoredEmployee:
        created = await self.create_many([record])
        return created[0]

    async def create_many(
        self, records: list[EmployeeRecord],
    ) -> list[StoredEmployee]:
        async with self._lock:
            seen: set[str] = set()
            for record in records:
                key = _email_key(record.email)
                if key in self._ids_by_email or key in seen:
                    raise EmailConflictError(record.email)
                seen.add(key)

            created = []
            for record in records:
                stored = StoredEmployee.from_record(EmployeeId(self._next_id), record)
                self._next_id += 1
                self._rows[stored.id] = stored
                self._ids_by_email[_email_key(stored.email)] = stored.id
                created.append(stored)
            return created

    async def list_all(self) -> list[StoredEmployee]:
        return sorted(self._rows.values(), key=lambda e: e.id)

    async def get(self, employee_id: EmployeeId) -> StoredEmployee:
        stored = self._rows.get(employee_id)
        if stored is None:
            raise ResourceNotFoundError("Employee", employee_id)
        return stored

    async def update(
        self, employee_id: EmployeeId, record: EmployeeRecord,
    ) -> StoredEmployee:
        async with self._lock:
            current = self._rows.get(employee_id)
            if current is None:
                raise ResourceNotFoundError("Employee", employee_id)
            owner = self._ids_by_email.get(_email_key(record.email))
            if owner is not None and owner != employee_id:
                raise EmailConflictError(record.email)

            updated = StoredEmployee.from_record(employee_id, record)
            del self._ids_by_email[_email_key(current.email)]
            self._ids_by_email[_email_key(updated.email)] = employee_id
            self._rows[employee_id] = updated
            return updated

    async def delete(self, employee_id: EmployeeId) -> None:
        async with self._lock:
            stored = self._rows.pop(employee_id, None)
            if stored is None:
                raise ResourceNotFoundError("Employee", employee_id)
            del self._ids_by_email[_email_key(stored.email)]
