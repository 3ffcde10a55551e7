"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Every store implementation satisfies the same contract:
        create/create_many assign ids strictly greater than any id ever issued
        list_all returns a snapshot ordered by ascending id
        update replaces all five fields; id never changes
        email uniqueness is case-insensitive and atomic with the guarded write
        failed operations leave stored state unchanged
    - Expected outcomes raise ResourceNotFoundError / EmailConflictError;
      backend faults raise StorageFailureError

Design Decisions:
    - Protocol over ABC: structural subtyping, SQL and in-memory stores share no base class
    - Async methods: implementations do IO, callers never block the event loop
"""

from typing import Protocol

from app.core.domain_types import EmployeeId, EmployeeRecord, StoredEmployee


class EmployeeRepository(Protocol):
    """Contract for employee persistence. Implemented by shell."""
    async def create(self, record: EmployeeRecord) -> StoredEmployee: ...
    async def create_many(
        self, records: list[EmployeeRecord],
    ) -> list[StoredEmployee]: ...
    async def list_all(self) -> list[StoredEmployee]: ...
    async def get(self, employee_id: EmployeeId) -> StoredEmployee: ...
    async def update(
        self, employee_id: EmployeeId, record: EmployeeRecord,
    ) -> StoredEmployee: ...
    async def delete(self, employee_id: EmployeeId) -> None: ...
