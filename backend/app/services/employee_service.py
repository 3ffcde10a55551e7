"""Employee Service: composes the validator with an EmployeeRepository.

Invariants:
    - Every write is validated before the repository is touched
    - A batch is validated in full before any record is written
    - Errors propagate unchanged as RegistryError subclasses; nothing is swallowed
    - Raw payloads in, StoredEmployee values out; no HTTP types here
"""

import logging
from collections.abc import Mapping
from typing import Any

from app.core.domain_types import EmployeeId, StoredEmployee
from app.core.enforce_employee import validate_employee
from app.core.errors import (
    EmailConflictError, EmployeeValidationError, ErrorContext, ResourceNotFoundError,
)
from app.core.repository_protocols import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Validation-and-persistence workflow for employee records."""

    def __init__(self, repository: EmployeeRepository):
        self._repository = repository

    async def create(self, candidate: Mapping[str, Any]) -> StoredEmployee:
        record = validate_employee(candidate)
        try:
            stored = await self._repository.create(record)
        except EmailConflictError:
            logger.warning("Employee create rejected: email exists")
            raise
        logger.info("Employee created", extra={"employee_id": stored.id})
        return stored

    async def create_many(
        self, candidates: list[Mapping[str, Any]],
    ) -> list[StoredEmployee]:
        """Validate every candidate, then write the whole batch at once."""
        if not candidates:
            raise EmployeeValidationError("At least one employee is required.")

        records = []
        for index, candidate in enumerate(candidates, start=1):
            try:
                records.append(validate_employee(candidate))
            except EmployeeValidationError as e:
                raise EmployeeValidationError(
                    f"Employee #{index}: {e.message}", e.field,
                    ErrorContext(debug_info={"index": index}),
                ) from e

        try:
            created = await self._repository.create_many(records)
        except EmailConflictError:
            logger.warning(
                "Employee batch rejected: email exists",
                extra={"count": len(records)},
            )
            raise
        logger.info("Employee batch created", extra={"count": len(created)})
        return created

    async def list_all(self) -> list[StoredEmployee]:
        return await self._repository.list_all()

    async def get(self, employee_id: EmployeeId) -> StoredEmployee:
        return await self._repository.get(employee_id)

    async def update(
        self, employee_id: EmployeeId, candidate: Mapping[str, Any],
    ) -> StoredEmployee:
        record = validate_employee(candidate)
        try:
            stored = await self._repository.update(employee_id, record)
        except (EmailConflictError, ResourceNotFoundError) as e:
            logger.warning(
                f"Employee update rejected: {e.message}",
                extra={"employee_id": employee_id, "error_code": e.code},
            )
            raise
        logger.info("Employee updated", extra={"employee_id": employee_id})
        return stored

    async def delete(self, employee_id: EmployeeId) -> None:
        try:
            await self._repository.delete(employee_id)
        except ResourceNotFoundError as e:
            logger.warning(
                "Employee delete rejected: not found",
                extra={"employee_id": employee_id, "error_code": e.code},
            )
            raise
        logger.info("Employee deleted", extra={"employee_id": employee_id})
