"""Request Dependencies: resolve the configured EmployeeRepository per request.

Invariants:
    - SQL backend: one AsyncSession per request, closed when the response is sent
    - Memory backend: one process-wide MemoryEmployeeRepository, set by
      init_memory_repository and dropped by close_memory_repository
    - Routes only ever see the EmployeeRepository Protocol via EmployeeService
"""

from typing import AsyncGenerator

from fastapi import Depends

from app.core.repository_protocols import EmployeeRepository
from app.infrastructure import database
from app.infrastructure.employee_repository import SqlEmployeeRepository
from app.infrastructure.memory_employee_repository import MemoryEmployeeRepository
from app.services.employee_service import EmployeeService

memory_repository: MemoryEmployeeRepository | None = None


def init_memory_repository() -> MemoryEmployeeRepository:
    global memory_repository
    memory_repository = MemoryEmployeeRepository()
    return memory_repository


def close_memory_repository() -> None:
    global memory_repository
    memory_repository = None


async def get_employee_repository() -> AsyncGenerator[EmployeeRepository, None]:
    """FastAPI dependency for the active employee store."""
    if memory_repository is not None:
        yield memory_repository
        return
    if not database.db_manager:
        raise RuntimeError("Database not initialized")
    async with database.db_manager.session() as session:
        yield SqlEmployeeRepository(session)


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeService:
    return EmployeeService(repository)
