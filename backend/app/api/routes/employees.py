"""Employee Routes: REST endpoints for the employee registry.

Invariants:
    - POST accepts one object or an array of objects; the response mirrors the shape
    - Validation, conflict, not-found and storage failures surface as RegistryError
      and are rendered by the global handlers (400 / 409 / 404 / 500)
    - Listing is a full snapshot ordered by id
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_employee_service
from app.core.domain_types import EmployeeId, StoredEmployee
from app.schemas.employee import DeleteResponse, EmployeePayload, EmployeeResponse
from app.services.employee_service import EmployeeService

router = APIRouter(prefix="/api/employees", tags=["employees"])


def _to_response(employee: StoredEmployee) -> EmployeeResponse:
    return EmployeeResponse.model_validate(employee)


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(service: EmployeeService = Depends(get_employee_service)):
    """Get all employees."""
    return [_to_response(e) for e in await service.list_all()]


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int, service: EmployeeService = Depends(get_employee_service),
):
    """Get one employee by id."""
    return _to_response(await service.get(EmployeeId(employee_id)))


@router.post(
    "",
    response_model=EmployeeResponse | list[EmployeeResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_employees(
    body: EmployeePayload | list[EmployeePayload],
    service: EmployeeService = Depends(get_employee_service),
):
    """Create one employee, or several in one all-or-nothing batch."""
    if isinstance(body, list):
        created = await service.create_many([p.model_dump() for p in body])
        return [_to_response(e) for e in created]
    return _to_response(await service.create(body.model_dump()))


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    body: EmployeePayload,
    service: EmployeeService = Depends(get_employee_service),
):
    """Replace all fields of an employee."""
    updated = await service.update(EmployeeId(employee_id), body.model_dump())
    return _to_response(updated)


@router.delete("/{employee_id}", response_model=DeleteResponse)
async def delete_employee(
    employee_id: int, service: EmployeeService = Depends(get_employee_service),
):
    """Delete an employee."""
    await service.delete(EmployeeId(employee_id))
    return DeleteResponse()
