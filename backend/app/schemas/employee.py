"""Employee Schemas: Pydantic models for the employee API boundary.

Invariants:
    - EmployeePayload accepts any value per field (absent -> None) so that the
      validator, not Pydantic, reports missing or malformed fields in rule order
    - Unknown keys are ignored; id in a request body is never honoured
    - EmployeeResponse mirrors StoredEmployee
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

from app.core.domain_types import Gender


class EmployeePayload(BaseModel):
    """Raw candidate record as sent by clients."""
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    email: Any = None
    gender: Any = None
    age: Any = None
    department: Any = None


class EmployeeResponse(BaseModel):
    """Stored employee as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    gender: Gender
    age: int
    department: str


class DeleteResponse(BaseModel):
    success: bool = True
