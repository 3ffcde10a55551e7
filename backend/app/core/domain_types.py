"""Domain Types: rich types for employee records.

Invariants:
    - EmployeeId wraps int; ids are assigned by the store only, in 1..MAX_EMPLOYEE_ID
    - EmployeeRecord is the normalized (validated) shape: trimmed strings, int age
    - StoredEmployee is an EmployeeRecord plus its assigned id
    - Records are frozen; the store is the only component that replaces them

Design Decisions:
    - NewType for identity: zero runtime cost, full type-checker support
    - str Enum for gender: serializes to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", int)

# Largest id a 64-bit INTEGER column can hold; anything above was never issued
MAX_EMPLOYEE_ID: int = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class Gender(str, Enum):
    """Accepted gender values (case-sensitive)."""
    MALE = "Male"
    FEMALE = "Female"


class EmployeeField(str, Enum):
    """The five user-supplied fields, in payload order."""
    NAME = "name"
    EMAIL = "email"
    GENDER = "gender"
    AGE = "age"
    DEPARTMENT = "department"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class EmployeeRecord:
    """A candidate that passed validation."""
    name: str
    email: str
    gender: Gender
    age: int
    department: str


@dataclass(frozen=True)
class StoredEmployee:
    """A persisted employee record."""
    id: EmployeeId
    name: str
    email: str
    gender: Gender
    age: int
    department: str

    @classmethod
    def from_record(
        cls, employee_id: EmployeeId, record: EmployeeRecord,
    ) -> "StoredEmployee":
        return cls(
            id=employee_id,
            name=record.name,
            email=record.email,
            gender=record.gender,
            age=record.age,
            department=record.department,
        )

    @property
    def record(self) -> EmployeeRecord:
        """The stored fields without the id."""
        return EmployeeRecord(
            name=self.name,
            email=self.email,
            gender=self.gender,
            age=self.age,
            department=self.department,
        )
