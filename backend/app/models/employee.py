"""Employee ORM: persists employee records in the `employees` table.

Invariants:
    - id is an integer primary key assigned by the database and never reused
      (sqlite_autoincrement on SQLite, sequence on PostgreSQL)
    - Email uniqueness is case-insensitive, enforced by a unique index on lower(email)
    - gender and age carry CHECK constraints matching the validator rules

Design Decisions:
    - Functional unique index over COLLATE NOCASE: same DDL works on SQLite and PostgreSQL
"""

from sqlalchemy import CheckConstraint, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Employee(Base):
    """A single employee row."""
    __tablename__ = "employees"
    __table_args__ = (
        CheckConstraint("gender IN ('Male', 'Female')", name="ck_employees_gender"),
        CheckConstraint("age BETWEEN 18 AND 65", name="ck_employees_age"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(254), nullable=False)
    gender: Mapped[str] = mapped_column(String(6), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    department: Mapped[str] = mapped_column(String(50), nullable=False)


Index("uq_employees_email_lower", func.lower(Employee.email), unique=True)
