"""Create employees table.

Revision ID: 001_employees
Revises: None
Create Date: 2026-10-18

Case-insensitive email uniqueness via a unique index on lower(email);
sqlite_autoincrement keeps SQLite from reusing deleted ids.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_employees"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("gender", sa.String(6), nullable=False),
        sa.Column("age", sa.Integer, nullable=False),
        sa.Column("department", sa.String(50), nullable=False),
        sa.CheckConstraint("gender IN ('Male', 'Female')", name="ck_employees_gender"),
        sa.CheckConstraint("age BETWEEN 18 AND 65", name="ck_employees_age"),
        sqlite_autoincrement=True,
    )
    op.create_index(
        "uq_employees_email_lower", "employees",
        [sa.text("lower(email)")], unique=True,
    )


def downgrade() -> None:
    op.drop_index("uq_employees_email_lower", table_name="employees")
    op.drop_table("employees")
