"""create_employee_table

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-17 10:00:00.000000

직원(employee) 테이블 생성.
직원 ID는 호출자가 지정하며 자동 생성하지 않음.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "employee",
        sa.Column("employee_id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("salary", sa.Integer(), nullable=False),
    )
    op.create_index("ix_employee_email", "employee", ["email"])
    op.create_index("ix_employee_first_name", "employee", ["first_name"])


def downgrade() -> None:
    op.drop_index("ix_employee_first_name")
    op.drop_index("ix_employee_email")
    op.drop_table("employee")
