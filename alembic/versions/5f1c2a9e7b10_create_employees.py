"""create employees

Revision ID: 5f1c2a9e7b10
Revises:
Create Date: 2026-10-19 09:12:04.118203
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "5f1c2a9e7b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("position", sa.String(length=255), nullable=True),
        sa.Column("salary", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sqlite_autoincrement=True,
    )
    op.create_index("ix_employees_deleted_at", "employees", ["deleted_at"])


def downgrade() -> None:
    op.drop_index("ix_employees_deleted_at", table_name="employees")
    op.drop_table("employees")
