"""add_employee_tables

Add employees and role_changes tables.

Revision ID: add_employee_tables
Revises:
Create Date: 2026-10-18

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "add_employee_tables"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Add employee and role change tables."""
    # EMPLOYEES TABLE
    op.create_table(
        "employees",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("external_user_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("role", sa.String(32), nullable=False),
        sa.Column("position", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("external_user_id"),
    )
    op.create_index("idx_employees_role", "employees", ["role"])

    # ROLE CHANGES TABLE
    op.create_table(
        "role_changes",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("employee_id", sa.String(), nullable=False),
        sa.Column("old_role", sa.String(32), nullable=True),
        sa.Column("new_role", sa.String(32), nullable=False),
        sa.Column("kind", sa.String(32), nullable=False),
        sa.Column("changed_by", sa.String(), nullable=True),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("changed_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_role_changes_employee_id", "role_changes", ["employee_id"])
    op.create_index("idx_role_changes_changed_at", "role_changes", ["changed_at"])


def downgrade() -> None:
    """Drop employee and role change tables."""
    op.drop_index("idx_role_changes_changed_at", table_name="role_changes")
    op.drop_index("idx_role_changes_employee_id", table_name="role_changes")
    op.drop_table("role_changes")
    op.drop_index("idx_employees_role", table_name="employees")
    op.drop_table("employees")
