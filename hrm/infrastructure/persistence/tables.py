"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, MetaData, String, Table, Text

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# EMPLOYEES TABLE
# ============================================================================
employees_table = Table(
    "employees",
    metadata,
    Column("id", String, primary_key=True),
    Column("external_user_id", String(255), nullable=False, unique=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("role", String(32), nullable=False),  # Role as string
    Column("position", String(64), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=True),
)

Index("idx_employees_role", employees_table.c.role)


# ============================================================================
# ROLE CHANGES TABLE (append-only audit trail)
# ============================================================================
role_changes_table = Table(
    "role_changes",
    metadata,
    Column("id", String, primary_key=True),
    Column(
        "employee_id",
        String,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("old_role", String(32), nullable=True),
    Column("new_role", String(32), nullable=False),
    Column("kind", String(32), nullable=False),  # RoleChangeKind as string
    Column("changed_by", String, nullable=True),
    Column("reason", Text, nullable=True),
    Column("changed_at", DateTime(timezone=True), nullable=False),
)

Index("idx_role_changes_employee_id", role_changes_table.c.employee_id)
Index("idx_role_changes_changed_at", role_changes_table.c.changed_at)
