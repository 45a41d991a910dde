"""SQL repository implementation for the role change audit trail."""

from uuid import UUID

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from hrm.domain.auth.model.role import Role
from hrm.domain.auth.model.role_change import RoleChange, RoleChangeKind
from hrm.domain.auth.model.value import EmployeeId, RoleChangeId
from hrm.domain.auth.port.role_change_repository import RoleChangeRepository
from hrm.infrastructure.persistence.tables import role_changes_table


def _row_to_role_change(row: dict) -> RoleChange:
    return RoleChange(
        id=RoleChangeId(UUID(row["id"])),
        employee_id=EmployeeId(UUID(row["employee_id"])),
        old_role=Role(row["old_role"]) if row["old_role"] else None,
        new_role=Role(row["new_role"]),
        kind=RoleChangeKind(row["kind"]),
        changed_by=EmployeeId(UUID(row["changed_by"])) if row["changed_by"] else None,
        reason=row["reason"],
        changed_at=row["changed_at"],
    )


def _role_change_to_dict(change: RoleChange) -> dict:
    return {
        "id": str(change.id),
        "employee_id": str(change.employee_id),
        "old_role": change.old_role.value if change.old_role else None,
        "new_role": change.new_role.value,
        "kind": change.kind.value,
        "changed_by": str(change.changed_by) if change.changed_by else None,
        "reason": change.reason,
        "changed_at": change.changed_at,
    }


class SQLRoleChangeRepository(RoleChangeRepository):
    """SQLAlchemy Core implementation of RoleChangeRepository. Rows are never updated."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, change: RoleChange) -> None:
        stmt = insert(role_changes_table).values(**_role_change_to_dict(change))
        await self.session.execute(stmt)
        await self.session.flush()

    async def list_by_employee(self, employee_id: EmployeeId) -> list[RoleChange]:
        stmt = (
            select(role_changes_table)
            .where(role_changes_table.c.employee_id == str(employee_id))
            .order_by(role_changes_table.c.changed_at)
        )
        result = await self.session.execute(stmt)
        return [_row_to_role_change(dict(row)) for row in result.mappings().all()]
