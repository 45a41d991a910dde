"""RoleChange entity: audit trail of role assignments."""

from datetime import UTC, datetime
from enum import StrEnum

from hrm.domain.auth.model.role import Role
from hrm.domain.auth.model.value import EmployeeId, RoleChangeId
from hrm.domain.shared.model.entity import Entity


class RoleChangeKind(StrEnum):
    REGISTRATION = "registration"
    PROMOTION = "promotion"
    DEMOTION = "demotion"
    TRANSFER = "transfer"


class RoleChange(Entity):
    """A single applied change to an employee's role."""

    id: RoleChangeId
    employee_id: EmployeeId
    old_role: Role | None
    new_role: Role
    kind: RoleChangeKind
    changed_by: EmployeeId | None
    reason: str | None = None
    changed_at: datetime

    @classmethod
    def create(
        cls,
        employee_id: EmployeeId,
        old_role: Role | None,
        new_role: Role,
        kind: RoleChangeKind,
        changed_by: EmployeeId | None,
        reason: str | None = None,
    ) -> "RoleChange":
        return cls(
            id=RoleChangeId.generate(),
            employee_id=employee_id,
            old_role=old_role,
            new_role=new_role,
            kind=kind,
            changed_by=changed_by,
            reason=reason,
            changed_at=datetime.now(UTC),
        )
