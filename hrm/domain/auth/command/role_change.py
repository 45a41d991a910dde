"""PromoteEmployee and DemoteEmployee commands and handlers."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from hrm.domain.auth.model.principal import Principal
from hrm.domain.auth.model.role import Role
from hrm.domain.auth.model.role_change import RoleChange
from hrm.domain.auth.model.value import EmployeeId
from hrm.domain.auth.service.role_management import RoleManagementService
from hrm.domain.auth.service.role_resolver import RoleResolver
from hrm.domain.shared.authorization.gate import authenticated
from hrm.domain.shared.command import Command, CommandHandler, Result
from hrm.domain.shared.error import ValidationError


class RoleChangeDTO(BaseModel):
    id: str
    employee_id: str
    old_role: str | None
    new_role: str
    kind: str
    changed_by: str | None
    reason: str | None
    changed_at: datetime

    @classmethod
    def from_change(cls, change: RoleChange) -> "RoleChangeDTO":
        return cls(
            id=str(change.id),
            employee_id=str(change.employee_id),
            old_role=change.old_role.value if change.old_role else None,
            new_role=change.new_role.value,
            kind=change.kind.value,
            changed_by=str(change.changed_by) if change.changed_by else None,
            reason=change.reason,
            changed_at=change.changed_at,
        )


def parse_employee_id(value: str) -> EmployeeId:
    try:
        return EmployeeId(UUID(value))
    except ValueError as e:
        raise ValidationError(f"Invalid employee id: {value}", field="employee_id") from e


def parse_role(value: str | None, field: str = "role") -> Role | None:
    """Parse an optional role tag from API input; unknown tags are a ValidationError."""
    if value is None:
        return None
    role = Role.parse(value)
    if role is None:
        raise ValidationError(f"Unknown role: {value}", field=field)
    return role


class PromoteEmployee(Command):
    """Command to promote an employee. Without new_role, moves up one level."""

    employee_id: str
    new_role: str | None = None
    reason: str | None = None


class DemoteEmployee(Command):
    """Command to demote an employee. Without new_role, moves down one level."""

    employee_id: str
    new_role: str | None = None
    reason: str | None = None


class RoleChangeResult(Result):
    change: RoleChangeDTO
    dashboard: str


class PromoteEmployeeHandler(CommandHandler[PromoteEmployee, RoleChangeResult]):
    # Who may promote whom is decided by the rule table, not the gate
    __auth__ = authenticated()
    principal: Principal
    role_management: RoleManagementService
    resolver: RoleResolver

    async def run(self, cmd: PromoteEmployee) -> RoleChangeResult:
        change = await self.role_management.promote(
            actor=self.principal,
            employee_id=parse_employee_id(cmd.employee_id),
            new_role=parse_role(cmd.new_role, field="new_role"),
            reason=cmd.reason,
        )
        return RoleChangeResult(
            change=RoleChangeDTO.from_change(change),
            dashboard=self.resolver.get_dashboard_path(change.new_role),
        )


class DemoteEmployeeHandler(CommandHandler[DemoteEmployee, RoleChangeResult]):
    __auth__ = authenticated()
    principal: Principal
    role_management: RoleManagementService
    resolver: RoleResolver

    async def run(self, cmd: DemoteEmployee) -> RoleChangeResult:
        change = await self.role_management.demote(
            actor=self.principal,
            employee_id=parse_employee_id(cmd.employee_id),
            new_role=parse_role(cmd.new_role, field="new_role"),
            reason=cmd.reason,
        )
        return RoleChangeResult(
            change=RoleChangeDTO.from_change(change),
            dashboard=self.resolver.get_dashboard_path(change.new_role),
        )
