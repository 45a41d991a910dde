"""Role management service: applies promotions, demotions and super admin transfers."""

import logging

from hrm.domain.auth.model.employee import Employee
from hrm.domain.auth.model.principal import Principal
from hrm.domain.auth.model.role import Role
from hrm.domain.auth.model.role_change import RoleChange, RoleChangeKind
from hrm.domain.auth.model.value import EmployeeId
from hrm.domain.auth.port.employee_repository import EmployeeRepository
from hrm.domain.auth.port.role_change_repository import RoleChangeRepository
from hrm.domain.auth.service.role_resolver import RoleResolver
from hrm.domain.shared.error import (
    AuthorizationError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from hrm.domain.shared.service import Service

logger = logging.getLogger(__name__)


class RoleManagementService(Service):
    """Decides role transitions with the RoleResolver rules and persists them.

    The resolver only answers whether a transition is permitted; this service
    loads the target, applies the change and writes the audit record.
    """

    _employee_repo: EmployeeRepository
    _role_change_repo: RoleChangeRepository
    _resolver: RoleResolver

    async def promote(
        self,
        actor: Principal,
        employee_id: EmployeeId,
        new_role: Role | None = None,
        reason: str | None = None,
    ) -> RoleChange:
        """Move an employee up the hierarchy.

        Without an explicit ``new_role`` the employee moves up one level.
        """
        target = await self._get_employee(employee_id)
        current = target.role

        if new_role is None:
            new_role = self._resolver.next_role(current, "up")
            if new_role is None:
                raise InvalidStateError(
                    f"Employee {employee_id} already holds the highest role",
                    code="cannot_promote_further",
                )

        if new_role.level <= current.level:
            raise ValidationError(
                f"{new_role} is not a promotion from {current}",
                field="new_role",
            )

        if not self._resolver.can_promote_role(actor.role, current, new_role):
            logger.warning(
                "Promotion denied: actor=%s (%s) target=%s %s -> %s",
                actor.employee_id,
                actor.role,
                employee_id,
                current,
                new_role,
            )
            raise AuthorizationError(
                f"A {actor.role} cannot promote a {current} to {new_role}",
                code="role_change_denied",
            )

        return await self._apply(target, new_role, RoleChangeKind.PROMOTION, actor, reason)

    async def demote(
        self,
        actor: Principal,
        employee_id: EmployeeId,
        new_role: Role | None = None,
        reason: str | None = None,
    ) -> RoleChange:
        """Move an employee down the hierarchy.

        Without an explicit ``new_role`` the employee moves down one level.
        The last remaining super admin can never be demoted.
        """
        target = await self._get_employee(employee_id)
        current = target.role

        if new_role is None:
            new_role = self._resolver.next_role(current, "down")
            if new_role is None:
                raise InvalidStateError(
                    f"Employee {employee_id} already holds the lowest role",
                    code="cannot_demote_further",
                )

        if new_role.level >= current.level:
            raise ValidationError(
                f"{new_role} is not a demotion from {current}",
                field="new_role",
            )

        if not self._resolver.can_demote_role(actor.role, current, new_role):
            logger.warning(
                "Demotion denied: actor=%s (%s) target=%s %s -> %s",
                actor.employee_id,
                actor.role,
                employee_id,
                current,
                new_role,
            )
            raise AuthorizationError(
                f"A {actor.role} cannot demote a {current} to {new_role}",
                code="role_change_denied",
            )

        if current is Role.SUPER_ADMIN:
            await self._ensure_not_last_super_admin()

        return await self._apply(target, new_role, RoleChangeKind.DEMOTION, actor, reason)

    async def transfer_super_admin(
        self,
        actor: Principal,
        employee_id: EmployeeId,
        reason: str | None = None,
    ) -> list[RoleChange]:
        """Hand the super admin role to another employee; the actor steps down to admin."""
        if actor.role is not Role.SUPER_ADMIN:
            raise AuthorizationError(
                "Only a super admin can transfer the super admin role",
                code="role_change_denied",
            )
        if employee_id == actor.employee_id:
            raise ValidationError(
                "Cannot transfer the super admin role to yourself",
                field="employee_id",
            )

        target = await self._get_employee(employee_id)
        outgoing = await self._get_employee(actor.employee_id)

        if target.role is Role.SUPER_ADMIN:
            raise InvalidStateError(
                f"Employee {employee_id} is already a super admin",
                code="already_super_admin",
            )
        if not self._resolver.can_promote_role(actor.role, target.role, Role.SUPER_ADMIN):
            raise AuthorizationError("Super admin transfer not permitted", code="role_change_denied")
        if not self._resolver.can_demote_role(actor.role, outgoing.role, Role.ADMIN):
            raise AuthorizationError("Super admin transfer not permitted", code="role_change_denied")

        # Promote first so there is never a moment without a super admin
        incoming_change = await self._apply(
            target, Role.SUPER_ADMIN, RoleChangeKind.TRANSFER, actor, reason
        )
        outgoing_change = await self._apply(
            outgoing, Role.ADMIN, RoleChangeKind.TRANSFER, actor, reason
        )
        return [incoming_change, outgoing_change]

    async def history(self, employee_id: EmployeeId) -> list[RoleChange]:
        """Role changes for an employee, oldest first."""
        await self._get_employee(employee_id)
        return await self._role_change_repo.list_by_employee(employee_id)

    async def list_employees(self, role: Role | None = None) -> list[Employee]:
        return await self._employee_repo.list_all(role)

    async def _get_employee(self, employee_id: EmployeeId) -> Employee:
        employee = await self._employee_repo.get(employee_id)
        if employee is None:
            raise NotFoundError(f"Employee not found: {employee_id}", code="employee_not_found")
        return employee

    async def _ensure_not_last_super_admin(self) -> None:
        if await self._employee_repo.count_by_role(Role.SUPER_ADMIN) <= 1:
            raise InvalidStateError(
                "Cannot demote the last super admin. Promote another employee to super admin first.",
                code="last_super_admin",
            )

    async def _apply(
        self,
        employee: Employee,
        new_role: Role,
        kind: RoleChangeKind,
        actor: Principal,
        reason: str | None,
    ) -> RoleChange:
        old_role = employee.change_role(new_role)
        await self._employee_repo.save(employee)

        change = RoleChange.create(
            employee_id=employee.id,
            old_role=old_role,
            new_role=new_role,
            kind=kind,
            changed_by=actor.employee_id,
            reason=reason,
        )
        await self._role_change_repo.save(change)

        logger.info(
            "Role changed: employee=%s %s -> %s (%s by %s)",
            employee.id,
            old_role,
            new_role,
            kind,
            actor.employee_id,
        )
        return change
