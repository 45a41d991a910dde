"""Registration service: self-registration and first-user bootstrap."""

import logging
from dataclasses import dataclass

from hrm.domain.auth.model.employee import Employee
from hrm.domain.auth.model.role import Role
from hrm.domain.auth.model.role_change import RoleChange, RoleChangeKind
from hrm.domain.auth.port.employee_repository import EmployeeRepository
from hrm.domain.auth.port.role_change_repository import RoleChangeRepository
from hrm.domain.auth.service.role_resolver import RoleResolver
from hrm.domain.shared.error import ConflictError, ValidationError
from hrm.domain.shared.service import Service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FirstUserStatus:
    is_first_user: bool
    employee_count: int


class RegistrationService(Service):
    """Registers authenticated users as employees.

    The very first employee becomes super admin. Everyone after that may
    only pick one of the signup roles; higher roles come from promotion.
    """

    _employee_repo: EmployeeRepository
    _role_change_repo: RoleChangeRepository
    _resolver: RoleResolver

    async def first_user_status(self) -> FirstUserStatus:
        count = await self._employee_repo.count()
        return FirstUserStatus(is_first_user=count == 0, employee_count=count)

    async def register(
        self,
        external_user_id: str,
        name: str,
        email: str | None = None,
        requested_role: Role | None = None,
    ) -> Employee:
        """Create the employee record for an authenticated user.

        Raises ConflictError if the user is already registered and
        ValidationError if a non-signup role is requested.
        """
        existing = await self._employee_repo.get_by_external_id(external_user_id)
        if existing is not None:
            raise ConflictError(
                f"User {external_user_id} is already registered",
                code="already_registered",
            )

        status = await self.first_user_status()
        if status.is_first_user:
            role = Role.SUPER_ADMIN
            logger.info("First user %s bootstrapped as super admin", external_user_id)
        else:
            role = requested_role or Role.INTERN
            allowed = {s.role for s in self._resolver.get_available_signup_roles()}
            if role not in allowed:
                raise ValidationError(
                    f"Self-registration is limited to {', '.join(sorted(allowed))}",
                    field="role",
                )

        employee = Employee.create(
            external_user_id=external_user_id,
            name=name,
            email=email,
            role=role,
        )
        await self._employee_repo.save(employee)
        await self._role_change_repo.save(
            RoleChange.create(
                employee_id=employee.id,
                old_role=None,
                new_role=role,
                kind=RoleChangeKind.REGISTRATION,
                changed_by=None,
                reason="First user setup" if status.is_first_user else "Self-registration",
            )
        )

        logger.info("Registered employee %s (%s) as %s", employee.id, external_user_id, role)
        return employee
