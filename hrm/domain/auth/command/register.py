"""RegisterEmployee command and handler."""

from hrm.domain.auth.command.role_change import parse_role
from hrm.domain.auth.service.registration import RegistrationService
from hrm.domain.auth.service.role_resolver import RoleResolver
from hrm.domain.shared.authorization.gate import public
from hrm.domain.shared.command import Command, CommandHandler, Result


class RegisterEmployee(Command):
    """Command to register the authenticated caller as an employee.

    ``external_user_id`` comes from the validated bearer token, never from
    the request body.
    """

    external_user_id: str
    name: str
    email: str | None = None
    role: str | None = None


class RegisterEmployeeResult(Result):
    employee_id: str
    role: str
    position: str
    dashboard: str
    is_first_user: bool


class RegisterEmployeeHandler(CommandHandler[RegisterEmployee, RegisterEmployeeResult]):
    # The caller has a token but no employee record yet
    __auth__ = public()
    registration_service: RegistrationService
    resolver: RoleResolver

    async def run(self, cmd: RegisterEmployee) -> RegisterEmployeeResult:
        status = await self.registration_service.first_user_status()
        employee = await self.registration_service.register(
            external_user_id=cmd.external_user_id,
            name=cmd.name,
            email=cmd.email,
            requested_role=parse_role(cmd.role),
        )
        return RegisterEmployeeResult(
            employee_id=str(employee.id),
            role=employee.role.value,
            position=employee.position,
            dashboard=self.resolver.get_dashboard_path(employee.role),
            is_first_user=status.is_first_user,
        )
