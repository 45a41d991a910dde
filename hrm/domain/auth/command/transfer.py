"""TransferSuperAdmin command and handler."""

from hrm.domain.auth.command.role_change import RoleChangeDTO, parse_employee_id
from hrm.domain.auth.model.permission import Permission
from hrm.domain.auth.model.principal import Principal
from hrm.domain.auth.service.role_management import RoleManagementService
from hrm.domain.shared.authorization.gate import requires_permission
from hrm.domain.shared.command import Command, CommandHandler, Result


class TransferSuperAdmin(Command):
    """Command to hand the super admin role to another employee."""

    employee_id: str
    reason: str | None = None


class TransferSuperAdminResult(Result):
    changes: list[RoleChangeDTO]


class TransferSuperAdminHandler(CommandHandler[TransferSuperAdmin, TransferSuperAdminResult]):
    __auth__ = requires_permission(Permission.TRANSFER_SUPER_ADMIN)
    principal: Principal
    role_management: RoleManagementService

    async def run(self, cmd: TransferSuperAdmin) -> TransferSuperAdminResult:
        changes = await self.role_management.transfer_super_admin(
            actor=self.principal,
            employee_id=parse_employee_id(cmd.employee_id),
            reason=cmd.reason,
        )
        return TransferSuperAdminResult(changes=[RoleChangeDTO.from_change(c) for c in changes])
