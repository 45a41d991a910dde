"""Unit tests for RoleManagementService."""

from unittest.mock import AsyncMock

import pytest

from hrm.domain.auth.model.employee import Employee
from hrm.domain.auth.model.principal import Principal
from hrm.domain.auth.model.role import Role
from hrm.domain.auth.model.role_change import RoleChangeKind
from hrm.domain.auth.model.value import EmployeeId
from hrm.domain.auth.service.role_management import RoleManagementService
from hrm.domain.auth.service.role_resolver import RoleResolver
from hrm.domain.shared.error import (
    AuthorizationError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)


def make_employee(role: Role, name: str = "Ada") -> Employee:
    return Employee.create(external_user_id=f"user_{name.lower()}", name=name, role=role)


def make_actor(employee: Employee) -> Principal:
    return Principal(
        employee_id=employee.id,
        external_user_id=employee.external_user_id,
        role=employee.role,
    )


def make_employee_repo(*employees: Employee, super_admins: int = 1) -> AsyncMock:
    by_id = {e.id: e for e in employees}
    repo = AsyncMock()
    repo.get.side_effect = lambda employee_id: by_id.get(employee_id)
    repo.count_by_role.return_value = super_admins
    return repo


def make_service(employee_repo: AsyncMock, role_change_repo: AsyncMock | None = None):
    return RoleManagementService(
        _employee_repo=employee_repo,
        _role_change_repo=role_change_repo or AsyncMock(),
        _resolver=RoleResolver(),
    )


class TestPromote:
    @pytest.mark.asyncio
    async def test_defaults_to_next_role(self) -> None:
        boss = make_employee(Role.SUPER_ADMIN, "Boss")
        target = make_employee(Role.INTERN)
        employee_repo = make_employee_repo(boss, target)
        role_change_repo = AsyncMock()
        service = make_service(employee_repo, role_change_repo)

        change = await service.promote(make_actor(boss), target.id)

        assert change.old_role is Role.INTERN
        assert change.new_role is Role.EMPLOYEE
        assert change.kind is RoleChangeKind.PROMOTION
        assert change.changed_by == boss.id
        assert target.role is Role.EMPLOYEE
        assert target.position == "Employee"
        employee_repo.save.assert_awaited_once_with(target)
        role_change_repo.save.assert_awaited_once_with(change)

    @pytest.mark.asyncio
    async def test_manager_promotes_employee_to_manager(self) -> None:
        manager = make_employee(Role.MANAGER, "Mia")
        target = make_employee(Role.EMPLOYEE)
        service = make_service(make_employee_repo(manager, target))

        change = await service.promote(make_actor(manager), target.id, Role.MANAGER, reason="Ready")

        assert change.new_role is Role.MANAGER
        assert change.reason == "Ready"

    @pytest.mark.asyncio
    async def test_rule_denial_raises_and_saves_nothing(self) -> None:
        manager = make_employee(Role.MANAGER, "Mia")
        target = make_employee(Role.EMPLOYEE)
        employee_repo = make_employee_repo(manager, target)
        role_change_repo = AsyncMock()
        service = make_service(employee_repo, role_change_repo)

        with pytest.raises(AuthorizationError) as exc_info:
            await service.promote(make_actor(manager), target.id, Role.ADMIN)

        assert exc_info.value.code == "role_change_denied"
        assert target.role is Role.EMPLOYEE
        employee_repo.save.assert_not_awaited()
        role_change_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_admin_cannot_promote_to_admin(self) -> None:
        admin = make_employee(Role.ADMIN, "Al")
        target = make_employee(Role.MANAGER)
        service = make_service(make_employee_repo(admin, target))

        with pytest.raises(AuthorizationError):
            await service.promote(make_actor(admin), target.id)

    @pytest.mark.asyncio
    async def test_not_higher_is_validation_error(self) -> None:
        boss = make_employee(Role.SUPER_ADMIN, "Boss")
        target = make_employee(Role.MANAGER)
        service = make_service(make_employee_repo(boss, target))

        with pytest.raises(ValidationError) as exc_info:
            await service.promote(make_actor(boss), target.id, Role.EMPLOYEE)

        assert exc_info.value.field == "new_role"

    @pytest.mark.asyncio
    async def test_top_of_hierarchy(self) -> None:
        boss = make_employee(Role.SUPER_ADMIN, "Boss")
        other = make_employee(Role.SUPER_ADMIN, "Other")
        service = make_service(make_employee_repo(boss, other))

        with pytest.raises(InvalidStateError) as exc_info:
            await service.promote(make_actor(boss), other.id)

        assert exc_info.value.code == "cannot_promote_further"

    @pytest.mark.asyncio
    async def test_unknown_employee(self) -> None:
        boss = make_employee(Role.SUPER_ADMIN, "Boss")
        service = make_service(make_employee_repo(boss))

        with pytest.raises(NotFoundError) as exc_info:
            await service.promote(make_actor(boss), EmployeeId.generate())

        assert exc_info.value.code == "employee_not_found"


class TestDemote:
    @pytest.mark.asyncio
    async def test_defaults_to_previous_role(self) -> None:
        admin = make_employee(Role.ADMIN, "Al")
        target = make_employee(Role.MANAGER)
        service = make_service(make_employee_repo(admin, target))

        change = await service.demote(make_actor(admin), target.id)

        assert change.old_role is Role.MANAGER
        assert change.new_role is Role.EMPLOYEE
        assert change.kind is RoleChangeKind.DEMOTION

    @pytest.mark.asyncio
    async def test_admin_cannot_demote_admin(self) -> None:
        admin = make_employee(Role.ADMIN, "Al")
        target = make_employee(Role.ADMIN)
        service = make_service(make_employee_repo(admin, target))

        with pytest.raises(AuthorizationError):
            await service.demote(make_actor(admin), target.id, Role.EMPLOYEE)

    @pytest.mark.asyncio
    async def test_bottom_of_hierarchy(self) -> None:
        boss = make_employee(Role.SUPER_ADMIN, "Boss")
        target = make_employee(Role.INTERN)
        service = make_service(make_employee_repo(boss, target))

        with pytest.raises(InvalidStateError) as exc_info:
            await service.demote(make_actor(boss), target.id)

        assert exc_info.value.code == "cannot_demote_further"

    @pytest.mark.asyncio
    async def test_not_lower_is_validation_error(self) -> None:
        boss = make_employee(Role.SUPER_ADMIN, "Boss")
        target = make_employee(Role.EMPLOYEE)
        service = make_service(make_employee_repo(boss, target))

        with pytest.raises(ValidationError):
            await service.demote(make_actor(boss), target.id, Role.MANAGER)

    @pytest.mark.asyncio
    async def test_last_super_admin_cannot_step_down(self) -> None:
        boss = make_employee(Role.SUPER_ADMIN, "Boss")
        service = make_service(make_employee_repo(boss, super_admins=1))

        with pytest.raises(InvalidStateError) as exc_info:
            await service.demote(make_actor(boss), boss.id, Role.ADMIN)

        assert exc_info.value.code == "last_super_admin"
        assert boss.role is Role.SUPER_ADMIN

    @pytest.mark.asyncio
    async def test_super_admin_steps_down_when_another_exists(self) -> None:
        boss = make_employee(Role.SUPER_ADMIN, "Boss")
        other = make_employee(Role.SUPER_ADMIN, "Other")
        service = make_service(make_employee_repo(boss, other, super_admins=2))

        change = await service.demote(make_actor(boss), other.id)

        assert change.new_role is Role.ADMIN

    @pytest.mark.asyncio
    async def test_super_admin_cannot_skip_below_admin(self) -> None:
        boss = make_employee(Role.SUPER_ADMIN, "Boss")
        other = make_employee(Role.SUPER_ADMIN, "Other")
        service = make_service(make_employee_repo(boss, other, super_admins=2))

        with pytest.raises(AuthorizationError):
            await service.demote(make_actor(boss), other.id, Role.MANAGER)


class TestTransferSuperAdmin:
    @pytest.mark.asyncio
    async def test_swaps_roles(self) -> None:
        boss = make_employee(Role.SUPER_ADMIN, "Boss")
        heir = make_employee(Role.ADMIN, "Heir")
        role_change_repo = AsyncMock()
        service = make_service(make_employee_repo(boss, heir), role_change_repo)

        changes = await service.transfer_super_admin(make_actor(boss), heir.id, reason="Retiring")

        assert heir.role is Role.SUPER_ADMIN
        assert boss.role is Role.ADMIN
        assert [c.employee_id for c in changes] == [heir.id, boss.id]
        assert all(c.kind is RoleChangeKind.TRANSFER for c in changes)
        assert role_change_repo.save.await_count == 2

    @pytest.mark.asyncio
    async def test_requires_super_admin(self) -> None:
        admin = make_employee(Role.ADMIN, "Al")
        target = make_employee(Role.MANAGER)
        service = make_service(make_employee_repo(admin, target))

        with pytest.raises(AuthorizationError):
            await service.transfer_super_admin(make_actor(admin), target.id)

    @pytest.mark.asyncio
    async def test_cannot_transfer_to_self(self) -> None:
        boss = make_employee(Role.SUPER_ADMIN, "Boss")
        service = make_service(make_employee_repo(boss))

        with pytest.raises(ValidationError) as exc_info:
            await service.transfer_super_admin(make_actor(boss), boss.id)

        assert exc_info.value.field == "employee_id"

    @pytest.mark.asyncio
    async def test_target_already_super_admin(self) -> None:
        boss = make_employee(Role.SUPER_ADMIN, "Boss")
        other = make_employee(Role.SUPER_ADMIN, "Other")
        employee_repo = make_employee_repo(boss, other, super_admins=2)
        role_change_repo = AsyncMock()
        service = make_service(employee_repo, role_change_repo)

        with pytest.raises(InvalidStateError) as exc_info:
            await service.transfer_super_admin(make_actor(boss), other.id)

        assert exc_info.value.code == "already_super_admin"
        assert boss.role is Role.SUPER_ADMIN
        employee_repo.save.assert_not_awaited()
        role_change_repo.save.assert_not_awaited()


class TestHistory:
    @pytest.mark.asyncio
    async def test_history_of_unknown_employee(self) -> None:
        service = make_service(make_employee_repo())

        with pytest.raises(NotFoundError):
            await service.history(EmployeeId.generate())

    @pytest.mark.asyncio
    async def test_history_reads_repository(self) -> None:
        target = make_employee(Role.INTERN)
        role_change_repo = AsyncMock()
        role_change_repo.list_by_employee.return_value = []
        service = make_service(make_employee_repo(target), role_change_repo)

        assert await service.history(target.id) == []
        role_change_repo.list_by_employee.assert_awaited_once_with(target.id)
