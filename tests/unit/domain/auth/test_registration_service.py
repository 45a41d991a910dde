"""Unit tests for RegistrationService (first-user bootstrap and self-registration)."""

from unittest.mock import AsyncMock

import pytest

from hrm.domain.auth.model.employee import Employee
from hrm.domain.auth.model.role import Role
from hrm.domain.auth.model.role_change import RoleChange, RoleChangeKind
from hrm.domain.auth.service.registration import RegistrationService
from hrm.domain.auth.service.role_resolver import RoleResolver
from hrm.domain.shared.error import ConflictError, ValidationError


def make_employee_repo(count: int = 0, existing: Employee | None = None) -> AsyncMock:
    repo = AsyncMock()
    repo.count.return_value = count
    repo.get_by_external_id.return_value = existing
    return repo


def make_service(employee_repo: AsyncMock, role_change_repo: AsyncMock | None = None):
    return RegistrationService(
        _employee_repo=employee_repo,
        _role_change_repo=role_change_repo or AsyncMock(),
        _resolver=RoleResolver(),
    )


class TestFirstUserStatus:
    @pytest.mark.asyncio
    async def test_no_employees(self) -> None:
        status = await make_service(make_employee_repo(count=0)).first_user_status()

        assert status.is_first_user is True
        assert status.employee_count == 0

    @pytest.mark.asyncio
    async def test_some_employees(self) -> None:
        status = await make_service(make_employee_repo(count=3)).first_user_status()

        assert status.is_first_user is False
        assert status.employee_count == 3


class TestRegister:
    @pytest.mark.asyncio
    async def test_first_user_becomes_super_admin(self) -> None:
        employee_repo = make_employee_repo(count=0)
        role_change_repo = AsyncMock()
        service = make_service(employee_repo, role_change_repo)

        employee = await service.register("user_1", "Founder", requested_role=Role.INTERN)

        assert employee.role is Role.SUPER_ADMIN
        assert employee.position == "Super Administrator"
        employee_repo.save.assert_awaited_once_with(employee)

        change: RoleChange = role_change_repo.save.await_args.args[0]
        assert change.kind is RoleChangeKind.REGISTRATION
        assert change.old_role is None
        assert change.new_role is Role.SUPER_ADMIN
        assert change.changed_by is None
        assert change.reason == "First user setup"

    @pytest.mark.asyncio
    async def test_defaults_to_intern(self) -> None:
        service = make_service(make_employee_repo(count=1))

        employee = await service.register("user_2", "Newbie", email="n@example.com")

        assert employee.role is Role.INTERN
        assert employee.email == "n@example.com"

    @pytest.mark.asyncio
    async def test_may_choose_employee(self) -> None:
        service = make_service(make_employee_repo(count=1))

        employee = await service.register("user_2", "Newbie", requested_role=Role.EMPLOYEE)

        assert employee.role is Role.EMPLOYEE

    @pytest.mark.parametrize("role", [Role.MANAGER, Role.ADMIN, Role.SUPER_ADMIN])
    @pytest.mark.asyncio
    async def test_cannot_self_register_above_employee(self, role: Role) -> None:
        employee_repo = make_employee_repo(count=1)
        service = make_service(employee_repo)

        with pytest.raises(ValidationError) as exc_info:
            await service.register("user_2", "Climber", requested_role=role)

        assert exc_info.value.field == "role"
        employee_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_already_registered(self) -> None:
        existing = Employee.create(external_user_id="user_1", name="Ada", role=Role.INTERN)
        service = make_service(make_employee_repo(count=1, existing=existing))

        with pytest.raises(ConflictError) as exc_info:
            await service.register("user_1", "Ada")

        assert exc_info.value.code == "already_registered"
