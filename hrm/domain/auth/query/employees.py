"""Employee queries: roster listing and role history."""

from datetime import datetime

from pydantic import BaseModel

from hrm.domain.auth.command.role_change import RoleChangeDTO, parse_employee_id, parse_role
from hrm.domain.auth.model.employee import Employee
from hrm.domain.auth.model.permission import Feature, Permission
from hrm.domain.auth.model.principal import Principal
from hrm.domain.auth.service.role_management import RoleManagementService
from hrm.domain.shared.authorization.gate import requires_feature, requires_permission
from hrm.domain.shared.query import Query, QueryHandler
from hrm.domain.shared.query import Result as QueryResult


class EmployeeDTO(BaseModel):
    id: str
    external_user_id: str
    name: str
    email: str | None
    role: str
    position: str
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeDTO":
        return cls(
            id=str(employee.id),
            external_user_id=employee.external_user_id,
            name=employee.name,
            email=employee.email,
            role=employee.role.value,
            position=employee.position,
            created_at=employee.created_at,
            updated_at=employee.updated_at,
        )


class ListEmployees(Query):
    role: str | None = None


class ListEmployeesResult(QueryResult):
    employees: list[EmployeeDTO]


class ListEmployeesHandler(QueryHandler[ListEmployees, ListEmployeesResult]):
    __auth__ = requires_permission(Permission.VIEW_TEAM_PERFORMANCE)
    principal: Principal
    role_management: RoleManagementService

    async def run(self, query: ListEmployees) -> ListEmployeesResult:
        employees = await self.role_management.list_employees(parse_role(query.role))
        return ListEmployeesResult(employees=[EmployeeDTO.from_employee(e) for e in employees])


class GetRoleHistory(Query):
    employee_id: str


class RoleHistoryResult(QueryResult):
    changes: list[RoleChangeDTO]


class GetRoleHistoryHandler(QueryHandler[GetRoleHistory, RoleHistoryResult]):
    __auth__ = requires_feature(Feature.ROLE_MANAGEMENT)
    principal: Principal
    role_management: RoleManagementService

    async def run(self, query: GetRoleHistory) -> RoleHistoryResult:
        changes = await self.role_management.history(parse_employee_id(query.employee_id))
        return RoleHistoryResult(changes=[RoleChangeDTO.from_change(c) for c in changes])
