"""Employee routes: roster, promotion, demotion and super admin transfer."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query
from pydantic import BaseModel

from hrm.domain.auth.command.role_change import (
    DemoteEmployee,
    DemoteEmployeeHandler,
    PromoteEmployee,
    PromoteEmployeeHandler,
    RoleChangeResult,
)
from hrm.domain.auth.command.transfer import (
    TransferSuperAdmin,
    TransferSuperAdminHandler,
    TransferSuperAdminResult,
)
from hrm.domain.auth.query.employees import (
    GetRoleHistory,
    GetRoleHistoryHandler,
    ListEmployees,
    ListEmployeesHandler,
    ListEmployeesResult,
    RoleHistoryResult,
)

router = APIRouter(prefix="/employees", tags=["Employees"], route_class=DishkaRoute)


class RoleChangeRequest(BaseModel):
    """Request body for promotion and demotion. Omit new_role to move one level."""

    new_role: str | None = None
    reason: str | None = None


class TransferRequest(BaseModel):
    reason: str | None = None


@router.get("", response_model=ListEmployeesResult)
async def list_employees(
    handler: FromDishka[ListEmployeesHandler],
    role: Annotated[str | None, Query()] = None,
) -> ListEmployeesResult:
    """List employees, optionally filtered by role. Requires view_team_performance."""
    return await handler.run(ListEmployees(role=role))


@router.post("/{employee_id}/promote", response_model=RoleChangeResult)
async def promote_employee(
    employee_id: str,
    body: RoleChangeRequest,
    handler: FromDishka[PromoteEmployeeHandler],
) -> RoleChangeResult:
    return await handler.run(
        PromoteEmployee(employee_id=employee_id, new_role=body.new_role, reason=body.reason)
    )


@router.post("/{employee_id}/demote", response_model=RoleChangeResult)
async def demote_employee(
    employee_id: str,
    body: RoleChangeRequest,
    handler: FromDishka[DemoteEmployeeHandler],
) -> RoleChangeResult:
    return await handler.run(
        DemoteEmployee(employee_id=employee_id, new_role=body.new_role, reason=body.reason)
    )


@router.post("/{employee_id}/transfer-super-admin", response_model=TransferSuperAdminResult)
async def transfer_super_admin(
    employee_id: str,
    body: TransferRequest,
    handler: FromDishka[TransferSuperAdminHandler],
) -> TransferSuperAdminResult:
    """Hand the super admin role to this employee. The caller becomes admin."""
    return await handler.run(TransferSuperAdmin(employee_id=employee_id, reason=body.reason))


@router.get("/{employee_id}/role-history", response_model=RoleHistoryResult)
async def get_role_history(
    employee_id: str,
    handler: FromDishka[GetRoleHistoryHandler],
) -> RoleHistoryResult:
    """Role changes for an employee, oldest first. Requires the role_management feature."""
    return await handler.run(GetRoleHistory(employee_id=employee_id))
