"""Registration routes: first-user status and self-registration."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from hrm.domain.auth.command.register import (
    RegisterEmployee,
    RegisterEmployeeHandler,
    RegisterEmployeeResult,
)
from hrm.domain.auth.model.value import CurrentUser
from hrm.domain.auth.query.first_user import (
    FirstUserStatusResult,
    GetFirstUserStatus,
    GetFirstUserStatusHandler,
)
from hrm.domain.auth.service.role_resolver import RoleResolver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"], route_class=DishkaRoute)


class RegisterRequest(BaseModel):
    """Request body for self-registration."""

    name: str
    email: str | None = None
    role: str | None = None


@router.get("/first-user", response_model=FirstUserStatusResult)
async def get_first_user_status(
    handler: FromDishka[GetFirstUserStatusHandler],
) -> FirstUserStatusResult:
    """Whether no employee has registered yet (the next one becomes super admin)."""
    return await handler.run(GetFirstUserStatus())


@router.post("/register", response_model=RegisterEmployeeResult, status_code=201)
async def register(
    body: RegisterRequest,
    current_user: FromDishka[CurrentUser],
    resolver: FromDishka[RoleResolver],
    handler: FromDishka[RegisterEmployeeHandler],
) -> RegisterEmployeeResult:
    """Register the token holder as an employee.

    Without an explicit role, the role tag from the token's user metadata is
    used, falling back to intern.
    """
    role = body.role or resolver.get_user_role(current_user.claims).value
    result = await handler.run(
        RegisterEmployee(
            external_user_id=current_user.external_user_id,
            name=body.name,
            email=body.email,
            role=role,
        )
    )
    logger.info("Registration complete for %s as %s", current_user.external_user_id, result.role)
    return result
