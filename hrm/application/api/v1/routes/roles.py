"""Role catalogue routes: profiles, signup choices."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from hrm.domain.auth.query.role_profile import (
    GetRoleProfile,
    GetRoleProfileHandler,
    ListRoleProfiles,
    ListRoleProfilesHandler,
    ListSignupRoles,
    ListSignupRolesHandler,
    ListSignupRolesResult,
    ListRoleProfilesResult,
    RoleProfileDTO,
)

router = APIRouter(prefix="/roles", tags=["Roles"], route_class=DishkaRoute)


@router.get("", response_model=ListRoleProfilesResult)
async def list_roles(
    handler: FromDishka[ListRoleProfilesHandler],
) -> ListRoleProfilesResult:
    """Every role with its effective permissions, features and transitions."""
    return await handler.run(ListRoleProfiles())


@router.get("/signup", response_model=ListSignupRolesResult)
async def list_signup_roles(
    handler: FromDishka[ListSignupRolesHandler],
) -> ListSignupRolesResult:
    """Roles a new user may choose at self-registration."""
    return await handler.run(ListSignupRoles())


@router.get("/{role}", response_model=RoleProfileDTO)
async def get_role(
    role: str,
    handler: FromDishka[GetRoleProfileHandler],
) -> RoleProfileDTO:
    result = await handler.run(GetRoleProfile(role=role))
    return result.profile
