"""Auth domain queries."""

from .employees import (
    EmployeeDTO,
    GetRoleHistory,
    GetRoleHistoryHandler,
    ListEmployees,
    ListEmployeesHandler,
)
from .first_user import GetFirstUserStatus, GetFirstUserStatusHandler
from .my_access import GetMyAccess, GetMyAccessHandler
from .role_profile import (
    GetRoleProfile,
    GetRoleProfileHandler,
    ListRoleProfiles,
    ListRoleProfilesHandler,
    ListSignupRoles,
    ListSignupRolesHandler,
    RoleProfileDTO,
)

__all__ = [
    "EmployeeDTO",
    "GetFirstUserStatus",
    "GetFirstUserStatusHandler",
    "GetMyAccess",
    "GetMyAccessHandler",
    "GetRoleHistory",
    "GetRoleHistoryHandler",
    "GetRoleProfile",
    "GetRoleProfileHandler",
    "ListEmployees",
    "ListEmployeesHandler",
    "ListRoleProfiles",
    "ListRoleProfilesHandler",
    "ListSignupRoles",
    "ListSignupRolesHandler",
    "RoleProfileDTO",
]
