"""Auth domain models."""

from .employee import Employee
from .identity import Anonymous, Identity
from .permission import Feature, Permission
from .principal import Principal
from .role import ROLE_HIERARCHY, Role, RoleDefinition
from .role_change import RoleChange, RoleChangeKind
from .value import CurrentUser, EmployeeId, RoleChangeId, RoleDisplay, SignupRole

__all__ = [
    "ROLE_HIERARCHY",
    "Anonymous",
    "CurrentUser",
    "Employee",
    "EmployeeId",
    "Feature",
    "Identity",
    "Permission",
    "Principal",
    "Role",
    "RoleChange",
    "RoleChangeId",
    "RoleChangeKind",
    "RoleDefinition",
    "RoleDisplay",
    "SignupRole",
]
