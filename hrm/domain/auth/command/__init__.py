"""Auth domain commands."""

from .register import RegisterEmployee, RegisterEmployeeHandler, RegisterEmployeeResult
from .role_change import (
    DemoteEmployee,
    DemoteEmployeeHandler,
    PromoteEmployee,
    PromoteEmployeeHandler,
    RoleChangeDTO,
    RoleChangeResult,
)
from .transfer import TransferSuperAdmin, TransferSuperAdminHandler, TransferSuperAdminResult

__all__ = [
    "DemoteEmployee",
    "DemoteEmployeeHandler",
    "PromoteEmployee",
    "PromoteEmployeeHandler",
    "RegisterEmployee",
    "RegisterEmployeeHandler",
    "RegisterEmployeeResult",
    "RoleChangeDTO",
    "RoleChangeResult",
    "TransferSuperAdmin",
    "TransferSuperAdminHandler",
    "TransferSuperAdminResult",
]
