"""Auth domain services."""

from .registration import FirstUserStatus, RegistrationService
from .role_management import RoleManagementService
from .role_resolver import ROLE_RESOLVER, RoleResolver
from .token import TokenService

__all__ = [
    "ROLE_RESOLVER",
    "FirstUserStatus",
    "RegistrationService",
    "RoleManagementService",
    "RoleResolver",
    "TokenService",
]
