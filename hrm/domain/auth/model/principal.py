"""Principal: authenticated employee with a role, resolved per-request."""

from dataclasses import dataclass

from hrm.domain.auth.model.identity import Identity
from hrm.domain.auth.model.role import Role
from hrm.domain.auth.model.value import EmployeeId


@dataclass(frozen=True)
class Principal(Identity):
    """The authenticated employee making the current request.

    Resolved per-request from the bearer token plus an employee lookup.
    Permission and feature checks go through the role resolver, never
    through role level comparison.
    """

    employee_id: EmployeeId
    external_user_id: str
    role: Role

    def has_permission(self, permission: str) -> bool:
        from hrm.domain.auth.service.role_resolver import ROLE_RESOLVER

        return ROLE_RESOLVER.has_permission(self.role, permission)

    def has_feature(self, feature: str) -> bool:
        from hrm.domain.auth.service.role_resolver import ROLE_RESOLVER

        return ROLE_RESOLVER.has_feature_access(self.role, feature)
