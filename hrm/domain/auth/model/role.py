"""Role hierarchy for authorization.

ROLE_HIERARCHY is the single source of truth for what each role is granted.
It is built once at import time from frozen values and exposed through a
read-only mapping.
"""

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from hrm.domain.auth.model.permission import Feature, Permission


class Role(StrEnum):
    """Employee roles, declared in ascending order of authority."""

    INTERN = "intern"
    EMPLOYEE = "employee"
    MANAGER = "manager"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"

    @property
    def level(self) -> int:
        """Numeric rank (1 = intern, 5 = super_admin)."""
        return ROLE_HIERARCHY[self].level

    @classmethod
    def from_tag(cls, value: Any) -> "Role | None":
        """Exact lookup: a Role member or its exact string value, else None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        return cls._value2member_map_.get(value)  # type: ignore[return-value]

    @classmethod
    def parse(cls, value: Any) -> "Role | None":
        """Lenient lookup for user input ("Manager", " super_admin ").

        Authorization checks use ``from_tag``; only API and CLI arguments go
        through here.
        """
        if isinstance(value, str):
            value = value.strip().lower()
        return cls.from_tag(value)


@dataclass(frozen=True)
class RoleDefinition:
    """Static grants for a single role."""

    level: int
    inherits: frozenset[Role]
    permissions: frozenset[str]
    features: frozenset[str]
    can_promote_to: frozenset[Role] = frozenset()
    can_demote_to: frozenset[Role] = frozenset()


ROLE_HIERARCHY: MappingProxyType[Role, RoleDefinition] = MappingProxyType(
    {
        Role.INTERN: RoleDefinition(
            level=1,
            inherits=frozenset(),
            permissions=frozenset(
                {
                    Permission.VIEW_ASSIGNED_TASKS,
                    Permission.SUBMIT_TIMESHEETS,
                    Permission.SUBMIT_REPORTS,
                    Permission.REQUEST_PROMOTION,
                    Permission.VIEW_TRAINING_RESOURCES,
                    Permission.RECEIVE_NOTIFICATIONS,
                }
            ),
            features=frozenset(
                {
                    Feature.INTERN_DASHBOARD,
                    Feature.TASK_VIEWER,
                    Feature.TIMESHEET_SUBMISSION,
                    Feature.TRAINING_PORTAL,
                    Feature.PROMOTION_REQUESTS,
                }
            ),
            can_promote_to=frozenset({Role.EMPLOYEE}),
        ),
        Role.EMPLOYEE: RoleDefinition(
            level=2,
            inherits=frozenset(),
            permissions=frozenset(
                {
                    Permission.MANAGE_PERSONAL_TASKS,
                    Permission.VIEW_TEAM_CALENDAR,
                    Permission.PARTICIPATE_PROJECTS,
                    Permission.JOIN_VIDEO_CONFERENCES,
                    Permission.ACCESS_PAYROLL_VIEW,
                    Permission.TEAM_COLLABORATION,
                    Permission.EMAIL_NOTIFICATIONS,
                    Permission.SPRINT_PARTICIPATION,
                }
            ),
            features=frozenset(
                {
                    Feature.EMPLOYEE_DASHBOARD,
                    Feature.FULL_TASK_MANAGEMENT,
                    Feature.PERSONAL_CALENDAR,
                    Feature.TEAM_COLLABORATION,
                    Feature.PAYROLL_VIEW,
                    Feature.PROJECT_PARTICIPATION,
                    Feature.VIDEO_CONFERENCES,
                }
            ),
            can_promote_to=frozenset({Role.MANAGER}),
            can_demote_to=frozenset({Role.INTERN}),
        ),
        Role.MANAGER: RoleDefinition(
            level=3,
            inherits=frozenset({Role.EMPLOYEE}),
            permissions=frozenset(
                {
                    Permission.CREATE_TEAMS,
                    Permission.ASSIGN_TASKS,
                    Permission.MANAGE_PROJECTS,
                    Permission.MANAGE_SPRINTS,
                    Permission.APPROVE_LEAVE_REQUESTS,
                    Permission.VIEW_TEAM_PERFORMANCE,
                    Permission.MODERATE_TEAM_COMMUNICATION,
                    Permission.SCHEDULE_TEAM_MEETINGS,
                    Permission.TRIGGER_NOTIFICATIONS,
                }
            ),
            features=frozenset(
                {
                    Feature.MANAGER_DASHBOARD,
                    Feature.TEAM_MANAGEMENT,
                    Feature.PROJECT_CREATION,
                    Feature.SPRINT_MANAGEMENT,
                    Feature.LEAVE_APPROVAL,
                    Feature.TEAM_STATISTICS,
                    Feature.TEAM_CALENDAR_INTEGRATION,
                }
            ),
            can_promote_to=frozenset({Role.ADMIN}),
            can_demote_to=frozenset({Role.EMPLOYEE}),
        ),
        Role.ADMIN: RoleDefinition(
            level=4,
            inherits=frozenset({Role.MANAGER, Role.EMPLOYEE}),
            permissions=frozenset(
                {
                    Permission.CONFIGURE_POLICIES,
                    Permission.MANAGE_ALL_ROLES,
                    Permission.ACCESS_ALL_STATISTICS,
                    Permission.ADVANCED_REPORTING,
                    Permission.MANAGE_INTEGRATIONS,
                    Permission.COMPANY_NOTIFICATIONS,
                    Permission.PAYROLL_MANAGEMENT,
                    Permission.SYSTEM_CONFIGURATION,
                }
            ),
            features=frozenset(
                {
                    Feature.ADMIN_DASHBOARD,
                    Feature.POLICY_CONFIGURATION,
                    Feature.ROLE_MANAGEMENT,
                    Feature.COMPANY_STATISTICS,
                    Feature.ADVANCED_REPORTS,
                    Feature.INTEGRATION_MANAGEMENT,
                    Feature.PAYROLL_ADMINISTRATION,
                }
            ),
            # Only a super_admin can promote to super_admin
            can_demote_to=frozenset({Role.MANAGER}),
        ),
        Role.SUPER_ADMIN: RoleDefinition(
            level=5,
            inherits=frozenset({Role.ADMIN, Role.MANAGER, Role.EMPLOYEE}),
            permissions=frozenset(
                {
                    Permission.ASSIGN_ADMIN_ROLES,
                    Permission.PROMOTE_DEMOTE_ADMINS,
                    Permission.TRANSFER_SUPER_ADMIN,
                    Permission.GLOBAL_COMPANY_OVERSIGHT,
                    Permission.SECURITY_SETTINGS,
                    Permission.SYSTEM_CONFIGURATION,
                    Permission.FULL_ACCESS_ALL_FEATURES,
                }
            ),
            features=frozenset(
                {
                    Feature.SUPER_ADMIN_DASHBOARD,
                    Feature.GLOBAL_OVERSIGHT,
                    Feature.ADMIN_ROLE_MANAGEMENT,
                    Feature.SECURITY_CONFIGURATION,
                    Feature.SUPER_ADMIN_TRANSFER,
                    Feature.SYSTEM_MANAGEMENT,
                }
            ),
            # Transfer of the role itself
            can_promote_to=frozenset({Role.SUPER_ADMIN}),
            can_demote_to=frozenset({Role.ADMIN}),
        ),
    }
)
