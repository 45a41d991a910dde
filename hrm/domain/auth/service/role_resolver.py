"""RoleResolver: permission, feature and promotion/demotion lookups over the role hierarchy.

Every operation is total: unknown roles or tags resolve to False, an empty
set, or a fallback value. Nothing here raises, so the resolver can sit on
any request path as a permission gate. Role tags are matched exactly:
"Manager" or " admin" is an unknown role here.
"""

from collections.abc import Iterator, Mapping
from dataclasses import field
from types import MappingProxyType
from typing import Any, Literal

from hrm.domain.auth.model.role import ROLE_HIERARCHY, Role, RoleDefinition
from hrm.domain.auth.model.value import RoleDisplay, SignupRole
from hrm.domain.shared.service import Service

# Dashboard pages live at the top-level path named after the role
DASHBOARD_PATHS: Mapping[Role, str] = MappingProxyType(
    {
        Role.INTERN: "/intern",
        Role.EMPLOYEE: "/employee",
        Role.MANAGER: "/manager",
        Role.ADMIN: "/admin",
        Role.SUPER_ADMIN: "/super_admin",
    }
)
DEFAULT_DASHBOARD_PATH = "/intern"

ROLE_DISPLAYS: Mapping[Role, RoleDisplay] = MappingProxyType(
    {
        Role.INTERN: RoleDisplay(name="Intern", color="bg-green-100 text-green-800", level=1),
        Role.EMPLOYEE: RoleDisplay(name="Employee", color="bg-yellow-100 text-yellow-800", level=2),
        Role.MANAGER: RoleDisplay(name="Manager", color="bg-blue-100 text-blue-800", level=3),
        Role.ADMIN: RoleDisplay(name="Admin", color="bg-orange-100 text-orange-800", level=4),
        Role.SUPER_ADMIN: RoleDisplay(name="Super Admin", color="bg-red-100 text-red-800", level=5),
    }
)
UNKNOWN_ROLE_DISPLAY = RoleDisplay(name="Unknown", color="bg-gray-100 text-gray-800", level=0)

SIGNUP_ROLES: tuple[SignupRole, ...] = (
    SignupRole(
        role=Role.INTERN,
        label="Intern",
        description=(
            "Limited access, view assigned tasks, submit reports, access training resources"
        ),
    ),
    SignupRole(
        role=Role.EMPLOYEE,
        label="Employee",
        description=(
            "Full task management, team collaboration, project participation, payroll access"
        ),
    ),
)

# Highest level a plain admin may promote someone to (manager)
_ADMIN_PROMOTION_CEILING = 3


def _default_hierarchy() -> Mapping[Role, RoleDefinition]:
    return ROLE_HIERARCHY


class RoleResolver(Service):
    """Answers permission, feature and role-transition questions for a role.

    The hierarchy defaults to the static ROLE_HIERARCHY table. Inheritance is
    walked with a visited set, so a table loaded from elsewhere cannot loop.
    """

    _hierarchy: Mapping[Role, RoleDefinition] = field(default_factory=_default_hierarchy)

    # ------------------------------------------------------------------
    # Permissions and features
    # ------------------------------------------------------------------

    def has_permission(self, role: Role | str, permission: str) -> bool:
        """True if the role, or any role it inherits from, grants the permission."""
        return any(permission in d.permissions for d in self._closure(role))

    def has_feature_access(self, role: Role | str, feature: str) -> bool:
        """True if the role, or any role it inherits from, grants the feature."""
        return any(feature in d.features for d in self._closure(role))

    def get_all_permissions(self, role: Role | str) -> frozenset[str]:
        """All permissions granted to the role, including inherited ones."""
        return frozenset(p for d in self._closure(role) for p in d.permissions)

    def get_all_features(self, role: Role | str) -> frozenset[str]:
        """All features granted to the role, including inherited ones."""
        return frozenset(f for d in self._closure(role) for f in d.features)

    def _closure(self, role: Role | str) -> Iterator[RoleDefinition]:
        """Yield the definition of the role and of every role reachable via ``inherits``.

        Depth-first; each role is yielded at most once.
        """
        start = self._lookup(role)
        if start is None:
            return

        visited: set[Role] = set()
        stack = [start]
        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            definition = self._hierarchy.get(current)
            if definition is None:
                continue
            yield definition
            stack.extend(r for r in definition.inherits if r not in visited)

    # ------------------------------------------------------------------
    # Promotion / demotion rules
    # ------------------------------------------------------------------

    def can_promote_role(
        self,
        promoter_role: Role | str,
        target_role: Role | str,
        new_role: Role | str,
    ) -> bool:
        """Whether ``promoter_role`` may move a ``target_role`` employee up to ``new_role``.

        - super_admin: always
        - admin: only to manager or below
        - manager: only an employee, and only to manager
        """
        promoter = self._lookup(promoter_role)
        target = self._lookup(target_role)
        new = self._lookup(new_role)
        if promoter is None or target is None or new is None:
            return False

        if promoter is Role.SUPER_ADMIN:
            return True

        if promoter is Role.ADMIN:
            return self._level(new) <= _ADMIN_PROMOTION_CEILING

        if promoter is Role.MANAGER and target is Role.EMPLOYEE and new is Role.MANAGER:
            return True

        return False

    def can_demote_role(
        self,
        demoter_role: Role | str,
        target_role: Role | str,
        new_role: Role | str,
    ) -> bool:
        """Whether ``demoter_role`` may move a ``target_role`` employee down to ``new_role``.

        - super_admin: anyone, except that another super_admin may only step down to admin
        - admin: manager or below, to a strictly lower role
        - manager: only an employee, and only to intern
        """
        demoter = self._lookup(demoter_role)
        target = self._lookup(target_role)
        new = self._lookup(new_role)
        if demoter is None or target is None or new is None:
            return False

        if demoter is Role.SUPER_ADMIN:
            return target is not Role.SUPER_ADMIN or new is Role.ADMIN

        if demoter is Role.ADMIN:
            target_level = self._level(target)
            return target_level <= _ADMIN_PROMOTION_CEILING and self._level(new) < target_level

        if demoter is Role.MANAGER and target is Role.EMPLOYEE and new is Role.INTERN:
            return True

        return False

    def next_role(
        self,
        role: Role | str,
        direction: Literal["up", "down"],
    ) -> Role | None:
        """The role one level above or below, or None at either end of the hierarchy."""
        current = self._lookup(role)
        if current is None:
            return None
        wanted = self._level(current) + (1 if direction == "up" else -1)
        for candidate, definition in self._hierarchy.items():
            if definition.level == wanted:
                return candidate
        return None

    # ------------------------------------------------------------------
    # Static lookups
    # ------------------------------------------------------------------

    def get_dashboard_route(self, role: Role | str) -> str:
        """Dashboard path for the role; the intern dashboard for unknown roles."""
        return self.get_dashboard_path(role)

    def get_dashboard_path(self, role: Role | str) -> str:
        parsed = Role.from_tag(role)
        if parsed is None:
            return DEFAULT_DASHBOARD_PATH
        return DASHBOARD_PATHS.get(parsed, DEFAULT_DASHBOARD_PATH)

    def get_role_display(self, role: Role | str) -> RoleDisplay:
        parsed = Role.from_tag(role)
        if parsed is None:
            return UNKNOWN_ROLE_DISPLAY
        return ROLE_DISPLAYS.get(parsed, UNKNOWN_ROLE_DISPLAY)

    def get_available_signup_roles(self) -> list[SignupRole]:
        """Roles a new user may pick at self-registration (intern and employee only)."""
        return list(SIGNUP_ROLES)

    def get_user_role(self, metadata: Mapping[str, Any] | None) -> Role:
        """Read the role tag from user metadata, defaulting to intern.

        Looks at ``role`` first, then ``unsafe_metadata.role``, then
        ``public_metadata.role``. Unknown tags fall back to intern.
        """
        if not metadata:
            return Role.INTERN

        candidates = [metadata.get("role")]
        for key in ("unsafe_metadata", "public_metadata"):
            nested = metadata.get(key)
            if isinstance(nested, Mapping):
                candidates.append(nested.get("role"))

        for candidate in candidates:
            if candidate:
                role = self._lookup(candidate)
                return role if role is not None else Role.INTERN
        return Role.INTERN

    def get_definition(self, role: Role | str) -> RoleDefinition | None:
        """The raw hierarchy entry for the role, or None for an unknown role."""
        parsed = self._lookup(role)
        return None if parsed is None else self._hierarchy[parsed]

    def _lookup(self, role: Role | str) -> Role | None:
        parsed = Role.from_tag(role)
        if parsed is None or parsed not in self._hierarchy:
            return None
        return parsed

    def _level(self, role: Role) -> int:
        return self._hierarchy[role].level


ROLE_RESOLVER = RoleResolver()
