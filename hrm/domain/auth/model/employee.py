"""Employee aggregate for the auth domain."""

from datetime import UTC, datetime

from hrm.domain.auth.model.role import Role
from hrm.domain.auth.model.value import EmployeeId
from hrm.domain.shared.model.entity import Aggregate

POSITION_TITLES: dict[Role, str] = {
    Role.INTERN: "Intern",
    Role.EMPLOYEE: "Employee",
    Role.MANAGER: "Manager",
    Role.ADMIN: "Administrator",
    Role.SUPER_ADMIN: "Super Administrator",
}


class Employee(Aggregate):
    """A registered employee and their currently assigned role.

    Invariants:
    - `id` and `external_user_id` are immutable after creation
    - `position` always reflects the title of the current `role`
    - `updated_at` is set on any role change
    """

    id: EmployeeId
    external_user_id: str
    name: str
    email: str | None = None
    role: Role
    position: str
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        external_user_id: str,
        name: str,
        role: Role,
        email: str | None = None,
    ) -> "Employee":
        """Create a new employee with the given starting role."""
        return cls(
            id=EmployeeId.generate(),
            external_user_id=external_user_id,
            name=name,
            email=email,
            role=role,
            position=POSITION_TITLES[role],
            created_at=datetime.now(UTC),
        )

    def change_role(self, new_role: Role) -> Role:
        """Apply a role change and return the previous role."""
        old_role = self.role
        self.role = new_role
        self.position = POSITION_TITLES[new_role]
        self.updated_at = datetime.now(UTC)
        return old_role
