"""Repository port for the role change audit trail."""

from abc import abstractmethod
from typing import Protocol

from hrm.domain.auth.model.role_change import RoleChange
from hrm.domain.auth.model.value import EmployeeId
from hrm.domain.shared.port import Port


class RoleChangeRepository(Port, Protocol):
    """Append-only repository for RoleChange records."""

    @abstractmethod
    async def save(self, change: RoleChange) -> None:
        """Record a role change."""
        ...

    @abstractmethod
    async def list_by_employee(self, employee_id: EmployeeId) -> list[RoleChange]:
        """Role changes for an employee, oldest first."""
        ...
