"""Repository port for Employee persistence."""

from abc import abstractmethod
from typing import Protocol

from hrm.domain.auth.model.employee import Employee
from hrm.domain.auth.model.role import Role
from hrm.domain.auth.model.value import EmployeeId
from hrm.domain.shared.port import Port


class EmployeeRepository(Port, Protocol):
    """Repository for Employee aggregate persistence."""

    @abstractmethod
    async def get(self, employee_id: EmployeeId) -> Employee | None:
        """Get an employee by ID."""
        ...

    @abstractmethod
    async def get_by_external_id(self, external_user_id: str) -> Employee | None:
        """Get an employee by the identity provider's subject."""
        ...

    @abstractmethod
    async def list_all(self, role: Role | None = None) -> list[Employee]:
        """List employees, optionally filtered by role."""
        ...

    @abstractmethod
    async def save(self, employee: Employee) -> None:
        """Insert or update an employee."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Total number of registered employees."""
        ...

    @abstractmethod
    async def count_by_role(self, role: Role) -> int:
        """Number of employees currently holding the given role."""
        ...
