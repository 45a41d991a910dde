from .employee_repository import EmployeeRepository
from .role_change_repository import RoleChangeRepository

__all__ = ["EmployeeRepository", "RoleChangeRepository"]
