from .employee import SQLEmployeeRepository
from .role_change import SQLRoleChangeRepository

__all__ = ["SQLEmployeeRepository", "SQLRoleChangeRepository"]
