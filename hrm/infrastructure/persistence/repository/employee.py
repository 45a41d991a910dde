"""SQL repository implementation for employees."""

from uuid import UUID

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hrm.domain.auth.model.employee import Employee
from hrm.domain.auth.model.role import Role
from hrm.domain.auth.model.value import EmployeeId
from hrm.domain.auth.port.employee_repository import EmployeeRepository
from hrm.infrastructure.persistence.tables import employees_table


def _row_to_employee(row: dict) -> Employee:
    """Convert a database row to an Employee model."""
    return Employee(
        id=EmployeeId(UUID(row["id"])),
        external_user_id=row["external_user_id"],
        name=row["name"],
        email=row["email"],
        role=Role(row["role"]),
        position=row["position"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _employee_to_dict(employee: Employee) -> dict:
    """Convert an Employee model to a database row dict."""
    return {
        "id": str(employee.id),
        "external_user_id": employee.external_user_id,
        "name": employee.name,
        "email": employee.email,
        "role": employee.role.value,
        "position": employee.position,
        "created_at": employee.created_at,
        "updated_at": employee.updated_at,
    }


class SQLEmployeeRepository(EmployeeRepository):
    """SQLAlchemy Core implementation of EmployeeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, employee_id: EmployeeId) -> Employee | None:
        stmt = select(employees_table).where(employees_table.c.id == str(employee_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_employee(dict(row)) if row else None

    async def get_by_external_id(self, external_user_id: str) -> Employee | None:
        stmt = select(employees_table).where(
            employees_table.c.external_user_id == external_user_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_employee(dict(row)) if row else None

    async def list_all(self, role: Role | None = None) -> list[Employee]:
        stmt = select(employees_table).order_by(employees_table.c.created_at)
        if role is not None:
            stmt = stmt.where(employees_table.c.role == role.value)
        result = await self.session.execute(stmt)
        return [_row_to_employee(dict(row)) for row in result.mappings().all()]

    async def save(self, employee: Employee) -> None:
        employee_dict = _employee_to_dict(employee)
        existing = await self.get(employee.id)

        if existing:
            stmt = (
                update(employees_table)
                .where(employees_table.c.id == str(employee.id))
                .values(**employee_dict)
            )
        else:
            stmt = insert(employees_table).values(**employee_dict)

        await self.session.execute(stmt)
        await self.session.flush()

    async def count(self) -> int:
        stmt = select(func.count()).select_from(employees_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_role(self, role: Role) -> int:
        stmt = (
            select(func.count())
            .select_from(employees_table)
            .where(employees_table.c.role == role.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
