"""Value objects for the auth domain."""

from dataclasses import dataclass
from uuid import UUID, uuid4

from pydantic import RootModel

from hrm.domain.auth.model.role import Role


class EmployeeId(RootModel[UUID]):
    """Unique identifier for an Employee."""

    @classmethod
    def generate(cls) -> "EmployeeId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class RoleChangeId(RootModel[UUID]):
    """Unique identifier for a RoleChange record."""

    @classmethod
    def generate(cls) -> "RoleChangeId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller extracted from a bearer token, before employee lookup.

    ``claims`` holds the raw token payload so metadata such as a requested
    role can be read during self-registration.
    """

    external_user_id: str
    claims: dict


@dataclass(frozen=True)
class RoleDisplay:
    """Presentation data for a role badge."""

    name: str
    color: str
    level: int


@dataclass(frozen=True)
class SignupRole:
    """A role offered during self-registration."""

    role: Role
    label: str
    description: str
