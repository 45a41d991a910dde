"""Commands: requests that change employee or role state."""

from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from hrm.domain.shared.handler import HandlerMeta, Result

if TYPE_CHECKING:
    from hrm.domain.shared.authorization.gate import Gate

__all__ = ["Command", "CommandHandler", "Result"]


class Command(BaseModel): ...


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)


class CommandHandler(Generic[C, R], metaclass=HandlerMeta):
    """Executes one command type.

        class PromoteEmployeeHandler(CommandHandler[PromoteEmployee, RoleChangeResult]):
            __auth__ = authenticated()
            principal: Principal
            role_management: RoleManagementService
    """

    __auth__: ClassVar["Gate"]

    @abstractmethod
    async def run(self, cmd: C) -> R: ...
