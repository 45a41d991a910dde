"""Queries: read-only requests."""

from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from hrm.domain.shared.handler import HandlerMeta, Result

if TYPE_CHECKING:
    from hrm.domain.shared.authorization.gate import Gate

__all__ = ["Query", "QueryHandler", "Result"]


class Query(BaseModel): ...


Q = TypeVar("Q", bound=Query)
R = TypeVar("R", bound=Result)


class QueryHandler(Generic[Q, R], metaclass=HandlerMeta):
    """Answers one query type. Queries never write."""

    __auth__: ClassVar["Gate"]

    @abstractmethod
    async def run(self, query: Q) -> R: ...
