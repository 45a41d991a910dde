"""Shared machinery for command and query handlers.

A handler is a dataclass whose fields are its injected dependencies. Its
``run`` method is wrapped so the class-level ``__auth__`` gate is enforced
before any handler code executes.
"""

from abc import ABCMeta
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import Any, dataclass_transform

from pydantic import BaseModel


class Result(BaseModel):
    """Base for handler return values."""


_Run = Callable[..., Coroutine[Any, Any, Any]]


def _guarded(run: _Run) -> _Run:
    @wraps(run)
    async def guarded_run(self: Any, message: Any) -> Any:
        from hrm.domain.shared.authorization.gate import enforce

        enforce(self)
        return await run(self, message)

    guarded_run.__guarded__ = True  # type: ignore[attr-defined]
    return guarded_run


@dataclass_transform()
class HandlerMeta(ABCMeta):
    """ABC metaclass that dataclasses each concrete handler and guards its ``run``."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        # The CommandHandler / QueryHandler roots stay plain ABCs
        if not any(isinstance(b, mcs) for b in bases):
            return cls

        cls = dataclass(cls)
        run = cls.__dict__.get("run")
        if run is not None and not getattr(run, "__guarded__", False):
            cls.run = _guarded(run)
        return cls
