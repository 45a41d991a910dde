"""Base class for domain services."""

from dataclasses import dataclass
from typing import dataclass_transform


@dataclass_transform(kw_only_default=True)
class _ServiceMeta(type):
    """Turns every Service subclass into a keyword-only dataclass.

    Dependencies are declared as annotated fields and passed by keyword,
    by the DI providers and by tests alike.
    """

    def __new__(mcs, name: str, bases: tuple, namespace: dict):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            return dataclass(kw_only=True, repr=False)(cls)
        return cls


class Service(metaclass=_ServiceMeta):
    """Stateless domain logic over injected ports and collaborators."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
