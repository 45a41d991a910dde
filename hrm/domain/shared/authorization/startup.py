"""Fail-fast check that every handler declares an ``__auth__`` gate."""

import logging
from collections.abc import Iterator

from hrm.domain.shared.authorization.gate import Gate
from hrm.domain.shared.command import CommandHandler
from hrm.domain.shared.error import ConfigurationError
from hrm.domain.shared.query import QueryHandler

logger = logging.getLogger(__name__)


def _walk_subclasses(cls: type) -> Iterator[type]:
    for sub in cls.__subclasses__():
        yield sub
        yield from _walk_subclasses(sub)


def iter_handler_classes() -> Iterator[type]:
    """All concrete HRM command and query handlers.

    Classes defined outside the ``hrm`` package (tests, plugins) are skipped.
    """
    # Importing the handler packages registers their subclasses
    import hrm.domain.auth.command  # noqa: F401
    import hrm.domain.auth.query  # noqa: F401

    for root in (CommandHandler, QueryHandler):
        for handler_cls in _walk_subclasses(root):
            if handler_cls.__module__.startswith("hrm."):
                yield handler_cls


def _check_handler_class(handler_cls: type) -> None:
    if not isinstance(getattr(handler_cls, "__auth__", None), Gate):
        raise ConfigurationError(f"Handler {handler_cls.__name__} has no __auth__ declaration")


def validate_all_handlers() -> None:
    """Raise ConfigurationError naming every handler without a Gate."""
    violations = []
    checked = 0
    for handler_cls in iter_handler_classes():
        checked += 1
        try:
            _check_handler_class(handler_cls)
        except ConfigurationError as e:
            violations.append(e.message)

    if violations:
        raise ConfigurationError(
            f"{len(violations)} handler(s) missing authorization:\n"
            + "\n".join(f"  - {v}" for v in violations)
        )
    logger.info("Authorization gates present on all %d handlers", checked)
