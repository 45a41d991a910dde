"""Handler-level authorization gates: public(), authenticated() and permission/feature gates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger("hrm.authz")


class Gate:
    """Base for handler-level authorization gates.

    Every CommandHandler/QueryHandler must declare ``__auth__: ClassVar[Gate]``.
    Subclasses define specific gate behaviors (public access, permission checks, etc.).
    """

    requires_principal = True

    def allows(self, principal: Any) -> bool:
        """Return True if the authenticated principal passes this gate."""
        return True


@dataclass(frozen=True)
class Public(Gate):
    """No authentication required."""

    requires_principal = False


@dataclass(frozen=True)
class Authenticated(Gate):
    """Any registered employee, whatever their role."""


@dataclass(frozen=True)
class RequiresPermission(Gate):
    """Gate that requires the principal's role to grant a permission tag."""

    permission: str

    def allows(self, principal: Any) -> bool:
        return principal.has_permission(self.permission)


@dataclass(frozen=True)
class RequiresFeature(Gate):
    """Gate that requires the principal's role to grant a feature tag."""

    feature: str

    def allows(self, principal: Any) -> bool:
        return principal.has_feature(self.feature)


_PUBLIC = Public()
_AUTHENTICATED = Authenticated()


def public() -> Public:
    """Mark a handler as publicly accessible (no auth required)."""
    return _PUBLIC


def authenticated() -> Authenticated:
    """Mark a handler as requiring a registered employee."""
    return _AUTHENTICATED


def requires_permission(permission: str) -> RequiresPermission:
    """Mark a handler as requiring the given permission tag."""
    return RequiresPermission(permission=permission)


def requires_feature(feature: str) -> RequiresFeature:
    """Mark a handler as requiring the given feature tag."""
    return RequiresFeature(feature=feature)


def enforce(handler: Any) -> None:
    """Evaluate the handler's ``__auth__`` gate against its ``principal`` attribute.

    Raises ConfigurationError if the gate is missing, AuthorizationError if denied.
    """
    from hrm.domain.auth.model.principal import Principal
    from hrm.domain.shared.error import (
        AuthenticationRequiredError,
        AuthorizationError,
        ConfigurationError,
    )

    gate = getattr(type(handler), "__auth__", None)
    if not isinstance(gate, Gate):
        raise ConfigurationError(f"Handler {type(handler).__name__} has no __auth__ declaration")

    if not gate.requires_principal:
        return

    principal = getattr(handler, "principal", None)
    if not isinstance(principal, Principal):
        raise AuthenticationRequiredError("Authentication required")

    logger.debug(
        "Auth check: handler=%s, gate=%s, role=%s, employee_id=%s",
        type(handler).__name__,
        gate,
        principal.role,
        principal.employee_id,
    )

    if not gate.allows(principal):
        raise AuthorizationError(
            f"Access denied: insufficient permissions for {type(handler).__name__}"
        )
