"""Error hierarchy for HRM.

- HRMError: base class; every error carries a machine-readable ``code``
- DomainError: rule violations and bad input, surfaced as 4xx
- InfrastructureError: storage or configuration failures, surfaced as 503

Each class has a ``default_code`` used when the raiser does not pass a more
specific one (``last_super_admin``, ``role_change_denied``, ...). The HTTP
mapping lives in ``hrm.application.api.v1.errors``.
"""

from typing import Any


class HRMError(Exception):
    """Base class for all HRM errors."""

    default_code = "internal_error"

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    def to_detail(self) -> dict[str, Any]:
        """JSON-ready error body."""
        return {"code": self.code, "message": self.message}


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(HRMError):
    """Base class for domain/business errors."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    default_code = "not_found"


class ValidationError(DomainError):
    """Input validation failed. ``field`` names the offending input, if known."""

    default_code = "validation_error"

    def __init__(self, message: str, field: str | None = None, code: str | None = None) -> None:
        super().__init__(message, code=code)
        self.field = field

    def to_detail(self) -> dict[str, Any]:
        detail = super().to_detail()
        if self.field is not None:
            detail["field"] = self.field
        return detail


class InvalidStateError(DomainError):
    """Operation not allowed in the current state (e.g. demoting the last super admin)."""

    default_code = "invalid_state"


class ConflictError(DomainError):
    default_code = "conflict"


class AuthorizationError(DomainError):
    """Caller is known but not allowed to do this."""

    default_code = "access_denied"


class AuthenticationRequiredError(AuthorizationError):
    """No authenticated employee behind the request."""

    default_code = "missing_token"


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(HRMError):
    """Base class for infrastructure/system errors."""

    default_code = "infrastructure_error"


class StorageUnavailableError(InfrastructureError):
    """The database is unreachable or refused the operation."""

    default_code = "storage_unavailable"


class ConfigurationError(InfrastructureError):
    default_code = "configuration_error"
