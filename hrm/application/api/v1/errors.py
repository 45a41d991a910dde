"""Translate HRM errors into HTTP responses.

Status is chosen by the most specific error class found in the error's MRO,
so new subclasses inherit their parent's status unless listed here.
"""

from fastapi import HTTPException

from hrm.domain.shared.error import (
    AuthenticationRequiredError,
    AuthorizationError,
    ConflictError,
    DomainError,
    HRMError,
    InfrastructureError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)

ERROR_STATUS_MAP: dict[type[HRMError], int] = {
    AuthenticationRequiredError: 401,
    AuthorizationError: 403,
    NotFoundError: 404,
    ConflictError: 409,
    InvalidStateError: 409,
    ValidationError: 422,
    DomainError: 400,
    InfrastructureError: 503,
    HRMError: 500,
}


def status_for(error: HRMError) -> int:
    for cls in type(error).__mro__:
        if cls in ERROR_STATUS_MAP:
            return ERROR_STATUS_MAP[cls]
    return 500


def map_hrm_error(error: HRMError) -> HTTPException:
    """Build the HTTPException for an HRM error; 401s carry a Bearer challenge."""
    status_code = status_for(error)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return HTTPException(status_code=status_code, detail=error.to_detail(), headers=headers)
