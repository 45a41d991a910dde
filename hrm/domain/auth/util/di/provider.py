"""DI provider for auth domain."""

import logging

import jwt
from dishka import from_context, provide, provide_all
from fastapi import HTTPException
from starlette.requests import Request

from hrm.config import Config
from hrm.domain.auth.command.register import RegisterEmployeeHandler
from hrm.domain.auth.command.role_change import DemoteEmployeeHandler, PromoteEmployeeHandler
from hrm.domain.auth.command.transfer import TransferSuperAdminHandler
from hrm.domain.auth.model.identity import Anonymous, Identity
from hrm.domain.auth.model.principal import Principal
from hrm.domain.auth.model.value import CurrentUser
from hrm.domain.auth.port.employee_repository import EmployeeRepository
from hrm.domain.auth.query.employees import GetRoleHistoryHandler, ListEmployeesHandler
from hrm.domain.auth.query.first_user import GetFirstUserStatusHandler
from hrm.domain.auth.query.my_access import GetMyAccessHandler
from hrm.domain.auth.query.role_profile import (
    GetRoleProfileHandler,
    ListRoleProfilesHandler,
    ListSignupRolesHandler,
)
from hrm.domain.auth.service.registration import RegistrationService
from hrm.domain.auth.service.role_management import RoleManagementService
from hrm.domain.auth.service.role_resolver import ROLE_RESOLVER, RoleResolver
from hrm.domain.auth.service.token import TokenService
from hrm.util.di.base import Provider
from hrm.util.di.scope import Scope

logger = logging.getLogger(__name__)


def _bearer_token(request: Request) -> str | None:
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _unauthorized(code: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=401,
        detail={"code": code, "message": message},
        headers={"WWW-Authenticate": "Bearer"},
    )


class AuthProvider(Provider):
    """Auth handlers and services, plus resolving the caller from the bearer token."""

    request = from_context(provides=Request, scope=Scope.UOW)

    handlers = provide_all(
        RegisterEmployeeHandler,
        PromoteEmployeeHandler,
        DemoteEmployeeHandler,
        TransferSuperAdminHandler,
        GetRoleProfileHandler,
        ListRoleProfilesHandler,
        ListSignupRolesHandler,
        GetMyAccessHandler,
        GetFirstUserStatusHandler,
        ListEmployeesHandler,
        GetRoleHistoryHandler,
        scope=Scope.UOW,
    )
    services = provide_all(RoleManagementService, RegistrationService, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_role_resolver(self) -> RoleResolver:
        """Provide the process-wide RoleResolver over the static hierarchy."""
        return ROLE_RESOLVER

    @provide(scope=Scope.APP)
    def get_token_service(self, config: Config) -> TokenService:
        return TokenService(_config=config.auth.jwt)

    @provide(scope=Scope.UOW)
    def get_current_user(
        self,
        request: Request,
        token_service: TokenService,
    ) -> CurrentUser:
        """The verified token holder, whether or not they are a registered employee.

        Used by registration, which runs before an employee record exists.
        Raises a 401 HTTPException for a missing, expired or invalid token.
        """
        token = _bearer_token(request)
        if token is None:
            raise _unauthorized("missing_token", "Authorization header required")

        try:
            payload = token_service.validate_access_token(token)
        except jwt.ExpiredSignatureError as e:
            raise _unauthorized("token_expired", "Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise _unauthorized("invalid_token", "Invalid token") from e
        return CurrentUser(external_user_id=payload["sub"], claims=payload)

    @provide(scope=Scope.UOW)
    async def get_identity(
        self,
        request: Request,
        token_service: TokenService,
        employee_repo: EmployeeRepository,
    ) -> Identity:
        """Resolve Identity from JWT + employee lookup.

        Returns Anonymous for unauthenticated requests and for tokens whose
        subject has not registered yet, Principal otherwise.
        """
        token = _bearer_token(request)
        if token is None:
            return Anonymous()

        try:
            payload = token_service.validate_access_token(token)
        except jwt.InvalidTokenError:
            return Anonymous()

        employee = await employee_repo.get_by_external_id(payload["sub"])
        if employee is None:
            logger.debug("Token subject %s is not a registered employee", payload["sub"])
            return Anonymous()

        logger.debug("Identity resolved: employee_id=%s, role=%s", employee.id, employee.role)
        return Principal(
            employee_id=employee.id,
            external_user_id=employee.external_user_id,
            role=employee.role,
        )

    @provide(scope=Scope.UOW)
    def get_principal(self, identity: Identity) -> Principal:
        """Extract Principal from Identity. Raises if not authenticated."""
        from hrm.domain.shared.error import AuthenticationRequiredError

        if isinstance(identity, Principal):
            return identity
        raise AuthenticationRequiredError("Authentication required")
