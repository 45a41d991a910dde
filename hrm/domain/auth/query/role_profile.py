"""Role profile queries: what a role is granted and how it is displayed."""

from pydantic import BaseModel

from hrm.domain.auth.model.role import Role
from hrm.domain.auth.service.role_resolver import RoleResolver
from hrm.domain.shared.authorization.gate import public
from hrm.domain.shared.error import NotFoundError
from hrm.domain.shared.query import Query, QueryHandler
from hrm.domain.shared.query import Result as QueryResult


class RoleProfileDTO(BaseModel):
    role: str
    name: str
    color: str
    level: int
    inherits: list[str]
    permissions: list[str]
    features: list[str]
    dashboard: str
    can_promote_to: list[str]
    can_demote_to: list[str]


def build_role_profile(resolver: RoleResolver, role: Role) -> RoleProfileDTO:
    display = resolver.get_role_display(role)
    definition = resolver.get_definition(role)
    if definition is None:
        raise NotFoundError(f"Unknown role: {role}", code="role_not_found")
    return RoleProfileDTO(
        role=role.value,
        name=display.name,
        color=display.color,
        level=display.level,
        inherits=sorted(r.value for r in definition.inherits),
        permissions=sorted(str(p) for p in resolver.get_all_permissions(role)),
        features=sorted(str(f) for f in resolver.get_all_features(role)),
        dashboard=resolver.get_dashboard_path(role),
        can_promote_to=sorted(r.value for r in definition.can_promote_to),
        can_demote_to=sorted(r.value for r in definition.can_demote_to),
    )


class GetRoleProfile(Query):
    role: str


class RoleProfileResult(QueryResult):
    profile: RoleProfileDTO


class GetRoleProfileHandler(QueryHandler[GetRoleProfile, RoleProfileResult]):
    __auth__ = public()
    resolver: RoleResolver

    async def run(self, query: GetRoleProfile) -> RoleProfileResult:
        role = Role.parse(query.role)
        if role is None:
            raise NotFoundError(f"Unknown role: {query.role}", code="role_not_found")
        return RoleProfileResult(profile=build_role_profile(self.resolver, role))


class ListRoleProfiles(Query): ...


class ListRoleProfilesResult(QueryResult):
    roles: list[RoleProfileDTO]


class ListRoleProfilesHandler(QueryHandler[ListRoleProfiles, ListRoleProfilesResult]):
    __auth__ = public()
    resolver: RoleResolver

    async def run(self, query: ListRoleProfiles) -> ListRoleProfilesResult:
        return ListRoleProfilesResult(roles=[build_role_profile(self.resolver, r) for r in Role])


class SignupRoleDTO(BaseModel):
    role: str
    label: str
    description: str


class ListSignupRoles(Query): ...


class ListSignupRolesResult(QueryResult):
    roles: list[SignupRoleDTO]


class ListSignupRolesHandler(QueryHandler[ListSignupRoles, ListSignupRolesResult]):
    __auth__ = public()
    resolver: RoleResolver

    async def run(self, query: ListSignupRoles) -> ListSignupRolesResult:
        return ListSignupRolesResult(
            roles=[
                SignupRoleDTO(role=s.role.value, label=s.label, description=s.description)
                for s in self.resolver.get_available_signup_roles()
            ]
        )
