"""GetMyAccess query: the caller's effective permissions and features."""

from hrm.domain.auth.model.principal import Principal
from hrm.domain.auth.service.role_resolver import RoleResolver
from hrm.domain.shared.authorization.gate import authenticated
from hrm.domain.shared.query import Query, QueryHandler
from hrm.domain.shared.query import Result as QueryResult


class GetMyAccess(Query): ...


class MyAccessResult(QueryResult):
    employee_id: str
    role: str
    role_name: str
    level: int
    permissions: list[str]
    features: list[str]
    dashboard: str


class GetMyAccessHandler(QueryHandler[GetMyAccess, MyAccessResult]):
    __auth__ = authenticated()
    principal: Principal
    resolver: RoleResolver

    async def run(self, query: GetMyAccess) -> MyAccessResult:
        role = self.principal.role
        display = self.resolver.get_role_display(role)
        return MyAccessResult(
            employee_id=str(self.principal.employee_id),
            role=role.value,
            role_name=display.name,
            level=display.level,
            permissions=sorted(str(p) for p in self.resolver.get_all_permissions(role)),
            features=sorted(str(f) for f in self.resolver.get_all_features(role)),
            dashboard=self.resolver.get_dashboard_path(role),
        )
