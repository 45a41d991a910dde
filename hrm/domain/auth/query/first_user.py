"""GetFirstUserStatus query."""

from hrm.domain.auth.service.registration import RegistrationService
from hrm.domain.shared.authorization.gate import public
from hrm.domain.shared.query import Query, QueryHandler
from hrm.domain.shared.query import Result as QueryResult


class GetFirstUserStatus(Query): ...


class FirstUserStatusResult(QueryResult):
    is_first_user: bool
    employee_count: int


class GetFirstUserStatusHandler(QueryHandler[GetFirstUserStatus, FirstUserStatusResult]):
    __auth__ = public()
    registration_service: RegistrationService

    async def run(self, query: GetFirstUserStatus) -> FirstUserStatusResult:
        status = await self.registration_service.first_user_status()
        return FirstUserStatusResult(
            is_first_user=status.is_first_user,
            employee_count=status.employee_count,
        )
