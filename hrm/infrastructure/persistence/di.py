from collections.abc import AsyncIterator

from dishka import provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from hrm.config import Config
from hrm.domain.auth.port.employee_repository import EmployeeRepository
from hrm.domain.auth.port.role_change_repository import RoleChangeRepository
from hrm.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from hrm.infrastructure.persistence.repository.employee import SQLEmployeeRepository
from hrm.infrastructure.persistence.repository.role_change import SQLRoleChangeRepository
from hrm.util.di.base import Provider
from hrm.util.di.scope import Scope


class PersistenceProvider(Provider):
    """Engine and session factory for the app; session and repositories per request."""

    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterator[AsyncEngine]:
        engine = create_db_engine(config.database)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # Commits when the request scope closes
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    employee_repo = provide(SQLEmployeeRepository, scope=Scope.UOW, provides=EmployeeRepository)
    role_change_repo = provide(
        SQLRoleChangeRepository, scope=Scope.UOW, provides=RoleChangeRepository
    )
