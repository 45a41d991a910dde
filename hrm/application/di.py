from dishka import AsyncContainer, from_context, make_async_container

from hrm.config import Config
from hrm.domain.auth.util.di import AuthProvider
from hrm.infrastructure.persistence import PersistenceProvider
from hrm.util.di.base import Provider
from hrm.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> AsyncContainer:
    """Root container with every HRM provider; ``config`` is read from the environment if omitted."""
    return make_async_container(
        ConfigProvider(),
        PersistenceProvider(),
        AuthProvider(),
        context={Config: config or Config()},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
