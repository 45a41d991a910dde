"""Async engine and session factory."""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from hrm.config import DatabaseConfig

logger = logging.getLogger(__name__)

_IN_MEMORY = (None, "", ":memory:")


def create_db_engine(config: DatabaseConfig) -> AsyncEngine:
    """Create the async engine for ``config.url``.

    SQLite file paths are expanded and their directory created. An in-memory
    SQLite database is pinned to one connection so every session sees the
    same tables.
    """
    url = make_url(config.url)
    kwargs: dict[str, Any] = {"echo": config.echo}

    if url.get_backend_name() == "sqlite":
        if url.database in _IN_MEMORY:
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}
        else:
            db_path = Path(url.database).expanduser().resolve()
            db_path.parent.mkdir(parents=True, exist_ok=True)
            url = url.set(database=str(db_path))
    else:
        kwargs["pool_pre_ping"] = True

    logger.debug("Creating database engine for %s", url.render_as_string(hide_password=True))
    return create_async_engine(url, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Objects stay readable after commit; response DTOs are built post-commit
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
