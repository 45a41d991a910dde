"""Alembic migrations for the HRM schema.

Alembic runs synchronously, so migrations are applied during application
startup before any request touches the async engine.
"""

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config as AlembicConfig
from sqlalchemy.engine import URL, make_url

logger = logging.getLogger(__name__)

# Migration scripts ship inside the package
MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def _sync_url(database_url: str) -> URL:
    url = make_url(database_url)
    # sqlite+aiosqlite -> sqlite, postgresql+asyncpg -> postgresql
    url = url.set(drivername=url.get_backend_name())
    if url.get_backend_name() == "sqlite" and url.database and url.database.startswith("~"):
        url = url.set(database=str(Path(url.database).expanduser()))
    return url


def to_sync_url(database_url: str) -> str:
    """Async database URL -> the sync driver URL Alembic can use."""
    return _sync_url(database_url).render_as_string(hide_password=False)


def get_alembic_config(database_url: str) -> AlembicConfig:
    """Create an Alembic config pointing at the packaged migrations."""
    config = AlembicConfig()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    # ConfigParser interpolation treats % specially
    config.set_main_option("sqlalchemy.url", to_sync_url(database_url).replace("%", "%%"))
    return config


def run_migrations(database_url: str) -> None:
    """Upgrade the database to the latest revision, creating the SQLite file if needed."""
    url = _sync_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    command.upgrade(get_alembic_config(database_url), "head")
    logger.info("Database migrations complete (%s)", url.render_as_string(hide_password=True))
