"""Tests for Alembic migration helpers."""

from sqlalchemy import create_engine, inspect

from hrm.infrastructure.persistence.migrate import run_migrations, to_sync_url


class TestToSyncUrl:
    def test_strips_async_drivers(self) -> None:
        assert to_sync_url("sqlite+aiosqlite:////tmp/hrm.db") == "sqlite:////tmp/hrm.db"
        assert to_sync_url("postgresql+asyncpg://u@h/db") == "postgresql://u@h/db"

    def test_expands_home(self) -> None:
        url = to_sync_url("sqlite+aiosqlite:///~/hrm.db")

        assert "~" not in url
        assert url.startswith("sqlite:///")


class TestRunMigrations:
    def test_creates_schema(self, tmp_path) -> None:
        db_path = tmp_path / "nested" / "hrm.db"

        run_migrations(f"sqlite+aiosqlite:///{db_path}")

        engine = create_engine(f"sqlite:///{db_path}")
        try:
            tables = set(inspect(engine).get_table_names())
        finally:
            engine.dispose()
        assert {"employees", "role_changes", "alembic_version"} <= tables

    def test_is_idempotent(self, tmp_path) -> None:
        url = f"sqlite+aiosqlite:///{tmp_path / 'hrm.db'}"

        run_migrations(url)
        run_migrations(url)
