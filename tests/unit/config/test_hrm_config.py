"""Tests for Config Pydantic Settings and logging setup."""

import logging

import pytest

from hrm.config import Config, LoggingConfig, configure_logging


class TestDatabaseUrlDerivation:
    def test_database_url_derived_from_data_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HRM_DATA_DIR", "/data")
        monkeypatch.delenv("HRM_DATABASE__URL", raising=False)

        config = Config()

        assert config.database.url == "sqlite+aiosqlite:////data/hrm.db"

    def test_explicit_database_url_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HRM_DATA_DIR", "/data")
        monkeypatch.setenv("HRM_DATABASE__URL", "sqlite+aiosqlite:///:memory:")

        config = Config()

        assert config.database.url == "sqlite+aiosqlite:///:memory:"

    def test_derivation_keeps_other_database_settings(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("HRM_DATABASE__URL", raising=False)
        monkeypatch.setenv("HRM_DATABASE__AUTO_MIGRATE", "false")
        monkeypatch.setenv("HRM_DATABASE__ECHO", "true")

        config = Config()

        assert config.database.auto_migrate is False
        assert config.database.echo is True


class TestEnvironmentOverrides:
    def test_env_prefix_is_hrm(self) -> None:
        assert Config.model_config.get("env_prefix") == "HRM_"

    def test_nested_jwt_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HRM_AUTH__JWT__SECRET", "s3cret")
        monkeypatch.setenv("HRM_AUTH__JWT__ACCESS_TOKEN_EXPIRE_MINUTES", "5")

        config = Config()

        assert config.auth.jwt.secret == "s3cret"
        assert config.auth.jwt.access_token_expire_minutes == 5
        assert config.auth.jwt.algorithm == "HS256"


class TestYamlConfig:
    def test_loads_yaml_file(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "hrm.yaml"
        config_file.write_text("server:\n  name: Acme HR\nlogging:\n  level: DEBUG\n")
        monkeypatch.setenv("HRM_CONFIG_FILE", str(config_file))

        config = Config()

        assert config.server.name == "Acme HR"
        assert config.logging.level == "DEBUG"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "hrm.yaml"
        config_file.write_text("server:\n  name: Acme HR\n")
        monkeypatch.setenv("HRM_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("HRM_SERVER__NAME", "From Env")

        assert Config().server.name == "From Env"

    def test_missing_yaml_file_is_ignored(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HRM_CONFIG_FILE", str(tmp_path / "missing.yaml"))

        assert Config().server.name == "HRM"


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_console_handler_by_default(self) -> None:
        configure_logging(LoggingConfig(level="warning"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler_when_log_file_set(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "hrm.log"

        configure_logging(LoggingConfig(level="INFO", file=log_file))

        root = logging.getLogger()
        assert isinstance(root.handlers[0], logging.FileHandler)
        assert log_file.parent.is_dir()
        root.handlers[0].close()

    def test_quiets_third_party_loggers(self) -> None:
        configure_logging(LoggingConfig(level="DEBUG"))

        assert logging.getLogger("httpx").level == logging.WARNING

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(ValueError):
            LoggingConfig(level="chatty")

    def test_log_file_from_env(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HRM_LOGGING__FILE", str(tmp_path / "hrm.log"))

        assert Config().logging.file == tmp_path / "hrm.log"
