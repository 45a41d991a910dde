"""Application configuration.

Values come from, highest priority first: keyword arguments, ``HRM_*``
environment variables (``__`` separates nested sections, e.g.
``HRM_AUTH__JWT__SECRET``), a ``.env`` file, and the YAML file named by
``HRM_CONFIG_FILE``.
"""

import logging
import os
import sys
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)
from typing_extensions import Self

DEFAULT_DATA_DIR = Path("~/.local/share/hrm")

# Chatty at INFO; capped at WARNING regardless of the configured level
QUIET_LOGGERS = ("httpx", "httpcore", "asyncio", "aiosqlite", "alembic")


class ServerConfig(BaseModel):
    name: str = "HRM"
    version: str = "0.1.0"
    description: str = "Role-based employee management API"


class DatabaseConfig(BaseModel):
    """Database connection settings.

    An empty ``url`` means "use hrm.db inside the data directory".
    """

    url: str = ""
    echo: bool = False
    auto_migrate: bool = True


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    file: Path | None = None  # stderr when unset

    @field_validator("level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


class JwtConfig(BaseModel):
    """Bearer token verification. ``secret`` must be set outside development."""

    secret: str = ""
    algorithm: str = "HS256"
    audience: str = "authenticated"
    access_token_expire_minutes: int = 60


class AuthConfig(BaseModel):
    jwt: JwtConfig = Field(default_factory=JwtConfig)


class Config(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HRM_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    data_dir: Path = DEFAULT_DATA_DIR
    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)

    @model_validator(mode="after")
    def derive_database_url(self) -> Self:
        if not self.database.url:
            db_file = self.data_dir.expanduser() / "hrm.db"
            self.database = self.database.model_copy(
                update={"url": f"sqlite+aiosqlite:///{db_file}"}
            )
        return self

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources = [init_settings, env_settings, dotenv_settings]
        config_file = os.environ.get("HRM_CONFIG_FILE")
        if config_file:
            # A missing file yields no values
            sources.append(YamlConfigSettingsSource(settings_cls, yaml_file=Path(config_file)))
        sources.append(file_secret_settings)
        return tuple(sources)


def configure_logging(config: LoggingConfig) -> None:
    """Install a single root handler (stderr or file) and quiet noisy libraries.

    Call once at startup, before other modules start logging.
    """
    handler: logging.Handler
    if config.file is None:
        handler = logging.StreamHandler(sys.stderr)
    else:
        log_path = config.file.expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path)

    logging.basicConfig(
        level=config.level,
        format=config.format,
        datefmt=config.date_format,
        handlers=[handler],
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s, file=%s", config.level, config.file
    )
