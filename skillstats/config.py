"""Configuration management for the skill stats module."""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import sqlalchemy as sa
import yaml
from sqlalchemy.engine import Engine

from skillstats.exceptions import ConfigError
from skillstats.skills.visibility import VisibilitySettings

logger = logging.getLogger(__name__)


@dataclass
class DatabaseConfig:
    """Database configuration.

    ``url`` wins when set; otherwise a PostgreSQL URL is assembled from the
    individual fields.
    """

    url: str = ""
    host: str = "localhost"
    port: int = 5432
    database: str = "game"
    user: str = "game"
    password: str = "game"
    table_prefix: str = ""
    echo: bool = False

    @property
    def sqlalchemy_url(self) -> str:
        """Synchronous SQLAlchemy connection URL."""
        if self.url:
            return self.url
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )

    def create_engine(self) -> Engine:
        return sa.create_engine(self.sqlalchemy_url, echo=self.echo)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class SkillsConfig:
    """Skills section: panel header and per-skill visibility."""

    header: str = "Skills"
    # skill key (or enable_<key>) -> bool; unlisted skills stay visible
    visibility: dict[str, Any] = field(default_factory=dict)

    def visibility_settings(self):
        return VisibilitySettings.from_mapping(self.visibility)


@dataclass
class Config:
    """Main configuration container."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    skills: SkillsConfig = field(default_factory=SkillsConfig)


def _load_section(cls, name: str, data: Any):
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ConfigError(f"Section '{name}' must be a mapping", section=name)
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(
            f"Unknown keys in section '{name}': {', '.join(unknown)}",
            section=name,
            errors=unknown,
        )
    return cls(**data)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. Defaults to config/default.yaml

    Returns:
        Populated Config dataclass
    """
    if config_path is None:
        candidates = [
            Path("config/default.yaml"),
            Path(__file__).parent.parent / "config" / "default.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                config_path = str(candidate)
                break

    config = Config()

    if config_path and Path(config_path).exists():
        with open(config_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if data:
            if not isinstance(data, dict):
                raise ConfigError(f"Config file {config_path} must contain a mapping")
            if "database" in data:
                config.database = _load_section(DatabaseConfig, "database", data["database"])
            if "logging" in data:
                config.logging = _load_section(LoggingConfig, "logging", data["logging"])
            if "skills" in data:
                config.skills = _load_section(SkillsConfig, "skills", data["skills"])

    # Environment variable overrides
    if os.environ.get("SKILLSTATS_DB_URL"):
        config.database.url = os.environ["SKILLSTATS_DB_URL"]
    if os.environ.get("SKILLSTATS_DB_HOST"):
        config.database.host = os.environ["SKILLSTATS_DB_HOST"]
    if os.environ.get("SKILLSTATS_DB_PORT"):
        try:
            config.database.port = int(os.environ["SKILLSTATS_DB_PORT"])
        except ValueError as e:
            raise ConfigError(
                f"SKILLSTATS_DB_PORT must be an integer, got {os.environ['SKILLSTATS_DB_PORT']!r}",
                section="database",
            ) from e
    if os.environ.get("SKILLSTATS_DB_NAME"):
        config.database.database = os.environ["SKILLSTATS_DB_NAME"]
    if os.environ.get("SKILLSTATS_DB_USER"):
        config.database.user = os.environ["SKILLSTATS_DB_USER"]
    if os.environ.get("SKILLSTATS_DB_PASSWORD"):
        config.database.password = os.environ["SKILLSTATS_DB_PASSWORD"]
    if os.environ.get("SKILLSTATS_TABLE_PREFIX"):
        config.database.table_prefix = os.environ["SKILLSTATS_TABLE_PREFIX"]
    if os.environ.get("SKILLSTATS_LOG_LEVEL"):
        config.logging.level = os.environ["SKILLSTATS_LOG_LEVEL"]

    return config


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure logging based on configuration.

    Args:
        config: Logging configuration
    """
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if config.file:
        log_path = Path(config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.file))

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("textual").setLevel(logging.WARNING)

    logger.info(f"Logging configured at level {config.level}")
