from typing import TYPE_CHECKING, Optional
from dataclasses import dataclass, field

import yaml

if TYPE_CHECKING:
    from players_api.web.app import Application


@dataclass
class DatabaseConfig:
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "postgres"
    database: str = "players"
    # overrides the PostgreSQL url assembled from the fields above
    url: Optional[str] = None
    echo: bool = False


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class Config:
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_from_yaml(config_path: str) -> Config:
    with open(config_path, "r") as f:
        raw_config = yaml.safe_load(f) or {}

    return Config(database=DatabaseConfig(**raw_config.get("database", {})),
                  logging=LoggingConfig(**raw_config.get("logging", {})))


def setup_config(app: "Application", config_path: str) -> None:
    app.config = config_from_yaml(config_path)
