"""Settings module with nested configuration groups."""

import os
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment types."""

    DEV = "dev"
    STAGING = "staging"
    PRODUCTION = "production"


class DatabaseSettings(BaseModel):  # type: ignore[misc]
    """Database configuration."""

    URL: str
    ECHO: bool = False
    POOL_SIZE: int = 20
    MAX_OVERFLOW: int = 10
    POOL_RECYCLE: int = 3600
    POOL_PRE_PING: bool = True
    INIT_RETRY_INTERVAL: int = 2
    INIT_MAX_RETRIES: int = 5

    @property
    def is_sqlite(self) -> bool:
        """Check if the URL points at a SQLite database."""
        return self.URL.startswith("sqlite")


class LoggingSettings(BaseModel):  # type: ignore[misc]
    """Logging configuration."""

    FILE_PATH: str = "logs/logging_errors.log"
    LEVEL: str = "INFO"
    CONSOLE_FORMAT: Literal["human", "json"] = "human"


class Settings(BaseSettings):  # type: ignore[misc]
    """
    Main settings class.

    Flat env vars like DB_POOL_SIZE are grouped into nested models through
    the `database` and `logging` properties.
    """

    model_config = SettingsConfigDict(case_sensitive=True)

    ENV: Environment = Environment.DEV

    # Database settings
    DATABASE_URL: str = "sqlite+aiosqlite:///./catalog.db"
    DB_ECHO: bool = False
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True
    DB_INIT_RETRY_INTERVAL: int = 2
    DB_INIT_MAX_RETRIES: int = 5

    # Logging settings
    LOG_FILE_PATH: str = "logs/logging_errors.log"
    LOG_LEVEL: str = "INFO"
    LOG_CONSOLE_FORMAT: Literal["human", "json"] = "human"

    # Catalog behavior
    CATALOG_URL_PREFIX: str = "/catalog"
    # Insert a book and attach its genres in one transaction. When False
    # the book row is committed before genres are linked.
    BOOK_GENRE_LINK_ATOMIC: bool = True

    def __init__(self, **kwargs: Any) -> None:
        """Initialize settings with environment-specific defaults."""
        super().__init__(**kwargs)
        self._apply_environment_defaults()

    def _apply_environment_defaults(self) -> None:
        """Apply environment-specific logging defaults."""
        if self.ENV == Environment.PRODUCTION:
            if os.getenv("LOG_CONSOLE_FORMAT") is None:
                self.LOG_CONSOLE_FORMAT = "json"
            if os.getenv("LOG_LEVEL") is None:
                self.LOG_LEVEL = "WARNING"

        elif self.ENV == Environment.STAGING:
            if os.getenv("LOG_CONSOLE_FORMAT") is None:
                self.LOG_CONSOLE_FORMAT = "json"
            if os.getenv("LOG_LEVEL") is None:
                self.LOG_LEVEL = "INFO"

        else:  # Environment.DEV
            if os.getenv("LOG_CONSOLE_FORMAT") is None:
                self.LOG_CONSOLE_FORMAT = "human"
            if os.getenv("LOG_LEVEL") is None:
                self.LOG_LEVEL = "DEBUG"

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings as nested model."""
        return DatabaseSettings(
            URL=self.DATABASE_URL,
            ECHO=self.DB_ECHO,
            POOL_SIZE=self.DB_POOL_SIZE,
            MAX_OVERFLOW=self.DB_MAX_OVERFLOW,
            POOL_RECYCLE=self.DB_POOL_RECYCLE,
            POOL_PRE_PING=self.DB_POOL_PRE_PING,
            INIT_RETRY_INTERVAL=self.DB_INIT_RETRY_INTERVAL,
            INIT_MAX_RETRIES=self.DB_INIT_MAX_RETRIES,
        )

    @property
    def logging(self) -> LoggingSettings:
        """Get logging settings as nested model."""
        return LoggingSettings(
            FILE_PATH=self.LOG_FILE_PATH,
            LEVEL=self.LOG_LEVEL,
            CONSOLE_FORMAT=self.LOG_CONSOLE_FORMAT,
        )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENV == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENV == Environment.DEV


app_settings = Settings()

__all__ = [
    "Settings",
    "app_settings",
    "Environment",
    "DatabaseSettings",
    "LoggingSettings",
]
