"""Tests for settings and their environment-specific defaults."""

import pytest

from catalog.settings import DatabaseSettings, Environment, Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("ENV", "LOG_LEVEL", "LOG_CONSOLE_FORMAT", "BOOK_GENRE_LINK_ATOMIC"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Test Settings defaults and grouping."""

    def test_dev_defaults(self, clean_env):
        settings = Settings()

        assert settings.ENV is Environment.DEV
        assert settings.is_development
        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_CONSOLE_FORMAT == "human"
        assert settings.BOOK_GENRE_LINK_ATOMIC is True
        assert settings.CATALOG_URL_PREFIX == "/catalog"

    def test_production_defaults(self, clean_env):
        settings = Settings(ENV=Environment.PRODUCTION)

        assert settings.is_production
        assert settings.LOG_LEVEL == "WARNING"
        assert settings.LOG_CONSOLE_FORMAT == "json"

    def test_explicit_env_var_wins(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "ERROR")
        clean_env.setenv("ENV", "staging")

        settings = Settings()

        assert settings.ENV is Environment.STAGING
        assert settings.LOG_LEVEL == "ERROR"
        assert settings.LOG_CONSOLE_FORMAT == "json"

    def test_link_mode_from_env(self, clean_env):
        clean_env.setenv("BOOK_GENRE_LINK_ATOMIC", "false")

        assert Settings().BOOK_GENRE_LINK_ATOMIC is False

    def test_database_group(self, clean_env):
        settings = Settings(
            DATABASE_URL="postgresql+asyncpg://u:p@db/catalog", DB_POOL_SIZE=5
        )

        database = settings.database

        assert isinstance(database, DatabaseSettings)
        assert database.URL == "postgresql+asyncpg://u:p@db/catalog"
        assert database.POOL_SIZE == 5
        assert database.is_sqlite is False

    def test_logging_group(self, clean_env):
        settings = Settings(LOG_FILE_PATH="x.log")

        assert settings.logging.FILE_PATH == "x.log"
        assert settings.logging.LEVEL == settings.LOG_LEVEL
