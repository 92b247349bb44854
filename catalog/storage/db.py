import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy import event
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import catalog.models  # noqa: F401  (registers tables on SQLModel.metadata)
from catalog.logging import logger
from catalog.settings import DatabaseSettings, app_settings


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _: Any) -> None:
    # SQLite ignores FOREIGN KEY clauses unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_from_settings(settings: DatabaseSettings) -> AsyncEngine:
    """
    Build an async engine for the configured database.

    Pool sizing applies to server databases only; in-memory SQLite gets a
    single shared connection so every session sees the same database.

    Args:
        settings: Database settings.

    Returns:
        AsyncEngine: The configured engine.
    """
    options: dict[str, Any] = {"echo": settings.ECHO}
    if settings.is_sqlite:
        if ":memory:" in settings.URL or settings.URL.endswith("://"):
            options["poolclass"] = StaticPool
    else:
        options.update(
            pool_size=settings.POOL_SIZE,
            max_overflow=settings.MAX_OVERFLOW,
            pool_recycle=settings.POOL_RECYCLE,
            pool_pre_ping=settings.POOL_PRE_PING,
        )

    engine = create_async_engine(settings.URL, **options)
    if settings.is_sqlite:
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class CatalogStore:
    """
    Explicitly owned handle to the entity store.

    One store is created per process and passed to the lifecycle layer;
    every catalog operation opens its own short-lived session from it.

    Attributes:
        engine: The async engine.
        settings: The database settings the engine was built from.
    """

    def __init__(self, settings: DatabaseSettings | None = None):
        """
        Initialize the store.

        Args:
            settings: Database settings. Defaults to app_settings.database.
        """
        self.settings = settings or app_settings.database
        self.engine: AsyncEngine = create_engine_from_settings(self.settings)
        self._session_factory = sessionmaker(
            self.engine, expire_on_commit=False, class_=AsyncSession
        )

    @classmethod
    def from_url(cls, url: str, **overrides: Any) -> "CatalogStore":
        """Create a store for a database URL, keeping other defaults."""
        settings = app_settings.database.model_copy(
            update={"URL": url, **overrides}
        )
        return cls(settings)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Open a session that commits on success and rolls back on error.

        Yields:
            AsyncSession: An asynchronous SQLModel session.
        """
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except IntegrityError as ex:
                await session.rollback()
                logger.error(f"Database integrity error: {ex}")
                raise
            except SQLAlchemyError as ex:
                await session.rollback()
                logger.error(f"Database error: {ex}")
                raise
            except Exception:
                await session.rollback()
                raise

    async def init_db(self) -> None:
        """Create all catalog tables that do not exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def wait_and_init_db(
        self,
        retry_interval: int | None = None,
        max_retries: int | None = None,
    ) -> None:
        """
        Wait until the database is available, then create the tables.

        Args:
            retry_interval: Time in seconds between retries.
                Defaults to settings.INIT_RETRY_INTERVAL
            max_retries: Maximum number of retries before giving up.
                Defaults to settings.INIT_MAX_RETRIES

        Raises:
            RuntimeError: If the database never became reachable.
        """
        if retry_interval is None:
            retry_interval = self.settings.INIT_RETRY_INTERVAL
        if max_retries is None:
            max_retries = self.settings.INIT_MAX_RETRIES
        for attempt in range(max_retries):
            try:
                async with self.engine.connect() as conn:
                    await conn.exec_driver_sql("SELECT 1")
                logger.info("Database is now ready.")
                await self.init_db()
                return
            except OperationalError:
                logger.warning(
                    f"Database not ready, retrying in {retry_interval} seconds... (Attempt {attempt + 1}/{max_retries})"
                )
                await asyncio.sleep(retry_interval)

        logger.error("Failed to connect to the database after multiple attempts.")
        raise RuntimeError("Database connection could not be established.")

    async def dispose(self) -> None:
        """Dispose of the connection pool on shutdown."""
        await self.engine.dispose()
