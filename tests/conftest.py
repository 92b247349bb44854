"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for the catalog store and the
catalog facade backed by an in-memory SQLite database.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from sqlmodel.ext.asyncio.session import AsyncSession

# Keep test runs away from any developer database and log file
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FILE_PATH", "logs/test-errors.log")

from catalog.services.catalog import Catalog  # noqa: E402
from catalog.settings import Settings  # noqa: E402
from catalog.storage.db import CatalogStore  # noqa: E402

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def store():
    """
    Provides a CatalogStore on a fresh in-memory database.

    Yields:
        CatalogStore: Store with all catalog tables created
    """
    store = CatalogStore.from_url(MEMORY_URL)
    await store.init_db()
    yield store
    await store.dispose()


@pytest.fixture
def catalog(store):
    """
    Provides a Catalog whose book writes are atomic.

    Returns:
        Catalog: Facade over the in-memory store
    """
    return Catalog(store, Settings(BOOK_GENRE_LINK_ATOMIC=True))


@pytest.fixture
def jane_austen():
    """Raw author submission."""
    return {"first_name": "Jane", "family_name": "Austen"}


@pytest.fixture
def book_fields():
    """
    Raw book submission without an author.

    Returns:
        dict: Book fields; callers add "author" and optionally "genre"
    """
    return {"title": "Emma", "summary": "A comedy of manners.", "isbn": "000"}


@pytest.fixture
def mock_session():
    """
    Provides a mock AsyncSession for testing.

    Returns:
        AsyncMock: Mocked database session
    """
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.rollback = AsyncMock()
    session.commit = AsyncMock()
    session.exec = AsyncMock()
    session.get = AsyncMock()
    session.delete = AsyncMock()
    return session
