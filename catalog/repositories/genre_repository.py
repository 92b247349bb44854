"""Repository for Genre entity with specialized query methods."""

from typing import Iterable

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models.genre import Genre
from catalog.repositories.base import BaseRepository


class GenreRepository(BaseRepository[Genre]):
    """
    Repository for Genre entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    Genre-specific query methods.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Genre repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Genre)

    async def get_by_name(self, name: str) -> Genre | None:
        """
        Get genre by exact (case-sensitive) name match.

        Args:
            name: Exact genre name to search for.

        Returns:
            Genre if found, None otherwise.
        """
        stmt = select(Genre).where(Genre.name == name)
        result = await self.session.exec(stmt)
        return result.first()

    async def get_many(self, ids: Iterable[int]) -> list[Genre]:
        """
        Get the genres with the given ids; unknown ids are skipped.

        Args:
            ids: Genre primary keys.

        Returns:
            Matching genres ordered by name.
        """
        ids = list(ids)
        if not ids:
            return []
        stmt = select(Genre).where(col(Genre.id).in_(ids)).order_by(Genre.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_ordered(self) -> list[Genre]:
        """Get all genres ordered by name."""
        return await self.get_all(Genre.name)
