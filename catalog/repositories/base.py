"""
Shared data access for the catalog tables.

Authors, books, copies and genres are all read and written through a
BaseRepository bound to the operation's session. Writes are flushed, so a
new record has its id before the operation ends, but never committed:
CatalogStore.session() commits when the lifecycle operation returns.

Example:
    ```python
    async with store.session() as session:
        copies = BaseRepository(session, BookInstance)
        available = await copies.count(status=BookInstanceStatus.AVAILABLE)
    ```
"""

from typing import Any, Generic, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.logging import logger

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Lookups, counts and writes common to every catalog table.

    Entity repositories add their ordered listings and joins on top
    (authors by family name, books with their author, genre links).

    Type Parameters:
        T: The catalog table model.

    Attributes:
        session: The operation's session.
        model: The catalog table model.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    def _filtered(self, stmt: Any, filters: dict[str, Any]) -> Any:
        # A None filter value means "any"
        for key, value in filters.items():
            if value is not None:
                stmt = stmt.where(getattr(self.model, key) == value)
        return stmt

    async def get_by_id(self, id: int) -> T | None:
        """Get a record by id; None when it does not exist."""
        return await self.session.get(self.model, id)

    async def get_all(self, *order_by: Any, **filters: Any) -> list[T]:
        """
        Get the records matching column filters.

        Args:
            *order_by: Columns to sort by, e.g. Book.title.
            **filters: Column equality filters, e.g. author_id=3.

        Returns:
            Matching records in the requested order.

        Raises:
            SQLAlchemyError: If the query fails.
        """
        try:
            stmt = self._filtered(select(self.model), filters)
            if order_by:
                stmt = stmt.order_by(*order_by)
            result = await self.session.exec(stmt)
            return list(result.all())
        except SQLAlchemyError as e:
            logger.error(f"Error listing {self.model.__name__} records: {e}")
            raise

    async def count(self, **filters: Any) -> int:
        """
        Count the records matching column filters.

        Used by the catalog summary, e.g. count(status="Available").

        Raises:
            SQLAlchemyError: If the query fails.
        """
        try:
            stmt = self._filtered(
                select(func.count()).select_from(self.model), filters
            )
            result = await self.session.exec(stmt)
            return result.one()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model.__name__} records: {e}")
            raise

    async def create(self, entity: T) -> T:
        """
        Insert a validated record.

        The row is flushed and refreshed, so the store-assigned id can be
        used right away (a book's genre links need it).

        Args:
            entity: New author, book, copy or genre.

        Returns:
            The same record with its id set.

        Raises:
            SQLAlchemyError: If the insert fails, e.g. a CHECK or foreign
                key constraint rejects it.
        """
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error creating {self.model.__name__}: {e}")
            raise

    async def update(self, entity: T) -> T:
        """
        Write back a record whose fields were overwritten by a submission.

        Raises:
            SQLAlchemyError: If the update fails.
        """
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error updating {self.model.__name__}: {e}")
            raise

    async def delete(self, entity: T) -> None:
        """
        Remove a record.

        Callers check dependents first; the foreign keys still reject
        removing an author or book that is referenced.

        Raises:
            SQLAlchemyError: If the delete fails.
        """
        try:
            await self.session.delete(entity)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting {self.model.__name__}: {e}")
            raise

    async def exists(self, **filters: Any) -> bool:
        """Check whether any record matches the column filters."""
        try:
            stmt = self._filtered(select(self.model), filters)
            result = await self.session.exec(stmt)
            return result.first() is not None
        except SQLAlchemyError as e:
            logger.error(
                f"Error checking for {self.model.__name__} records: {e}"
            )
            raise
