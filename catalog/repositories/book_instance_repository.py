"""Repository for BookInstance entity (physical copies)."""

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models.book import Book
from catalog.models.book_instance import BookInstance, BookInstanceStatus
from catalog.repositories.base import BaseRepository


class BookInstanceRepository(BaseRepository[BookInstance]):
    """
    Repository for BookInstance entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    book joins and status counts.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize BookInstance repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, BookInstance)

    async def list_with_books(self) -> list[tuple[BookInstance, Book | None]]:
        """
        Get all copies, each paired with its book.

        Copies without a book are included with None in place of the book.

        Returns:
            (instance, book) pairs ordered by instance id.
        """
        stmt = (
            select(BookInstance, Book)
            .outerjoin(Book, BookInstance.book_id == Book.id)
            .order_by(BookInstance.id)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_book(self, book_id: int) -> list[BookInstance]:
        """Get the copies of a book."""
        return await self.get_all(BookInstance.id, book_id=book_id)

    async def count_by_status(self, status: BookInstanceStatus) -> int:
        """Count copies with the given status."""
        return await self.count(status=status)
