"""
Repository for Book entity and its genre links.

The book's genre set lives in the book_genre_link table. It is always
written as a whole: `set_genres` replaces the full set rather than
merging into it.
"""

from typing import Iterable

from sqlalchemy import delete as sa_delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.logging import logger
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.models.genre import Genre
from catalog.models.links import BookGenreLink
from catalog.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """
    Repository for Book entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    author joins and genre link management.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Book repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Book)

    async def list_with_authors(self) -> list[tuple[Book, Author]]:
        """
        Get all books ordered by title, each paired with its author.

        Returns:
            (book, author) pairs.
        """
        stmt = (
            select(Book, Author)
            .join(Author, Book.author_id == Author.id)
            .order_by(Book.title)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_author(self, author_id: int) -> list[Book]:
        """Get the books written by an author, ordered by title."""
        return await self.get_all(Book.title, author_id=author_id)

    async def get_by_genre(self, genre_id: int) -> list[Book]:
        """
        Get the books linked to a genre, ordered by title.

        Args:
            genre_id: Genre primary key.

        Returns:
            Books carrying the genre.
        """
        stmt = (
            select(Book)
            .join(BookGenreLink, BookGenreLink.book_id == Book.id)
            .where(BookGenreLink.genre_id == genre_id)
            .order_by(Book.title)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_genres(self, book_id: int) -> list[Genre]:
        """Get the genres attached to a book, ordered by name."""
        stmt = (
            select(Genre)
            .join(BookGenreLink, BookGenreLink.genre_id == Genre.id)
            .where(BookGenreLink.book_id == book_id)
            .order_by(Genre.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def clear_genres(self, book_id: int) -> None:
        """Remove every genre link of a book."""
        await self.session.exec(  # type: ignore[call-overload]
            sa_delete(BookGenreLink).where(BookGenreLink.book_id == book_id)
        )

    async def set_genres(self, book_id: int, genre_ids: Iterable[int]) -> None:
        """
        Replace the full genre set of a book.

        A failed write is not rolled back here; the session owner ends the
        transaction, so a book committed before linking stays loaded.

        Args:
            book_id: Book primary key; the row must already exist.
            genre_ids: New genre set. Duplicates are ignored.

        Raises:
            SQLAlchemyError: If a link cannot be written (e.g. the genre
                no longer exists).
        """
        try:
            await self.clear_genres(book_id)
            for genre_id in dict.fromkeys(genre_ids):
                self.session.add(BookGenreLink(book_id=book_id, genre_id=genre_id))
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Error linking genres to Book {book_id}: {e}")
            raise

    async def delete(self, entity: Book) -> None:
        """
        Delete a book together with its genre links.

        Args:
            entity: The book to delete.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            await self.clear_genres(entity.id)  # type: ignore[arg-type]
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error unlinking genres of Book {entity.id}: {e}")
            raise
        await super().delete(entity)
