"""
Cross-entity lookups for detail views and delete guards.

A record may only be deleted while nothing references it:

    author   <- books (book.author_id)
    genre    <- books (book_genre_link)
    book     <- copies (bookinstance.book_id)
    copy     <- nothing

Example:
    ```python
    async with store.session() as session:
        resolver = RelationshipResolver(session)
        blockers = await resolver.dependents_of(EntityKind.AUTHOR, 1)
    ```
"""

from enum import Enum
from typing import Sequence

from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models.book import Book
from catalog.models.book_instance import BookInstance
from catalog.models.genre import Genre
from catalog.repositories.book_instance_repository import BookInstanceRepository
from catalog.repositories.book_repository import BookRepository


class EntityKind(str, Enum):
    """Catalog record types."""

    AUTHOR = "author"
    BOOK = "book"
    BOOK_INSTANCE = "bookinstance"
    GENRE = "genre"


class RelationshipResolver:
    """
    Resolves the records related to an author, book or genre.

    All lookups run on the caller's session, so a delete guard and the
    delete it protects see the same transaction.

    Attributes:
        books: Book repository bound to the session.
        instances: BookInstance repository bound to the session.
    """

    def __init__(self, session: AsyncSession):
        self.books = BookRepository(session)
        self.instances = BookInstanceRepository(session)

    async def books_by_author(self, author_id: int) -> list[Book]:
        return await self.books.get_by_author(author_id)

    async def books_by_genre(self, genre_id: int) -> list[Book]:
        return await self.books.get_by_genre(genre_id)

    async def instances_by_book(self, book_id: int) -> list[BookInstance]:
        return await self.instances.get_by_book(book_id)

    async def genres_of_book(self, book_id: int) -> list[Genre]:
        return await self.books.get_genres(book_id)

    async def dependents_of(
        self, kind: EntityKind, id: int
    ) -> Sequence[Book | BookInstance]:
        """
        Get the records that block deletion of a record.

        Args:
            kind: Entity kind of the record.
            id: Primary key of the record.

        Returns:
            Dependent records; empty when deletion is allowed.
        """
        if kind is EntityKind.AUTHOR:
            return await self.books_by_author(id)
        if kind is EntityKind.GENRE:
            return await self.books_by_genre(id)
        if kind is EntityKind.BOOK:
            return await self.instances_by_book(id)
        return []
