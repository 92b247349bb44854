"""
Book flows.

Book writes are two-phase (row, then genre links). With
BOOK_GENRE_LINK_ATOMIC enabled both phases share the operation's
transaction; disabled, the row is committed first and a linking failure
raises PartialWriteError with the saved book's id.
"""

from typing import Any, Mapping

from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.commands.book_commands import (
    Commit,
    CreateBookCommand,
    DeleteBookCommand,
    GetBookCommand,
    UpdateBookCommand,
)
from catalog.models.book import Book
from catalog.relationships import EntityKind, RelationshipResolver
from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.repositories.genre_repository import GenreRepository
from catalog.schemas.results import BookDetail, BookListing, FormContext, GenreChoice
from catalog.services.base import EntityLifecycle


class BookLifecycle(EntityLifecycle[Book]):
    """Book flows; a book with copies cannot be deleted."""

    KIND = EntityKind.BOOK
    MODEL = Book

    def _commit(self, session: AsyncSession) -> Commit | None:
        if self.settings.BOOK_GENRE_LINK_ATOMIC:
            return None
        return session.commit

    def _get_command(self, session: AsyncSession) -> GetBookCommand:
        return GetBookCommand(BookRepository(session))

    def _create_command(self, session: AsyncSession) -> CreateBookCommand:
        return CreateBookCommand(
            BookRepository(session),
            AuthorRepository(session),
            GenreRepository(session),
            commit=self._commit(session),
        )

    def _update_command(self, session: AsyncSession) -> UpdateBookCommand:
        return UpdateBookCommand(
            BookRepository(session),
            AuthorRepository(session),
            GenreRepository(session),
            commit=self._commit(session),
        )

    def _delete_command(self, session: AsyncSession) -> DeleteBookCommand:
        return DeleteBookCommand(
            BookRepository(session), RelationshipResolver(session)
        )

    async def _list(self, session: AsyncSession) -> list[BookListing]:
        rows = await BookRepository(session).list_with_authors()
        return [BookListing(book=book, author=author) for book, author in rows]

    async def _detail(self, session: AsyncSession, entity: Book) -> BookDetail:
        resolver = RelationshipResolver(session)
        return BookDetail(
            book=entity,
            author=await AuthorRepository(session).get_by_id(entity.author_id),
            genres=await resolver.genres_of_book(entity.id),  # type: ignore[arg-type]
            instances=await resolver.instances_by_book(entity.id),  # type: ignore[arg-type]
        )

    async def _form_context(
        self,
        session: AsyncSession,
        entity: Book | None = None,
        values: Mapping[str, Any] | None = None,
    ) -> FormContext[Book]:
        """
        Author pick-list and genre checkboxes.

        The pre-selection comes from the rejected submission when there is
        one, else from the book being edited.
        """
        authors = await AuthorRepository(session).list_ordered()
        genres = await GenreRepository(session).list_ordered()

        selected_author: str | None = None
        selected_genres: set[str] = set()
        if values is not None:
            selected_author = values.get("author") or None
            selected_genres = set(values.get("genre") or ())
        elif entity is not None:
            selected_author = str(entity.author_id)
            linked = await BookRepository(session).get_genres(entity.id)  # type: ignore[arg-type]
            selected_genres = {str(genre.id) for genre in linked}

        return FormContext(
            entity=entity,
            authors=authors,
            genres=[
                GenreChoice(genre=genre, checked=str(genre.id) in selected_genres)
                for genre in genres
            ],
            selected_author=selected_author,
        )
