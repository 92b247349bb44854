"""
Commands for Book business operations.

A book write has two phases: the book row is written first (so it has an
id), then its genre set is replaced. By default both phases share one
transaction. When the lifecycle passes a `commit` callable, the row is
committed before linking and a linking failure raises PartialWriteError;
the committed row is kept.

Example:
    ```python
    async with store.session() as session:
        command = CreateBookCommand(
            BookRepository(session),
            AuthorRepository(session),
            GenreRepository(session),
        )
        book = await command.execute(
            SubmissionInput(
                fields={
                    "title": "Emma",
                    "author": "1",
                    "summary": "...",
                    "isbn": "000",
                    "genre": ["2", "5"],
                }
            )
        )
    ```
"""

from typing import Awaitable, Callable

from sqlalchemy.exc import SQLAlchemyError

from catalog.commands.base import BaseCommand, SubmissionInput, parse_reference
from catalog.exceptions import (
    FieldError,
    NotFoundError,
    PartialWriteError,
    ValidationError,
)
from catalog.logging import logger
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.protocols import DependentsLookup, Repository
from catalog.relationships import EntityKind
from catalog.repositories.book_repository import BookRepository
from catalog.repositories.genre_repository import GenreRepository
from catalog.schemas.forms import BookForm, validate_form
from catalog.schemas.results import DeleteOutcome, DeleteResult

Commit = Callable[[], Awaitable[None]]


class GetBookCommand(BaseCommand[int, Book]):
    """Command to read one book."""

    def __init__(self, repository: Repository[Book]):
        self.repository = repository

    async def execute(self, book_id: int) -> Book:
        """
        Execute command to read a book.

        Raises:
            NotFoundError: If book not found.
        """
        book = await self.repository.get_by_id(book_id)
        if not book:
            raise NotFoundError(f"Book with ID {book_id} not found")
        return book


class _BookWriteCommand(BaseCommand[SubmissionInput, Book]):
    """
    Shared validation and two-phase write of create/update.

    Note: Uses concrete BookRepository and GenreRepository types because
    it requires set_genres() and get_many().
    """

    def __init__(
        self,
        books: BookRepository,
        authors: Repository[Author],
        genres: GenreRepository,
        commit: Commit | None = None,
    ):
        """
        Initialize command with repositories.

        Args:
            books: Book repository for data access.
            authors: Author repository, to check the submitted author.
            genres: Genre repository, to check the submitted genres.
            commit: Commits the book row before genres are linked. None
                keeps both phases in the caller's transaction.
        """
        self.books = books
        self.authors = authors
        self.genres = genres
        self.commit = commit

    async def _validate(self, input_data: SubmissionInput) -> tuple[BookForm, int, list[int]]:
        """
        Validate the submission and resolve its author and genre ids.

        Raises:
            ValidationError: If a field rule fails or a referenced author
                or genre does not exist.
        """
        form = validate_form(BookForm, input_data.fields)
        errors = []

        author_id = parse_reference(form.author)
        if author_id is None or not await self.authors.get_by_id(author_id):
            errors.append(
                FieldError(field="author", message="Author does not exist.")
            )

        genre_ids = [parse_reference(value) for value in form.genre]
        if None in genre_ids:
            errors.append(
                FieldError(field="genre", message="Selected genre does not exist.")
            )
        else:
            found = await self.genres.get_many(genre_ids)  # type: ignore[arg-type]
            if len(found) != len(set(genre_ids)):
                errors.append(
                    FieldError(field="genre", message="Selected genre does not exist.")
                )

        if errors:
            raise ValidationError(errors, form.model_dump())
        return form, author_id, genre_ids  # type: ignore[return-value]

    async def _link_genres(self, book: Book, genre_ids: list[int]) -> None:
        book_id: int = book.id  # type: ignore[assignment]
        if self.commit is None:
            await self.books.set_genres(book_id, genre_ids)
            return

        await self.commit()
        # Only book_id is used from here on; a failed link write leaves
        # the session needing a rollback
        try:
            await self.books.set_genres(book_id, genre_ids)
        except SQLAlchemyError as e:
            logger.error(
                f"Book {book_id} was saved but its genres could not be linked: {e}"
            )
            raise PartialWriteError(
                f"Book {book_id} was saved without its genres", book_id
            ) from e


class CreateBookCommand(_BookWriteCommand):
    """Command to create a book and attach its genres."""

    async def execute(self, input_data: SubmissionInput) -> Book:
        """
        Execute command to create book.

        Args:
            input_data: Raw submitted book fields.

        Returns:
            Created book with generated ID.

        Raises:
            ValidationError: If a field rule or reference check fails.
            PartialWriteError: If linking failed after the row was committed.
        """
        form, author_id, genre_ids = await self._validate(input_data)

        book = await self.books.create(
            Book(
                title=form.title,
                summary=form.summary,
                isbn=form.isbn,
                author_id=author_id,
            )
        )
        await self._link_genres(book, genre_ids)
        return book


class UpdateBookCommand(_BookWriteCommand):
    """Command to overwrite a book and replace its full genre set."""

    async def execute(self, input_data: SubmissionInput) -> Book:
        """
        Execute command to update book.

        Args:
            input_data: Book ID and raw submitted fields.

        Returns:
            Updated book, same ID.

        Raises:
            NotFoundError: If book not found.
            ValidationError: If a field rule or reference check fails.
            PartialWriteError: If linking failed after the row was committed.
        """
        book = await self.books.get_by_id(input_data.id)  # type: ignore[arg-type]
        if not book:
            raise NotFoundError(f"Book with ID {input_data.id} not found")

        form, author_id, genre_ids = await self._validate(input_data)

        book.title = form.title
        book.summary = form.summary
        book.isbn = form.isbn
        book.author_id = author_id
        book = await self.books.update(book)
        await self._link_genres(book, genre_ids)
        return book


class DeleteBookCommand(BaseCommand[int, DeleteResult[Book]]):
    """Command to delete a book that has no copies."""

    def __init__(self, repository: Repository[Book], resolver: DependentsLookup):
        """
        Initialize command with repository and resolver.

        Args:
            repository: Book repository for data access.
            resolver: Lookup of the book's copies.
        """
        self.repository = repository
        self.resolver = resolver

    async def execute(self, book_id: int) -> DeleteResult[Book]:
        """
        Execute command to delete book.

        The book's genre links are removed with it.

        Args:
            book_id: ID of book to delete.

        Returns:
            REMOVED, BLOCKED with the book's copies, or MISSING.
        """
        book = await self.repository.get_by_id(book_id)
        if not book:
            return DeleteResult(outcome=DeleteOutcome.MISSING)

        instances = await self.resolver.dependents_of(EntityKind.BOOK, book_id)
        if instances:
            return DeleteResult(
                outcome=DeleteOutcome.BLOCKED, entity=book, dependents=list(instances)
            )

        await self.repository.delete(book)
        return DeleteResult(outcome=DeleteOutcome.REMOVED, entity=book)
