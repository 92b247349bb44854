"""
Result models returned by the catalog lifecycles.

These are the envelopes a presentation layer renders: which form to
redisplay, which records to list, whether a delete happened. Records are
carried as the table models themselves and are not revalidated.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from catalog.exceptions import FieldError
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.models.book_instance import BookInstance
from catalog.models.genre import Genre

EntityT = TypeVar("EntityT")


class DeleteOutcome(str, Enum):
    """What a delete request did."""

    REMOVED = "removed"
    # Dependents exist; the confirmation view is shown again
    BLOCKED = "blocked"
    # The record does not exist; the caller goes back to the listing
    MISSING = "missing"


class DeleteResult(BaseModel, Generic[EntityT]):  # type: ignore[misc]
    """
    Outcome of a delete request.

    Attributes:
        outcome: REMOVED, BLOCKED or MISSING.
        entity: The targeted record, None when MISSING.
        dependents: Records that blocked the delete.
    """

    outcome: DeleteOutcome
    entity: EntityT | None = None
    dependents: list[Any] = Field(default_factory=list)

    @property
    def removed(self) -> bool:
        return self.outcome is DeleteOutcome.REMOVED

    @property
    def blocked(self) -> bool:
        return self.outcome is DeleteOutcome.BLOCKED


class DeleteContext(BaseModel, Generic[EntityT]):  # type: ignore[misc]
    """Record plus its dependents, for a delete confirmation view."""

    entity: EntityT
    dependents: list[Any] = Field(default_factory=list)


class GenreChoice(BaseModel):  # type: ignore[misc]
    """A genre on the book form, checked when it is selected."""

    genre: Genre
    checked: bool = False


class FormContext(BaseModel, Generic[EntityT]):  # type: ignore[misc]
    """
    Everything a create/update form needs besides its own values.

    Attributes:
        entity: Record being edited, None on create.
        authors: Author pick-list (book forms).
        genres: Genre checkboxes (book forms).
        books: Book pick-list (copy forms).
        statuses: Allowed copy statuses (copy forms).
        selected_author: Pre-selected author id as text (book forms).
        selected_book: Pre-selected book id as text (copy forms).
    """

    entity: EntityT | None = None
    authors: list[Author] = Field(default_factory=list)
    genres: list[GenreChoice] = Field(default_factory=list)
    books: list[Book] = Field(default_factory=list)
    statuses: tuple[str, ...] = ()
    selected_author: str | None = None
    selected_book: str | None = None


class SubmitResult(BaseModel, Generic[EntityT]):  # type: ignore[misc]
    """
    Outcome of a create/update submission.

    On success `entity` is the persisted record. On rejection `entity` is
    None, `values` holds the sanitized submission for redisplay and
    `errors` one entry per failing field.

    Attributes:
        ok: Whether the submission was persisted.
        entity: Persisted record.
        values: Sanitized submitted values.
        errors: Field errors of a rejected submission.
        context: Form context to redisplay a rejected submission with.
        created: False when a genre create matched an existing genre.
    """

    ok: bool
    entity: EntityT | None = None
    values: dict[str, Any] = Field(default_factory=dict)
    errors: list[FieldError] = Field(default_factory=list)
    context: FormContext | None = None
    created: bool = True

    @property
    def messages(self) -> dict[str, str]:
        """Field name to message mapping of the errors."""
        return {error.field: error.message for error in self.errors}


class AuthorDetail(BaseModel):  # type: ignore[misc]
    author: Author
    books: list[Book] = Field(default_factory=list)


class BookDetail(BaseModel):  # type: ignore[misc]
    book: Book
    author: Author | None
    genres: list[Genre] = Field(default_factory=list)
    instances: list[BookInstance] = Field(default_factory=list)


class BookInstanceDetail(BaseModel):  # type: ignore[misc]
    instance: BookInstance
    book: Book | None = None


class GenreDetail(BaseModel):  # type: ignore[misc]
    genre: Genre
    books: list[Book] = Field(default_factory=list)


class BookListing(BaseModel):  # type: ignore[misc]
    """A book row of the book list, with its author."""

    book: Book
    author: Author


class BookInstanceListing(BaseModel):  # type: ignore[misc]
    """A copy row of the copy list, with its book (None when detached)."""

    instance: BookInstance
    book: Book | None = None


class CatalogSummary(BaseModel):  # type: ignore[misc]
    """Record counts shown on the catalog home page."""

    book_count: int = Field(ge=0)
    book_instance_count: int = Field(ge=0)
    book_instance_available_count: int = Field(ge=0)
    author_count: int = Field(ge=0)
    genre_count: int = Field(ge=0)
