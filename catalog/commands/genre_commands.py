"""
Commands for Genre business operations.

Genre names are unique. Creating a genre whose exact name already exists
returns the existing genre instead of inserting a second row; renaming a
genre to another genre's name is a conflict.
"""

from catalog.commands.base import BaseCommand, SubmissionInput
from catalog.exceptions import ConflictError, NotFoundError
from catalog.models.genre import Genre
from catalog.protocols import DependentsLookup, Repository
from catalog.relationships import EntityKind
from catalog.repositories.genre_repository import GenreRepository
from catalog.schemas.forms import GenreForm, validate_form
from catalog.schemas.results import DeleteOutcome, DeleteResult


class GetGenreCommand(BaseCommand[int, Genre]):
    """Command to read one genre."""

    def __init__(self, repository: Repository[Genre]):
        self.repository = repository

    async def execute(self, genre_id: int) -> Genre:
        """
        Execute command to read a genre.

        Raises:
            NotFoundError: If genre not found.
        """
        genre = await self.repository.get_by_id(genre_id)
        if not genre:
            raise NotFoundError(f"Genre with ID {genre_id} not found")
        return genre


class CreateGenreCommand(BaseCommand[SubmissionInput, tuple[Genre, bool]]):
    """
    Command to create a genre, or find it if the name is taken.

    Note: Uses concrete GenreRepository type because it requires the
    get_by_name() extension method.
    """

    def __init__(self, repository: GenreRepository):
        """
        Initialize command with repository.

        Args:
            repository: Genre repository for data access.
        """
        self.repository = repository

    async def execute(self, input_data: SubmissionInput) -> tuple[Genre, bool]:
        """
        Execute command to create genre.

        Args:
            input_data: Raw submitted genre fields.

        Returns:
            The genre and whether it was inserted (False when an existing
            genre with the same name was returned).

        Raises:
            ValidationError: If the name is too short.

        Example:
            ```python
            genre, created = await command.execute(
                SubmissionInput(fields={"name": "Fantasy"})
            )
            ```
        """
        form = validate_form(GenreForm, input_data.fields)

        existing = await self.repository.get_by_name(form.name)
        if existing:
            return existing, False

        genre = await self.repository.create(Genre(name=form.name))
        return genre, True


class UpdateGenreCommand(BaseCommand[SubmissionInput, Genre]):
    """
    Command to rename a genre.

    Validates that the genre exists and the new name doesn't conflict.
    """

    def __init__(self, repository: GenreRepository):
        """
        Initialize command with repository.

        Args:
            repository: Genre repository for data access.
        """
        self.repository = repository

    async def execute(self, input_data: SubmissionInput) -> Genre:
        """
        Execute command to update genre.

        Args:
            input_data: Genre ID and raw submitted fields.

        Returns:
            Updated genre.

        Raises:
            NotFoundError: If genre not found.
            ValidationError: If the name is too short.
            ConflictError: If name belongs to another genre.
        """
        genre = await self.repository.get_by_id(input_data.id)
        if not genre:
            raise NotFoundError(f"Genre with ID {input_data.id} not found")

        form = validate_form(GenreForm, input_data.fields)

        existing = await self.repository.get_by_name(form.name)
        if existing and existing.id != input_data.id:
            raise ConflictError(f"Genre with name '{form.name}' already exists")

        genre.name = form.name
        return await self.repository.update(genre)


class DeleteGenreCommand(BaseCommand[int, DeleteResult[Genre]]):
    """Command to delete a genre that no book carries."""

    def __init__(self, repository: Repository[Genre], resolver: DependentsLookup):
        self.repository = repository
        self.resolver = resolver

    async def execute(self, genre_id: int) -> DeleteResult[Genre]:
        """
        Execute command to delete genre.

        Args:
            genre_id: ID of genre to delete.

        Returns:
            REMOVED, BLOCKED with the genre's books, or MISSING.
        """
        genre = await self.repository.get_by_id(genre_id)
        if not genre:
            return DeleteResult(outcome=DeleteOutcome.MISSING)

        books = await self.resolver.dependents_of(EntityKind.GENRE, genre_id)
        if books:
            return DeleteResult(
                outcome=DeleteOutcome.BLOCKED, entity=genre, dependents=list(books)
            )

        await self.repository.delete(genre)
        return DeleteResult(outcome=DeleteOutcome.REMOVED, entity=genre)
