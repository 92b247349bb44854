"""
Commands for Author business operations.

Example:
    ```python
    from catalog.commands.author_commands import CreateAuthorCommand
    from catalog.commands.base import SubmissionInput
    from catalog.repositories.author_repository import AuthorRepository

    async with store.session() as session:
        command = CreateAuthorCommand(AuthorRepository(session))
        author = await command.execute(
            SubmissionInput(fields={"first_name": "Jane", "family_name": "Austen"})
        )
    ```
"""

from catalog.commands.base import BaseCommand, SubmissionInput
from catalog.exceptions import NotFoundError
from catalog.models.author import Author
from catalog.protocols import DependentsLookup, Repository
from catalog.relationships import EntityKind
from catalog.schemas.forms import AuthorForm, validate_form
from catalog.schemas.results import DeleteOutcome, DeleteResult


class GetAuthorCommand(BaseCommand[int, Author]):
    """Command to read one author."""

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, author_id: int) -> Author:
        """
        Execute command to read an author.

        Args:
            author_id: ID of the author.

        Returns:
            The author.

        Raises:
            NotFoundError: If author not found.
        """
        author = await self.repository.get_by_id(author_id)
        if not author:
            raise NotFoundError(f"Author with ID {author_id} not found")
        return author


class CreateAuthorCommand(BaseCommand[SubmissionInput, Author]):
    """
    Command to create a new author.

    Uses Repository[Author] protocol, as it only needs create().
    """

    def __init__(self, repository: Repository[Author]):
        """
        Initialize command with repository.

        Args:
            repository: Author repository for data access.
        """
        self.repository = repository

    async def execute(self, input_data: SubmissionInput) -> Author:
        """
        Execute command to create author.

        Args:
            input_data: Raw submitted author fields.

        Returns:
            Created author with generated ID.

        Raises:
            ValidationError: If any field rule fails.
        """
        form = validate_form(AuthorForm, input_data.fields)
        author = Author(**form.model_dump())
        return await self.repository.create(author)


class UpdateAuthorCommand(BaseCommand[SubmissionInput, Author]):
    """
    Command to overwrite an existing author.

    Validates that the author exists before validating the submission.
    """

    def __init__(self, repository: Repository[Author]):
        """
        Initialize command with repository.

        Args:
            repository: Author repository for data access.
        """
        self.repository = repository

    async def execute(self, input_data: SubmissionInput) -> Author:
        """
        Execute command to update author.

        Args:
            input_data: Author ID and raw submitted fields.

        Returns:
            Updated author.

        Raises:
            NotFoundError: If author not found.
            ValidationError: If any field rule fails.
        """
        author = await self.repository.get_by_id(input_data.id)
        if not author:
            raise NotFoundError(f"Author with ID {input_data.id} not found")

        form = validate_form(AuthorForm, input_data.fields)
        author.sqlmodel_update(form.model_dump())
        return await self.repository.update(author)


class DeleteAuthorCommand(BaseCommand[int, DeleteResult[Author]]):
    """
    Command to delete an author that has no books.

    A missing author is not an error: the result is MISSING so the caller
    can go back to the author list.
    """

    def __init__(
        self, repository: Repository[Author], resolver: DependentsLookup
    ):
        """
        Initialize command with repository and resolver.

        Args:
            repository: Author repository for data access.
            resolver: Lookup of the author's books.
        """
        self.repository = repository
        self.resolver = resolver

    async def execute(self, author_id: int) -> DeleteResult[Author]:
        """
        Execute command to delete author.

        Args:
            author_id: ID of author to delete.

        Returns:
            REMOVED, BLOCKED with the author's books, or MISSING.
        """
        author = await self.repository.get_by_id(author_id)
        if not author:
            return DeleteResult(outcome=DeleteOutcome.MISSING)

        books = await self.resolver.dependents_of(EntityKind.AUTHOR, author_id)
        if books:
            return DeleteResult(
                outcome=DeleteOutcome.BLOCKED, entity=author, dependents=list(books)
            )

        await self.repository.delete(author)
        return DeleteResult(outcome=DeleteOutcome.REMOVED, entity=author)
