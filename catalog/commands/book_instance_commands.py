"""
Commands for BookInstance (physical copy) business operations.

The submitted status is stored as given; the status column rejects values
outside Available, Maintenance, Loaned and Reserved. An empty status means
Maintenance and an empty due date means today.
"""

from datetime import date

from catalog.commands.base import BaseCommand, SubmissionInput, parse_reference
from catalog.exceptions import FieldError, NotFoundError, ValidationError
from catalog.models.book import Book
from catalog.models.book_instance import BookInstance, BookInstanceStatus
from catalog.protocols import Repository
from catalog.schemas.forms import BookInstanceForm, validate_form
from catalog.schemas.results import DeleteOutcome, DeleteResult


class GetBookInstanceCommand(BaseCommand[int, BookInstance]):
    """Command to read one copy."""

    def __init__(self, repository: Repository[BookInstance]):
        self.repository = repository

    async def execute(self, instance_id: int) -> BookInstance:
        """
        Execute command to read a copy.

        Raises:
            NotFoundError: If copy not found.
        """
        instance = await self.repository.get_by_id(instance_id)
        if not instance:
            raise NotFoundError(f"Book instance with ID {instance_id} not found")
        return instance


class _BookInstanceWriteCommand(BaseCommand[SubmissionInput, BookInstance]):
    def __init__(
        self,
        repository: Repository[BookInstance],
        books: Repository[Book],
    ):
        """
        Initialize command with repositories.

        Args:
            repository: BookInstance repository for data access.
            books: Book repository, to check the submitted book.
        """
        self.repository = repository
        self.books = books

    async def _validate(self, input_data: SubmissionInput) -> dict:
        """
        Validate the submission into BookInstance column values.

        Raises:
            ValidationError: If a field rule fails or the book does not
                exist.
        """
        form = validate_form(BookInstanceForm, input_data.fields)

        book_id = parse_reference(form.book)
        if book_id is None or not await self.books.get_by_id(book_id):
            raise ValidationError(
                [FieldError(field="book", message="Book does not exist.")],
                form.model_dump(),
            )

        values = {
            "book_id": book_id,
            "imprint": form.imprint,
            "status": form.status or BookInstanceStatus.MAINTENANCE,
        }
        if form.due_back is not None:
            values["due_back"] = form.due_back
        return values


class CreateBookInstanceCommand(_BookInstanceWriteCommand):
    """Command to create a copy of a book."""

    async def execute(self, input_data: SubmissionInput) -> BookInstance:
        """
        Execute command to create copy.

        Args:
            input_data: Raw submitted copy fields.

        Returns:
            Created copy with generated ID.

        Raises:
            ValidationError: If a field rule or the book check fails.
        """
        values = await self._validate(input_data)
        return await self.repository.create(BookInstance(**values))


class UpdateBookInstanceCommand(_BookInstanceWriteCommand):
    """Command to overwrite a copy."""

    async def execute(self, input_data: SubmissionInput) -> BookInstance:
        """
        Execute command to update copy.

        All fields are replaced, so an empty status or due date resets it
        to its default.

        Args:
            input_data: Copy ID and raw submitted fields.

        Returns:
            Updated copy.

        Raises:
            NotFoundError: If copy not found.
            ValidationError: If a field rule or the book check fails.
        """
        instance = await self.repository.get_by_id(input_data.id)  # type: ignore[arg-type]
        if not instance:
            raise NotFoundError(f"Book instance with ID {input_data.id} not found")

        values = await self._validate(input_data)
        values.setdefault("due_back", date.today())
        instance.sqlmodel_update(values)
        return await self.repository.update(instance)


class DeleteBookInstanceCommand(BaseCommand[int, DeleteResult[BookInstance]]):
    """
    Command to delete a copy.

    Nothing references a copy, so the delete is never blocked.
    """

    def __init__(self, repository: Repository[BookInstance]):
        self.repository = repository

    async def execute(self, instance_id: int) -> DeleteResult[BookInstance]:
        instance = await self.repository.get_by_id(instance_id)
        if not instance:
            return DeleteResult(outcome=DeleteOutcome.MISSING)

        await self.repository.delete(instance)
        return DeleteResult(outcome=DeleteOutcome.REMOVED, entity=instance)
