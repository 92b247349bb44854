"""
Base command for encapsulating catalog business operations.

The Command pattern encapsulates business logic as objects, making it
reusable across presentation layers (web forms, CLI) and easy to test in
isolation with repository doubles.

Example:
    ```python
    from catalog.commands.base import BaseCommand, SubmissionInput


    class CreateGenreCommand(BaseCommand[SubmissionInput, Genre]):
        def __init__(self, repository: GenreRepository):
            self.repository = repository

        async def execute(self, input_data: SubmissionInput) -> Genre:
            form = validate_form(GenreForm, input_data.fields)
            return await self.repository.create(Genre(name=form.name))


    async with store.session() as session:
        command = CreateGenreCommand(GenreRepository(session))
        genre = await command.execute(SubmissionInput(fields={"name": "Poetry"}))
    ```
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class SubmissionInput(BaseModel):  # type: ignore[misc]
    """Input model for create/update commands."""

    id: int | None = Field(
        default=None, description="Record to update; None on create"
    )
    fields: dict[str, Any] = Field(
        default_factory=dict, description="Raw submitted form fields"
    )


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Commands encapsulate business logic and depend on repositories for
    data access. They never commit on their own; the lifecycle that opened the
    session does, or hands them its commit when a write is split in two.

    Type Parameters:
        TInput: Input data type (usually a Pydantic model or an id).
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        This method must be implemented by subclasses to define
        the business logic of the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Result of the command execution.

        Raises:
            ValidationError: For rejected submissions.
            NotFoundError: For missing records on read/update.
            Any other exceptions as appropriate.
        """
        pass


def parse_reference(value: str | None) -> int | None:
    """
    Parse a submitted record id.

    Args:
        value: Id as submitted, e.g. "3".

    Returns:
        The id, or None when value is not a positive integer.
    """
    if not value or not (value.isascii() and value.isdigit()):
        return None
    return int(value)
