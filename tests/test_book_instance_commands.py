"""Tests for BookInstance (copy) commands."""

from datetime import date

import pytest

from catalog.commands.base import SubmissionInput
from catalog.commands.book_instance_commands import (
    CreateBookInstanceCommand,
    DeleteBookInstanceCommand,
    GetBookInstanceCommand,
    UpdateBookInstanceCommand,
)
from catalog.exceptions import NotFoundError, ValidationError
from catalog.models.book import Book
from catalog.models.book_instance import BookInstance, BookInstanceStatus
from catalog.schemas.results import DeleteOutcome
from tests.mocks.repository_mocks import (
    create_mock_book_instance_repository,
    create_mock_book_repository,
)


@pytest.fixture
def repos():
    """Provides copy and book repository mocks; book 1 exists."""
    instances = create_mock_book_instance_repository()
    books = create_mock_book_repository()
    books.get_by_id.side_effect = lambda id: (
        Book(id=1, title="Emma", summary="s", isbn="0", author_id=1)
        if id == 1
        else None
    )
    return instances, books


class TestGetBookInstanceCommand:
    @pytest.mark.asyncio
    async def test_get_copy_not_found(self):
        with pytest.raises(NotFoundError):
            await GetBookInstanceCommand(
                create_mock_book_instance_repository()
            ).execute(1)


class TestCreateBookInstanceCommand:
    """Tests for CreateBookInstanceCommand."""

    @pytest.mark.asyncio
    async def test_create_copy_with_defaults(self, repos):
        """Test that empty status and due date take their defaults."""
        instances, books = repos

        instance = await CreateBookInstanceCommand(instances, books).execute(
            SubmissionInput(fields={"book": "1", "imprint": "London, 1815"})
        )

        assert instance.book_id == 1
        assert instance.imprint == "London, 1815"
        assert instance.status == BookInstanceStatus.MAINTENANCE
        assert instance.due_back == date.today()
        instances.create.assert_called_once_with(instance)

    @pytest.mark.asyncio
    async def test_create_copy_with_status_and_date(self, repos):
        instances, books = repos

        instance = await CreateBookInstanceCommand(instances, books).execute(
            SubmissionInput(
                fields={
                    "book": "1",
                    "imprint": "x",
                    "status": "Loaned",
                    "due_back": "2025-03-03",
                }
            )
        )

        assert instance.status == "Loaned"
        assert instance.due_back == date(2025, 3, 3)

    @pytest.mark.asyncio
    async def test_unknown_book_rejected(self, repos):
        """Test that a missing book is a field error."""
        instances, books = repos

        with pytest.raises(ValidationError) as exc_info:
            await CreateBookInstanceCommand(instances, books).execute(
                SubmissionInput(fields={"book": "8", "imprint": "x"})
            )

        assert [(e.field, e.message) for e in exc_info.value.errors] == [
            ("book", "Book does not exist.")
        ]
        assert exc_info.value.values["imprint"] == "x"
        instances.create.assert_not_called()


class TestUpdateBookInstanceCommand:
    """Tests for UpdateBookInstanceCommand."""

    @pytest.mark.asyncio
    async def test_update_overwrites_every_field(self, repos):
        """Test that omitted status and due date are reset to defaults."""
        instances, books = repos
        existing = BookInstance(
            id=3,
            imprint="old",
            status=BookInstanceStatus.LOANED,
            due_back=date(2020, 1, 1),
            book_id=1,
        )
        instances.get_by_id.return_value = existing

        instance = await UpdateBookInstanceCommand(instances, books).execute(
            SubmissionInput(id=3, fields={"book": "1", "imprint": "new"})
        )

        assert instance.id == 3
        assert instance.imprint == "new"
        assert instance.status == BookInstanceStatus.MAINTENANCE
        assert instance.due_back == date.today()
        instances.update.assert_called_once_with(existing)

    @pytest.mark.asyncio
    async def test_update_copy_not_found(self, repos):
        instances, books = repos

        with pytest.raises(NotFoundError):
            await UpdateBookInstanceCommand(instances, books).execute(
                SubmissionInput(id=3, fields={"book": "1", "imprint": "x"})
            )


class TestDeleteBookInstanceCommand:
    """Tests for DeleteBookInstanceCommand."""

    @pytest.mark.asyncio
    async def test_delete_copy_is_never_blocked(self):
        instances = create_mock_book_instance_repository()
        instance = BookInstance(id=3, imprint="x", book_id=1)
        instances.get_by_id.return_value = instance

        result = await DeleteBookInstanceCommand(instances).execute(3)

        assert result.outcome is DeleteOutcome.REMOVED
        instances.delete.assert_called_once_with(instance)

    @pytest.mark.asyncio
    async def test_delete_missing_copy(self):
        result = await DeleteBookInstanceCommand(
            create_mock_book_instance_repository()
        ).execute(3)

        assert result.outcome is DeleteOutcome.MISSING
