"""
Tests for the handle_store_errors decorator.

Store failures must surface as DatabaseError while catalog exceptions
pass through unchanged.
"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from catalog.exceptions import (
    ConflictError,
    DatabaseError,
    NotFoundError,
    PartialWriteError,
)
from catalog.utils.error_handler import handle_store_errors


class TestHandleStoreErrors:
    """Test handle_store_errors decorator for lifecycle operations."""

    @pytest.mark.asyncio
    async def test_successful_execution(self):
        @handle_store_errors
        async def operation(value):
            return value * 2

        assert await operation(21) == 42

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            IntegrityError("INSERT", {}, Exception()),
            OperationalError("SELECT 1", {}, Exception()),
        ],
    )
    async def test_store_errors_become_database_error(self, error):
        @handle_store_errors
        async def operation():
            raise error

        with pytest.raises(DatabaseError) as exc_info:
            await operation()

        assert exc_info.value.message == "Database error occurred"
        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            NotFoundError("Author 1 not found"),
            ConflictError("Genre exists"),
            PartialWriteError("Book 7 was saved without its genres", 7),
        ],
    )
    async def test_catalog_errors_pass_through(self, error):
        @handle_store_errors
        async def operation():
            raise error

        with pytest.raises(type(error)) as exc_info:
            await operation()

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self):
        """Test that programming errors are not masked as store errors."""

        @handle_store_errors
        async def operation():
            raise KeyError("missing")

        with pytest.raises(KeyError):
            await operation()

    def test_preserves_function_metadata(self):
        @handle_store_errors
        async def list_authors():
            """List authors."""

        assert list_authors.__name__ == "list_authors"
        assert list_authors.__doc__ == "List authors."
