"""
Tests for AuthorRepository and the shared BaseRepository operations.

These tests verify that the repository correctly interacts with the
database session and provides the expected CRUD operations using mocks.
"""

import pytest
from unittest.mock import MagicMock
from sqlalchemy.exc import IntegrityError, OperationalError

from catalog.models.author import Author
from catalog.repositories.author_repository import AuthorRepository


def _author(id=None, first_name="Jane", family_name="Austen"):
    return Author(id=id, first_name=first_name, family_name=family_name)


class TestAuthorRepositoryCreate:
    """Tests for repository create operations."""

    @pytest.mark.asyncio
    async def test_create_author(self, mock_session):
        """Test creating an author."""
        repo = AuthorRepository(mock_session)
        author = _author()

        created = await repo.create(author)

        assert created == author
        mock_session.add.assert_called_once_with(author)
        mock_session.flush.assert_called_once()
        mock_session.refresh.assert_called_once_with(author)
        mock_session.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_rolls_back_and_reraises(self, mock_session):
        """Test that a failed flush rolls back and propagates."""
        repo = AuthorRepository(mock_session)
        mock_session.flush.side_effect = IntegrityError("insert", {}, Exception())

        with pytest.raises(IntegrityError):
            await repo.create(_author())

        mock_session.rollback.assert_called_once()
        mock_session.refresh.assert_not_called()


class TestAuthorRepositoryRead:
    """Tests for repository read operations."""

    @pytest.mark.asyncio
    async def test_get_by_id_found(self, mock_session):
        """Test getting author by ID when exists."""
        repo = AuthorRepository(mock_session)
        expected_author = _author(id=1)
        mock_session.get.return_value = expected_author

        found = await repo.get_by_id(1)

        assert found == expected_author
        mock_session.get.assert_called_once_with(Author, 1)

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, mock_session):
        """Test getting author by ID when doesn't exist."""
        repo = AuthorRepository(mock_session)
        mock_session.get.return_value = None

        found = await repo.get_by_id(99999)

        assert found is None
        mock_session.get.assert_called_once_with(Author, 99999)

    @pytest.mark.asyncio
    async def test_list_ordered(self, mock_session):
        """Test listing authors."""
        repo = AuthorRepository(mock_session)
        expected_authors = [_author(id=1), _author(id=2, family_name="Bronte")]

        mock_result = MagicMock()
        mock_result.all.return_value = expected_authors
        mock_session.exec.return_value = mock_result

        authors = await repo.list_ordered()

        assert authors == expected_authors
        mock_session.exec.assert_called_once()

    @pytest.mark.asyncio
    async def test_get_all_query_error_propagates(self, mock_session):
        """Test that read errors are logged and re-raised."""
        repo = AuthorRepository(mock_session)
        mock_session.exec.side_effect = OperationalError("select", {}, Exception())

        with pytest.raises(OperationalError):
            await repo.get_all()

    @pytest.mark.asyncio
    async def test_count(self, mock_session):
        """Test counting authors."""
        repo = AuthorRepository(mock_session)

        mock_result = MagicMock()
        mock_result.one.return_value = 3
        mock_session.exec.return_value = mock_result

        assert await repo.count() == 3


class TestAuthorRepositoryUpdate:
    """Tests for repository update operations."""

    @pytest.mark.asyncio
    async def test_update_author(self, mock_session):
        """Test updating an author."""
        repo = AuthorRepository(mock_session)
        author = _author(id=1, first_name="Cassandra")

        updated = await repo.update(author)

        assert updated == author
        mock_session.add.assert_called_once_with(author)
        mock_session.flush.assert_called_once()
        mock_session.refresh.assert_called_once_with(author)


class TestAuthorRepositoryDelete:
    """Tests for repository delete operations."""

    @pytest.mark.asyncio
    async def test_delete_author(self, mock_session):
        """Test deleting an author."""
        repo = AuthorRepository(mock_session)
        author = _author(id=1)

        await repo.delete(author)

        mock_session.delete.assert_called_once_with(author)
        mock_session.flush.assert_called_once()

    @pytest.mark.asyncio
    async def test_delete_restricted_author_rolls_back(self, mock_session):
        """Test that a refused delete rolls back and propagates."""
        repo = AuthorRepository(mock_session)
        mock_session.flush.side_effect = IntegrityError("delete", {}, Exception())

        with pytest.raises(IntegrityError):
            await repo.delete(_author(id=1))

        mock_session.rollback.assert_called_once()


class TestAuthorRepositoryExists:
    """Tests for repository exists check."""

    @pytest.mark.asyncio
    async def test_exists_true(self, mock_session):
        """Test exists returns True when author exists."""
        repo = AuthorRepository(mock_session)

        mock_result = MagicMock()
        mock_result.first.return_value = _author(id=1)
        mock_session.exec.return_value = mock_result

        exists = await repo.exists(family_name="Austen")

        assert exists is True
        mock_session.exec.assert_called_once()

    @pytest.mark.asyncio
    async def test_exists_false(self, mock_session):
        """Test exists returns False when author doesn't exist."""
        repo = AuthorRepository(mock_session)

        mock_result = MagicMock()
        mock_result.first.return_value = None
        mock_session.exec.return_value = mock_result

        exists = await repo.exists(family_name="Nobody")

        assert exists is False
        mock_session.exec.assert_called_once()
