"""Tests for RelationshipResolver against the store."""

import pytest
import pytest_asyncio

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.models.book_instance import BookInstance
from catalog.models.genre import Genre
from catalog.relationships import EntityKind, RelationshipResolver
from catalog.repositories.book_repository import BookRepository


@pytest_asyncio.fixture
async def seeded(store):
    """
    Seeds two authors, two genres, two books and one copy.

    Returns:
        dict: Ids keyed by a short name
    """
    async with store.session() as session:
        austen = Author(first_name="Jane", family_name="Austen")
        shelley = Author(first_name="Mary", family_name="Shelley")
        classic = Genre(name="Classic")
        gothic = Genre(name="Gothic")
        session.add_all([austen, shelley, classic, gothic])
        await session.flush()

        emma = Book(title="Emma", summary="s", isbn="1", author_id=austen.id)
        persuasion = Book(title="Persuasion", summary="s", isbn="2", author_id=austen.id)
        session.add_all([emma, persuasion])
        await session.flush()

        books = BookRepository(session)
        await books.set_genres(emma.id, [classic.id])
        await books.set_genres(persuasion.id, [classic.id])
        session.add(BookInstance(imprint="London, 1815", book_id=emma.id))

        return {
            "austen": austen.id,
            "shelley": shelley.id,
            "classic": classic.id,
            "gothic": gothic.id,
            "emma": emma.id,
            "persuasion": persuasion.id,
        }


class TestRelationshipResolver:
    """Test dependents of each entity kind."""

    @pytest.mark.asyncio
    async def test_author_dependents_are_books(self, store, seeded):
        async with store.session() as session:
            resolver = RelationshipResolver(session)
            books = await resolver.dependents_of(EntityKind.AUTHOR, seeded["austen"])
            none = await resolver.dependents_of(EntityKind.AUTHOR, seeded["shelley"])

        assert sorted(b.title for b in books) == ["Emma", "Persuasion"]
        assert none == []

    @pytest.mark.asyncio
    async def test_genre_dependents_are_linked_books(self, store, seeded):
        async with store.session() as session:
            resolver = RelationshipResolver(session)
            books = await resolver.dependents_of(EntityKind.GENRE, seeded["classic"])
            none = await resolver.dependents_of(EntityKind.GENRE, seeded["gothic"])

        assert sorted(b.title for b in books) == ["Emma", "Persuasion"]
        assert none == []

    @pytest.mark.asyncio
    async def test_book_dependents_are_copies(self, store, seeded):
        async with store.session() as session:
            resolver = RelationshipResolver(session)
            copies = await resolver.dependents_of(EntityKind.BOOK, seeded["emma"])
            none = await resolver.dependents_of(EntityKind.BOOK, seeded["persuasion"])

        assert [c.imprint for c in copies] == ["London, 1815"]
        assert none == []

    @pytest.mark.asyncio
    async def test_copies_have_no_dependents(self, store, seeded):
        async with store.session() as session:
            resolver = RelationshipResolver(session)
            assert await resolver.dependents_of(EntityKind.BOOK_INSTANCE, 1) == []

    @pytest.mark.asyncio
    async def test_genres_of_book(self, store, seeded):
        async with store.session() as session:
            genres = await RelationshipResolver(session).genres_of_book(
                seeded["emma"]
            )

        assert [g.name for g in genres] == ["Classic"]
