"""
Catalog facade.

Example:
    ```python
    from catalog import Catalog, CatalogStore

    store = CatalogStore()
    await store.init_db()
    catalog = Catalog(store)

    result = await catalog.authors.submit_create(
        {"first_name": "Jane", "family_name": "Austen"}
    )
    summary = await catalog.summary()
    ```
"""

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.models.book_instance import BookInstance, BookInstanceStatus
from catalog.models.genre import Genre
from catalog.repositories.base import BaseRepository
from catalog.repositories.book_instance_repository import BookInstanceRepository
from catalog.schemas.results import CatalogSummary
from catalog.settings import Settings
from catalog.services.authors import AuthorLifecycle
from catalog.services.book_instances import BookInstanceLifecycle
from catalog.services.books import BookLifecycle
from catalog.services.genres import GenreLifecycle
from catalog.storage.db import CatalogStore
from catalog.utils.error_handler import handle_store_errors


class Catalog:
    """
    Entry point of the catalog core.

    Holds one lifecycle per entity type, all sharing the store handle the
    caller constructed and owns.

    Attributes:
        store: The store handle.
        authors: Author lifecycle.
        books: Book lifecycle.
        book_instances: Copy lifecycle.
        genres: Genre lifecycle.
    """

    def __init__(self, store: CatalogStore, settings: Settings | None = None):
        self.store = store
        self.authors = AuthorLifecycle(store, settings)
        self.books = BookLifecycle(store, settings)
        self.book_instances = BookInstanceLifecycle(store, settings)
        self.genres = GenreLifecycle(store, settings)

    @handle_store_errors
    async def summary(self) -> CatalogSummary:
        """
        Count the records of every entity type.

        Returns:
            Counts of books, copies, available copies, authors and genres.
        """
        async with self.store.session() as session:
            instances = BookInstanceRepository(session)
            return CatalogSummary(
                book_count=await BaseRepository(session, Book).count(),
                book_instance_count=await instances.count(),
                book_instance_available_count=await instances.count_by_status(
                    BookInstanceStatus.AVAILABLE
                ),
                author_count=await BaseRepository(session, Author).count(),
                genre_count=await BaseRepository(session, Genre).count(),
            )
