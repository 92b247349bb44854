from catalog.services.authors import AuthorLifecycle
from catalog.services.base import EntityLifecycle
from catalog.services.book_instances import BookInstanceLifecycle
from catalog.services.books import BookLifecycle
from catalog.services.catalog import Catalog
from catalog.services.genres import GenreLifecycle

__all__ = [
    "AuthorLifecycle",
    "BookInstanceLifecycle",
    "BookLifecycle",
    "Catalog",
    "EntityLifecycle",
    "GenreLifecycle",
]
