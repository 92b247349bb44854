from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.base import BaseRepository
from catalog.repositories.book_instance_repository import BookInstanceRepository
from catalog.repositories.book_repository import BookRepository
from catalog.repositories.genre_repository import GenreRepository

__all__ = [
    "AuthorRepository",
    "BaseRepository",
    "BookInstanceRepository",
    "BookRepository",
    "GenreRepository",
]
