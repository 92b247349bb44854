"""Table models; importing this package registers every table on SQLModel.metadata."""

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.models.book_instance import BookInstance, BookInstanceStatus
from catalog.models.genre import Genre
from catalog.models.links import BookGenreLink

__all__ = [
    "Author",
    "Book",
    "BookGenreLink",
    "BookInstance",
    "BookInstanceStatus",
    "Genre",
]
