from catalog.commands.author_commands import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    GetAuthorCommand,
    UpdateAuthorCommand,
)
from catalog.commands.base import BaseCommand, SubmissionInput
from catalog.commands.book_commands import (
    CreateBookCommand,
    DeleteBookCommand,
    GetBookCommand,
    UpdateBookCommand,
)
from catalog.commands.book_instance_commands import (
    CreateBookInstanceCommand,
    DeleteBookInstanceCommand,
    GetBookInstanceCommand,
    UpdateBookInstanceCommand,
)
from catalog.commands.genre_commands import (
    CreateGenreCommand,
    DeleteGenreCommand,
    GetGenreCommand,
    UpdateGenreCommand,
)

__all__ = [
    "BaseCommand",
    "SubmissionInput",
    "CreateAuthorCommand",
    "DeleteAuthorCommand",
    "GetAuthorCommand",
    "UpdateAuthorCommand",
    "CreateBookCommand",
    "DeleteBookCommand",
    "GetBookCommand",
    "UpdateBookCommand",
    "CreateBookInstanceCommand",
    "DeleteBookInstanceCommand",
    "GetBookInstanceCommand",
    "UpdateBookInstanceCommand",
    "CreateGenreCommand",
    "DeleteGenreCommand",
    "GetGenreCommand",
    "UpdateGenreCommand",
]
