from typing import Any, Mapping

from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.commands.book_instance_commands import (
    CreateBookInstanceCommand,
    DeleteBookInstanceCommand,
    GetBookInstanceCommand,
    UpdateBookInstanceCommand,
)
from catalog.constants import BOOK_INSTANCE_STATUSES
from catalog.models.book import Book
from catalog.models.book_instance import BookInstance
from catalog.relationships import EntityKind
from catalog.repositories.book_instance_repository import BookInstanceRepository
from catalog.repositories.book_repository import BookRepository
from catalog.schemas.results import (
    BookInstanceDetail,
    BookInstanceListing,
    FormContext,
)
from catalog.services.base import EntityLifecycle


class BookInstanceLifecycle(EntityLifecycle[BookInstance]):
    """Copy flows; deleting a copy is never blocked."""

    KIND = EntityKind.BOOK_INSTANCE
    MODEL = BookInstance

    def _get_command(self, session: AsyncSession) -> GetBookInstanceCommand:
        return GetBookInstanceCommand(BookInstanceRepository(session))

    def _create_command(self, session: AsyncSession) -> CreateBookInstanceCommand:
        return CreateBookInstanceCommand(
            BookInstanceRepository(session), BookRepository(session)
        )

    def _update_command(self, session: AsyncSession) -> UpdateBookInstanceCommand:
        return UpdateBookInstanceCommand(
            BookInstanceRepository(session), BookRepository(session)
        )

    def _delete_command(self, session: AsyncSession) -> DeleteBookInstanceCommand:
        return DeleteBookInstanceCommand(BookInstanceRepository(session))

    async def _list(self, session: AsyncSession) -> list[BookInstanceListing]:
        rows = await BookInstanceRepository(session).list_with_books()
        return [
            BookInstanceListing(instance=instance, book=book)
            for instance, book in rows
        ]

    async def _detail(
        self, session: AsyncSession, entity: BookInstance
    ) -> BookInstanceDetail:
        book = None
        if entity.book_id is not None:
            book = await BookRepository(session).get_by_id(entity.book_id)
        return BookInstanceDetail(instance=entity, book=book)

    async def _form_context(
        self,
        session: AsyncSession,
        entity: BookInstance | None = None,
        values: Mapping[str, Any] | None = None,
    ) -> FormContext[BookInstance]:
        books = await BookRepository(session).get_all(Book.title)

        selected_book: str | None = None
        if values is not None:
            selected_book = values.get("book") or None
        elif entity is not None and entity.book_id is not None:
            selected_book = str(entity.book_id)

        return FormContext(
            entity=entity,
            books=books,
            statuses=BOOK_INSTANCE_STATUSES,
            selected_book=selected_book,
        )
