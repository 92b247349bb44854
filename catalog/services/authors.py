from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.commands.author_commands import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    GetAuthorCommand,
    UpdateAuthorCommand,
)
from catalog.models.author import Author
from catalog.relationships import EntityKind, RelationshipResolver
from catalog.repositories.author_repository import AuthorRepository
from catalog.schemas.results import AuthorDetail
from catalog.services.base import EntityLifecycle


class AuthorLifecycle(EntityLifecycle[Author]):
    """Author flows; an author with books cannot be deleted."""

    KIND = EntityKind.AUTHOR
    MODEL = Author

    def _get_command(self, session: AsyncSession) -> GetAuthorCommand:
        return GetAuthorCommand(AuthorRepository(session))

    def _create_command(self, session: AsyncSession) -> CreateAuthorCommand:
        return CreateAuthorCommand(AuthorRepository(session))

    def _update_command(self, session: AsyncSession) -> UpdateAuthorCommand:
        return UpdateAuthorCommand(AuthorRepository(session))

    def _delete_command(self, session: AsyncSession) -> DeleteAuthorCommand:
        return DeleteAuthorCommand(
            AuthorRepository(session), RelationshipResolver(session)
        )

    async def _list(self, session: AsyncSession) -> list[Author]:
        return await AuthorRepository(session).list_ordered()

    async def _detail(self, session: AsyncSession, entity: Author) -> AuthorDetail:
        books = await RelationshipResolver(session).books_by_author(entity.id)  # type: ignore[arg-type]
        return AuthorDetail(author=entity, books=books)
