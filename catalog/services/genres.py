from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.commands.base import SubmissionInput
from catalog.commands.genre_commands import (
    CreateGenreCommand,
    DeleteGenreCommand,
    GetGenreCommand,
    UpdateGenreCommand,
)
from catalog.logging import logger
from catalog.models.genre import Genre
from catalog.relationships import EntityKind, RelationshipResolver
from catalog.repositories.genre_repository import GenreRepository
from catalog.schemas.results import GenreDetail
from catalog.services.base import EntityLifecycle


class GenreLifecycle(EntityLifecycle[Genre]):
    """
    Genre flows.

    Creating a genre whose name exists yields the existing genre with
    `created=False`; renaming onto another genre's name raises
    ConflictError. A genre carried by any book cannot be deleted.
    """

    KIND = EntityKind.GENRE
    MODEL = Genre

    def _get_command(self, session: AsyncSession) -> GetGenreCommand:
        return GetGenreCommand(GenreRepository(session))

    def _create_command(self, session: AsyncSession) -> CreateGenreCommand:
        return CreateGenreCommand(GenreRepository(session))

    def _update_command(self, session: AsyncSession) -> UpdateGenreCommand:
        return UpdateGenreCommand(GenreRepository(session))

    def _delete_command(self, session: AsyncSession) -> DeleteGenreCommand:
        return DeleteGenreCommand(
            GenreRepository(session), RelationshipResolver(session)
        )

    async def _create(
        self, session: AsyncSession, submission: SubmissionInput
    ) -> tuple[Genre, bool]:
        genre, created = await self._create_command(session).execute(submission)
        if not created:
            logger.info(f"Genre '{genre.name}' already exists as {genre.id}")
        return genre, created

    async def _list(self, session: AsyncSession) -> list[Genre]:
        return await GenreRepository(session).list_ordered()

    async def _detail(self, session: AsyncSession, entity: Genre) -> GenreDetail:
        books = await RelationshipResolver(session).books_by_genre(entity.id)  # type: ignore[arg-type]
        return GenreDetail(genre=entity, books=books)
