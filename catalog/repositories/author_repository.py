"""
Repository for Author entity with specialized query methods.

Example:
    ```python
    from catalog.repositories.author_repository import AuthorRepository

    async with store.session() as session:
        repo = AuthorRepository(session)
        authors = await repo.list_ordered()
    ```
"""

from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models.author import Author
from catalog.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    Author-specific query methods.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Author repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Author)

    async def list_ordered(self) -> list[Author]:
        """
        Get all authors ordered by display name.

        Returns:
            Authors sorted by family name, then first name.
        """
        return await self.get_all(Author.family_name, Author.first_name)
