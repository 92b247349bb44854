"""
Protocol classes for structural subtyping (duck typing with type safety).

Protocols define interfaces without requiring explicit inheritance. Any class
that implements the required methods is considered compatible, so commands
can be handed a real repository or a test double alike.

Example:
    ```python
    from catalog.protocols import Repository
    from catalog.models.author import Author


    async def rename(repo: Repository[Author], author_id: int) -> None:
        # Works with any repository implementation
        author = await repo.get_by_id(author_id)
    ```
"""

from typing import Any, Protocol, Sequence, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Repository(Protocol[T]):
    """
    Protocol for repository pattern.

    Defines the interface for data access objects that manage entities
    of type T.

    Type Parameters:
        T: The entity type this repository manages.
    """

    async def get_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Entity if found, None otherwise.
        """
        ...

    async def get_all(self, *order_by: Any, **filters: Any) -> list[T]:
        """
        Get all entities matching the provided filters.

        Args:
            *order_by: Optional column expressions to sort by.
            **filters: Field name and value pairs to filter by.

        Returns:
            List of entities matching all filters.
        """
        ...

    async def count(self, **filters: Any) -> int:
        """Count entities matching the provided filters."""
        ...

    async def create(self, entity: T) -> T:
        """
        Create new entity in database.

        Args:
            entity: The entity instance to create.

        Returns:
            The created entity with generated fields populated.
        """
        ...

    async def update(self, entity: T) -> T:
        """
        Update existing entity in database.

        Args:
            entity: The entity instance with updated values.

        Returns:
            The updated entity.
        """
        ...

    async def delete(self, entity: T) -> None:
        """
        Delete entity from database.

        Args:
            entity: The entity instance to delete.
        """
        ...

    async def exists(self, **filters: Any) -> bool:
        """Check if entity exists matching the provided filters."""
        ...


@runtime_checkable
class DependentsLookup(Protocol):
    """
    Protocol for the delete guard's view of the relationship resolver.

    Delete commands only need the dependents of one record, which keeps
    them testable without a session.
    """

    async def dependents_of(self, kind: Any, id: int) -> Sequence[Any]:
        """
        Get the records that block deletion of a record.

        Args:
            kind: Entity kind of the record.
            id: Primary key of the record.

        Returns:
            Dependent records; empty when deletion is allowed.
        """
        ...
