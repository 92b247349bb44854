"""
Shared lifecycle of a catalog entity.

A lifecycle turns one collaborator request (show a form, submit it, ask
for a delete) into one unit of work on the store:

    submit -> rejected (errors + sanitized values) -> form shown again
           -> accepted -> persisted
    delete -> blocked (dependents) -> confirmation shown again
           -> removed
           -> missing (back to the list)

Each public method opens its own session; the session commits when the
method returns and rolls back when it raises. Store failures come out as
DatabaseError.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Mapping, TypeVar

from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.commands.base import BaseCommand, SubmissionInput
from catalog.exceptions import ValidationError
from catalog.logging import bound_log_context, logger
from catalog.relationships import EntityKind, RelationshipResolver
from catalog.schemas.results import (
    DeleteContext,
    DeleteResult,
    FormContext,
    SubmitResult,
)
from catalog.settings import Settings, app_settings
from catalog.storage.db import CatalogStore
from catalog.utils.error_handler import handle_store_errors

EntityT = TypeVar("EntityT")


class EntityLifecycle(ABC, Generic[EntityT]):
    """
    Create/read/update/delete flows of one entity type.

    Subclasses provide the commands and the entity-specific views; the
    submit and delete flows are the same for every entity.

    Attributes:
        KIND: Entity kind, also used as the `entity` log field.
        MODEL: Table model of the entity.
        store: The store every operation opens its session from.
        settings: Application settings.
    """

    KIND: ClassVar[EntityKind]
    MODEL: ClassVar[type]

    def __init__(self, store: CatalogStore, settings: Settings | None = None):
        """
        Initialize the lifecycle.

        Args:
            store: Store handle owned by the caller.
            settings: Application settings. Defaults to app_settings.
        """
        self.store = store
        self.settings = settings or app_settings

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _get_command(self, session: AsyncSession) -> BaseCommand[int, EntityT]:
        """Command reading one record, raising NotFoundError."""

    @abstractmethod
    def _create_command(self, session: AsyncSession) -> BaseCommand[SubmissionInput, Any]:
        """Command creating a record from a submission."""

    @abstractmethod
    def _update_command(self, session: AsyncSession) -> BaseCommand[SubmissionInput, EntityT]:
        """Command overwriting a record from a submission."""

    @abstractmethod
    def _delete_command(self, session: AsyncSession) -> BaseCommand[int, DeleteResult[EntityT]]:
        """Command deleting a record unless it has dependents."""

    @abstractmethod
    async def _list(self, session: AsyncSession) -> list[Any]:
        """Rows of the entity list."""

    @abstractmethod
    async def _detail(self, session: AsyncSession, entity: EntityT) -> Any:
        """Detail view of a record."""

    async def _form_context(
        self,
        session: AsyncSession,
        entity: EntityT | None = None,
        values: Mapping[str, Any] | None = None,
    ) -> FormContext[EntityT]:
        """
        Form context for a new record, a record being edited, or a
        rejected submission (`values`).
        """
        return FormContext(entity=entity)

    async def _create(
        self, session: AsyncSession, submission: SubmissionInput
    ) -> tuple[EntityT, bool]:
        entity = await self._create_command(session).execute(submission)
        return entity, True

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    @handle_store_errors
    async def list(self) -> list[Any]:
        """List all records in display order."""
        async with self.store.session() as session:
            return await self._list(session)

    @handle_store_errors
    async def get_detail(self, id: int) -> Any:
        """
        Get a record with its related records.

        Raises:
            NotFoundError: If the record does not exist.
        """
        async with self.store.session() as session:
            entity = await self._get_command(session).execute(id)
            return await self._detail(session, entity)

    @handle_store_errors
    async def get_form_context(self, id: int | None = None) -> FormContext[EntityT]:
        """
        Get what the create (no id) or update form needs.

        Raises:
            NotFoundError: If id is given and the record does not exist.
        """
        async with self.store.session() as session:
            entity = None
            if id is not None:
                entity = await self._get_command(session).execute(id)
            return await self._form_context(session, entity)

    @handle_store_errors
    async def submit_create(self, raw: Mapping[str, Any]) -> SubmitResult[EntityT]:
        """
        Validate and persist a new record.

        Args:
            raw: Submitted form fields.

        Returns:
            Accepted result with the new record, or a rejected result with
            every field error and the sanitized values.
        """
        with bound_log_context(entity=self.KIND.value, operation="create"):
            async with self.store.session() as session:
                try:
                    entity, created = await self._create(
                        session, SubmissionInput(fields=dict(raw))
                    )
                except ValidationError as exc:
                    return await self._rejected(session, exc)

            if created:
                logger.info(f"Created {self.KIND.value} {entity.id}")  # type: ignore[attr-defined]
            return SubmitResult(
                ok=True,
                entity=entity,
                values=entity.model_dump(),  # type: ignore[attr-defined]
                created=created,
            )

    @handle_store_errors
    async def submit_update(
        self, id: int, raw: Mapping[str, Any]
    ) -> SubmitResult[EntityT]:
        """
        Validate and overwrite an existing record.

        Args:
            id: Record to update.
            raw: Submitted form fields.

        Returns:
            Accepted or rejected result, as for submit_create.

        Raises:
            NotFoundError: If the record does not exist.
        """
        with bound_log_context(
            entity=self.KIND.value, operation="update", entity_id=id
        ):
            async with self.store.session() as session:
                try:
                    entity = await self._update_command(session).execute(
                        SubmissionInput(id=id, fields=dict(raw))
                    )
                except ValidationError as exc:
                    return await self._rejected(session, exc)

            logger.info(f"Updated {self.KIND.value} {id}")
            return SubmitResult(
                ok=True,
                entity=entity,
                values=entity.model_dump(),  # type: ignore[attr-defined]
            )

    @handle_store_errors
    async def request_delete(self, id: int) -> DeleteResult[EntityT]:
        """
        Delete a record unless other records depend on it.

        Returns:
            REMOVED, BLOCKED with the dependents, or MISSING when the
            record does not exist.
        """
        with bound_log_context(
            entity=self.KIND.value, operation="delete", entity_id=id
        ):
            async with self.store.session() as session:
                result = await self._delete_command(session).execute(id)

            if result.blocked:
                logger.info(
                    f"Delete of {self.KIND.value} {id} blocked by "
                    f"{len(result.dependents)} dependent record(s)"
                )
            elif result.removed:
                logger.info(f"Deleted {self.KIND.value} {id}")
            else:
                logger.info(f"{self.KIND.value} {id} not found for delete")
            return result

    @handle_store_errors
    async def get_delete_context(self, id: int) -> DeleteContext[EntityT] | None:
        """
        Get a record and its dependents for the delete confirmation.

        Returns:
            The context, or None when the record does not exist.
        """
        async with self.store.session() as session:
            entity = await session.get(self.MODEL, id)
            if entity is None:
                return None
            dependents = await RelationshipResolver(session).dependents_of(
                self.KIND, id
            )
            return DeleteContext(entity=entity, dependents=list(dependents))

    async def _rejected(
        self, session: AsyncSession, exc: ValidationError
    ) -> SubmitResult[EntityT]:
        logger.info(
            f"Rejected {self.KIND.value} submission: {', '.join(exc.fields)}"
        )
        return SubmitResult(
            ok=False,
            values=exc.values,
            errors=exc.errors,
            context=await self._form_context(session, values=exc.values),
        )
