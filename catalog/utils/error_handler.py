"""
Error handler decorator for the catalog lifecycle boundary.

Converts storage exceptions into the catalog's own DatabaseError so callers
only ever deal with AppException subclasses, eliminating duplicate
try/except blocks in lifecycle methods.
"""

from functools import wraps
from typing import Any, Callable

from sqlalchemy.exc import SQLAlchemyError

from catalog.exceptions import AppException, DatabaseError
from catalog.logging import logger


def handle_store_errors(func: Callable) -> Callable:
    """
    Decorator for lifecycle operations to convert SQLAlchemyError to DatabaseError.

    AppException instances pass through untouched (they are expected
    outcomes such as NotFoundError). Store errors are logged with traceback
    and re-raised as DatabaseError; they are never retried.

    Args:
        func: The async lifecycle method to wrap.

    Returns:
        Wrapped function that handles exceptions.

    Example:
        ```python
        class AuthorLifecycle(EntityLifecycle):
            @handle_store_errors
            async def list(self) -> list[Author]:
                async with self.store.session() as session:
                    return await AuthorRepository(session).list_ordered()
        ```
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except AppException as ex:
            logger.debug(
                f"{type(ex).__name__} in {func.__qualname__}: {ex.message}",
                extra={"exception_type": type(ex).__name__},
            )
            raise
        except SQLAlchemyError as ex:
            logger.error(
                f"Database error in {func.__qualname__}: {ex}",
                exc_info=True,
            )
            raise DatabaseError("Database error occurred") from ex

    return wrapper
