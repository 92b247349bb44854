"""Library catalog core: authors, books, book copies and genres."""

from catalog.exceptions import (
    AppException,
    ConflictError,
    DatabaseError,
    FieldError,
    NotFoundError,
    PartialWriteError,
    ValidationError,
)
from catalog.schemas.results import DeleteOutcome, DeleteResult, SubmitResult
from catalog.services.catalog import Catalog
from catalog.storage.db import CatalogStore

__all__ = [
    "AppException",
    "Catalog",
    "CatalogStore",
    "ConflictError",
    "DatabaseError",
    "DeleteOutcome",
    "DeleteResult",
    "FieldError",
    "NotFoundError",
    "PartialWriteError",
    "SubmitResult",
    "ValidationError",
]
