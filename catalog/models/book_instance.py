from datetime import date
from enum import Enum
from typing import ClassVar

from sqlalchemy import Column
from sqlalchemy import Enum as SAEnum
from sqlmodel import Field

from catalog.constants import (
    STATUS_AVAILABLE,
    STATUS_LOANED,
    STATUS_MAINTENANCE,
    STATUS_RESERVED,
)
from catalog.models.base import CatalogModel
from catalog.utils.dates import format_medium_date, to_iso_date


class BookInstanceStatus(str, Enum):
    """Lending status of a physical copy."""

    AVAILABLE = STATUS_AVAILABLE
    MAINTENANCE = STATUS_MAINTENANCE
    LOANED = STATUS_LOANED
    RESERVED = STATUS_RESERVED


class BookInstance(CatalogModel, table=True):
    """
    SQLModel representing a physical copy of a book.

    The book reference is optional: a copy may be detached from any
    catalog entry. Status membership is enforced by a CHECK constraint,
    not by form validation.

    Attributes:
        id: Primary key identifier for the copy
        imprint: Publisher/edition imprint
        status: Lending status, defaults to Maintenance
        due_back: Due date, defaults to the creation day
        book_id: Referenced book, or None
    """

    __tablename__ = "bookinstance"
    __table_args__ = {"extend_existing": True}

    URL_SEGMENT: ClassVar[str] = "bookinstance"

    id: int | None = Field(default=None, primary_key=True)
    imprint: str
    status: BookInstanceStatus = Field(
        default=BookInstanceStatus.MAINTENANCE,
        sa_column=Column(
            SAEnum(
                BookInstanceStatus,
                name="bookinstance_status",
                values_callable=lambda statuses: [s.value for s in statuses],
                create_constraint=True,
                validate_strings=True,
            ),
            nullable=False,
        ),
    )
    due_back: date = Field(default_factory=date.today)
    book_id: int | None = Field(
        default=None, foreign_key="book.id", ondelete="RESTRICT", index=True
    )

    @property
    def due_back_formatted(self) -> str:
        """Due date in medium format, e.g. "Mar 3, 2025"."""
        return format_medium_date(self.due_back)

    @property
    def due_back_iso(self) -> str | None:
        return to_iso_date(self.due_back)
