from datetime import date
from typing import ClassVar

from sqlmodel import Field

from catalog.constants import AUTHOR_NAME_MAX_LENGTH, LIFESPAN_SEPARATOR
from catalog.models.base import CatalogModel
from catalog.utils.dates import format_medium_date, to_iso_date


class Author(CatalogModel, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    Attributes:
        id: Primary key identifier for the author
        first_name: Given name (alphanumeric only)
        family_name: Family name (alphanumeric only)
        date_of_birth: Optional birth date
        date_of_death: Optional death date
    """

    __tablename__ = "author"
    __table_args__ = {"extend_existing": True}

    URL_SEGMENT: ClassVar[str] = "author"

    id: int | None = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=AUTHOR_NAME_MAX_LENGTH)
    family_name: str = Field(max_length=AUTHOR_NAME_MAX_LENGTH)
    date_of_birth: date | None = Field(default=None)
    date_of_death: date | None = Field(default=None)

    @property
    def name(self) -> str:
        """Display name, "family, first"."""
        return f"{self.family_name}, {self.first_name}"

    @property
    def lifespan(self) -> str:
        """Birth and death dates, e.g. "Dec 16, 1775 - Jul 18, 1817"."""
        return (
            format_medium_date(self.date_of_birth)
            + LIFESPAN_SEPARATOR
            + format_medium_date(self.date_of_death)
        )

    @property
    def date_of_birth_iso(self) -> str | None:
        return to_iso_date(self.date_of_birth)

    @property
    def date_of_death_iso(self) -> str | None:
        return to_iso_date(self.date_of_death)
