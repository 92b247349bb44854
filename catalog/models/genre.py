from typing import ClassVar

from sqlalchemy import CheckConstraint
from sqlmodel import Field

from catalog.constants import GENRE_NAME_MAX_LENGTH, GENRE_NAME_MIN_LENGTH
from catalog.models.base import CatalogModel


class Genre(CatalogModel, table=True):
    """
    SQLModel representing a genre.

    Names are unique; the 3..100 character bound is enforced by the store.

    Attributes:
        id: Primary key identifier for the genre
        name: Genre name
    """

    __tablename__ = "genre"
    __table_args__ = (
        CheckConstraint(
            f"length(name) BETWEEN {GENRE_NAME_MIN_LENGTH} "
            f"AND {GENRE_NAME_MAX_LENGTH}",
            name="ck_genre_name_length",
        ),
        {"extend_existing": True},
    )

    URL_SEGMENT: ClassVar[str] = "genre"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=GENRE_NAME_MAX_LENGTH, unique=True)
