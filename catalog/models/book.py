from typing import ClassVar

from sqlalchemy import Text
from sqlmodel import Field

from catalog.models.base import CatalogModel


class Book(CatalogModel, table=True):
    """
    SQLModel representing a catalog entry (a title) in the database.

    A book always belongs to exactly one author; the author cannot be
    deleted while books reference it. Genres are attached through the
    BookGenreLink table and managed by BookRepository.

    Attributes:
        id: Primary key identifier for the book
        title: Book title
        summary: Free-text summary
        isbn: ISBN as entered (not normalized)
        author_id: Owning author
    """

    __tablename__ = "book"
    __table_args__ = {"extend_existing": True}

    URL_SEGMENT: ClassVar[str] = "book"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    summary: str = Field(sa_type=Text)
    isbn: str
    author_id: int = Field(
        foreign_key="author.id", ondelete="RESTRICT", index=True
    )
