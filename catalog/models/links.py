from sqlmodel import Field, SQLModel


class BookGenreLink(SQLModel, table=True):
    """
    Many-to-many link between books and genres.

    Has no attributes of its own. Rows are removed by the store when
    either side is deleted.
    """

    __tablename__ = "book_genre_link"
    __table_args__ = {"extend_existing": True}

    book_id: int = Field(
        foreign_key="book.id", primary_key=True, ondelete="CASCADE"
    )
    genre_id: int = Field(
        foreign_key="genre.id", primary_key=True, ondelete="CASCADE"
    )
