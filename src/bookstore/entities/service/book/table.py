"""Book and photo database table models."""

from sqlmodel import Field

from src.bookstore.entities.core._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books."""

    title: str = Field(index=True)
    pages: int
    description: str | None = None
    sku: str = Field(index=True, unique=True)
    price: float
    author_id: str = Field(foreign_key="authortable.id", index=True)
    publisher_id: str = Field(foreign_key="publishertable.id", index=True)
    category_id: str | None = Field(
        default=None, foreign_key="categorytable.id", index=True
    )
    is_deleted: bool = Field(default=False, index=True)


class PhotoTable(EntityTable, table=True):
    """Database persistence model for book photos."""

    book_id: str = Field(foreign_key="booktable.id", index=True)
    url: str
    public_id: str
    is_main: bool = False
