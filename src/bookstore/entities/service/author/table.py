"""Author database table model."""

from sqlmodel import Field

from src.bookstore.entities.core._base import EntityTable


class AuthorTable(EntityTable, table=True):
    """Database persistence model for authors."""

    name: str = Field(index=True, unique=True)
    description: str | None = None
