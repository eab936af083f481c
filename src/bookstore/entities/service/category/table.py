"""Category database table model."""

from sqlmodel import Field

from src.bookstore.entities.core._base import EntityTable


class CategoryTable(EntityTable, table=True):
    """Database persistence model for categories."""

    name: str = Field(index=True, unique=True)
    description: str | None = None
