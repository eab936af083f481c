"""Publisher database table model."""

from sqlmodel import Field

from src.bookstore.entities.core._base import EntityTable


class PublisherTable(EntityTable, table=True):
    """Database persistence model for publishers."""

    name: str = Field(index=True, unique=True)
    address: str | None = None
