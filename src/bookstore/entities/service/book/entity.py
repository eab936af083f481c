"""Entity: Book."""

from enum import IntEnum
from typing import Any

from pydantic import Field

from src.bookstore.entities.core._base import Entity


class BookSearchKey(IntEnum):
    """Field a paged search term is matched against."""

    TITLE = 0
    AUTHOR = 1
    PUBLISHER = 2
    CATEGORY = 3
    SKU = 4


class Book(Entity):
    """Book entity representing a title offered by the store.

    Books are never removed physically because order lines keep pointing at them;
    deleting a book flips ``is_deleted`` and hides it from every listing.
    """

    title: str = Field(min_length=1, description="Book title")
    pages: int = Field(gt=0, description="Number of pages")
    description: str | None = Field(default=None, description="Blurb")
    sku: str = Field(min_length=1, description="Stock keeping unit, unique per book")
    price: float = Field(ge=0, description="Unit price")
    author_id: str = Field(description="Author reference")
    publisher_id: str = Field(description="Publisher reference")
    category_id: str | None = Field(default=None, description="Category reference")
    is_deleted: bool = Field(default=False, description="Soft-delete flag")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.pages == other.pages
            and self.description == other.description
            and self.sku == other.sku
            and self.price == other.price
            and self.author_id == other.author_id
            and self.publisher_id == other.publisher_id
            and self.category_id == other.category_id
            and self.is_deleted == other.is_deleted
        )

    def __hash__(self) -> int:
        return hash((self.id, self.title, self.sku))


class Photo(Entity):
    """Image of a book stored on the external image host."""

    book_id: str = Field(description="Owning book")
    url: str = Field(description="Public URL of the hosted image")
    public_id: str = Field(description="Identifier of the asset on the image host")
    is_main: bool = Field(default=False, description="Shown as the cover image")
