"""Request and response models for books."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.bookstore.core.models.common import PartialUpdate
from src.bookstore.entities import Photo


class BookCreate(BaseModel):
    """Payload of the new-book form; author and publisher are given by name."""

    title: str = Field(min_length=1)
    pages: int = Field(gt=0)
    description: str | None = None
    sku: str = Field(min_length=1)
    price: float = Field(ge=0)
    author_name: str = Field(min_length=1)
    publisher_name: str = Field(min_length=1)
    category_id: str | None = None


class BookUpdate(PartialUpdate):
    """Partial update; only supplied fields change."""

    required_fields = (
        "title",
        "pages",
        "sku",
        "price",
        "author_name",
        "publisher_name",
    )

    title: str | None = Field(default=None, min_length=1)
    pages: int | None = Field(default=None, gt=0)
    description: str | None = None
    sku: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    author_name: str | None = Field(default=None, min_length=1)
    publisher_name: str | None = Field(default=None, min_length=1)
    category_id: str | None = None


class BookDetail(BaseModel):
    """Book with resolved author, publisher and category names and its photos."""

    id: str
    title: str
    pages: int
    description: str | None
    sku: str
    price: float
    author_id: str
    author_name: str | None
    publisher_id: str
    publisher_name: str | None
    category_id: str | None
    category_name: str | None
    photos: list[Photo]
    main_photo_url: str | None
    created_at: datetime
    updated_at: datetime
