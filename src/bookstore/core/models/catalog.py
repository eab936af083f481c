"""Request models for authors, publishers and categories."""

from pydantic import BaseModel, Field

from src.bookstore.core.models.common import PartialUpdate


class AuthorCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str | None = None


class AuthorUpdate(PartialUpdate):
    required_fields = ("name",)

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None


class PublisherCreate(BaseModel):
    name: str = Field(min_length=1)
    address: str | None = None


class PublisherUpdate(PartialUpdate):
    required_fields = ("name",)

    name: str | None = Field(default=None, min_length=1)
    address: str | None = None


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str | None = None


class CategoryUpdate(PartialUpdate):
    required_fields = ("name",)

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
