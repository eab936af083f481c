from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel, model_validator

T = TypeVar("T")


class CreatedResponse(BaseModel):
    id: str


class MessageResponse(BaseModel):
    message: str


class Page(BaseModel, Generic[T]):
    """One page of results plus the number of rows matching before paging."""

    items: list[T]
    total_row: int
    page: int
    page_size: int


class PartialUpdate(BaseModel):
    """Base for partial updates.

    Omitted fields are left unchanged. Fields listed in ``required_fields`` may
    be omitted but not explicitly set to ``null``.
    """

    required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_explicit_nulls(self):
        nulled = [
            name
            for name in self.required_fields
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self
