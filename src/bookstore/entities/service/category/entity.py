"""Entity: Category."""

from typing import Any

from pydantic import Field

from src.bookstore.entities.core._base import Entity


class Category(Entity):
    """Book category such as economics, literature or life skills."""

    name: str = Field(min_length=1, description="Category name")
    description: str | None = Field(default=None, description="Category description")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Category):
            return False
        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.description))
