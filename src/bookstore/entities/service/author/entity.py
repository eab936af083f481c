"""Entity: Author."""

from typing import Any

from pydantic import Field

from src.bookstore.entities.core._base import Entity


class Author(Entity):
    """Author of one or more books."""

    name: str = Field(min_length=1, description="Author's display name")
    description: str | None = Field(default=None, description="Short biography")

    def __eq__(self, other: Any) -> bool:
        """Compare authors by business attributes, ignoring timestamps."""
        if not isinstance(other, Author):
            return False
        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.description))
