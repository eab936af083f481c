"""Entity: Publisher."""

from typing import Any

from pydantic import Field

from src.bookstore.entities.core._base import Entity


class Publisher(Entity):
    """Publishing house."""

    name: str = Field(min_length=1, description="Publisher name")
    address: str | None = Field(default=None, description="Postal address")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Publisher):
            return False
        return (
            self.id == other.id
            and self.name == other.name
            and self.address == other.address
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.address))
