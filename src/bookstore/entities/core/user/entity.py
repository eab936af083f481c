"""User domain entity."""

from enum import StrEnum
from typing import Any

from pydantic import Field

from src.bookstore.entities.core._base import Entity


class UserRole(StrEnum):
    ADMIN = "admin"
    CUSTOMER = "customer"


class User(Entity):
    """User entity representing a store administrator or customer.

    The password hash travels with the entity so services can verify
    credentials, but it is excluded from every serialized representation.
    """

    username: str = Field(min_length=3, description="Login name")
    email: str = Field(description="User's email address")
    first_name: str = Field(description="User's first name")
    last_name: str = Field(description="User's last name")
    phone: str | None = Field(default=None, description="User's phone number")
    address: str | None = Field(default=None, description="User's address")
    role: UserRole = Field(default=UserRole.CUSTOMER, description="Access role")
    password_hash: str | None = Field(default=None, exclude=True, repr=False)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.username == other.username
            and self.email == other.email
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.phone == other.phone
            and self.address == other.address
            and self.role == other.role
        )

    def __hash__(self) -> int:
        return hash((self.id, self.username, self.email))
