"""User database table model."""

from sqlmodel import Field

from src.bookstore.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    username: str = Field(index=True, unique=True)
    email: str = Field(index=True, unique=True)
    first_name: str
    last_name: str
    phone: str | None = None
    address: str | None = None
    role: str = Field(default="customer")
    password_hash: str | None = None
