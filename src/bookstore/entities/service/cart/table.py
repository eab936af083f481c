"""Cart database table models."""

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from src.bookstore.entities.core._base import EntityTable


class CartTable(EntityTable, table=True):
    """Database persistence model for carts."""

    user_id: str = Field(foreign_key="usertable.id", unique=True, index=True)


class CartItemTable(EntityTable, table=True):
    """Database persistence model for cart lines."""

    __table_args__ = (UniqueConstraint("cart_id", "book_id"),)

    cart_id: str = Field(foreign_key="carttable.id", index=True)
    book_id: str = Field(foreign_key="booktable.id", index=True)
    quantity: int
