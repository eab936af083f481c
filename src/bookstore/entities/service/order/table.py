"""Order database table models."""

from sqlmodel import Field

from src.bookstore.entities.core._base import EntityTable


class OrderTable(EntityTable, table=True):
    """Database persistence model for orders."""

    user_id: str = Field(foreign_key="usertable.id", index=True)
    status: str = Field(default="pending", index=True)
    total: float
    shipping_address: str
    phone: str | None = None
    note: str | None = None


class OrderItemTable(EntityTable, table=True):
    """Database persistence model for order lines."""

    order_id: str = Field(foreign_key="ordertable.id", index=True)
    book_id: str = Field(foreign_key="booktable.id", index=True)
    book_title: str
    unit_price: float
    quantity: int
