"""Entity: Order."""

from enum import StrEnum

from pydantic import Field

from src.bookstore.entities.core._base import Entity


class OrderStatus(StrEnum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPING = "shipping"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPING, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPING: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


class Order(Entity):
    """A checked-out cart."""

    user_id: str = Field(description="Customer who placed the order")
    status: OrderStatus = Field(default=OrderStatus.PENDING)
    total: float = Field(ge=0, description="Sum of all line totals")
    shipping_address: str = Field(min_length=1)
    phone: str | None = None
    note: str | None = None

    def can_transition_to(self, status: OrderStatus) -> bool:
        return status in ALLOWED_TRANSITIONS[self.status]

    @property
    def is_cancellable(self) -> bool:
        return self.can_transition_to(OrderStatus.CANCELLED)


class OrderItem(Entity):
    """Order line; title and price are copied from the book at checkout."""

    order_id: str
    book_id: str
    book_title: str
    unit_price: float = Field(ge=0)
    quantity: int = Field(gt=0)

    @property
    def line_total(self) -> float:
        return round(self.unit_price * self.quantity, 2)
