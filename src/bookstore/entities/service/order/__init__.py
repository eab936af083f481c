"""Entity package: Order and its items."""

from .entity import Order, OrderItem, OrderStatus
from .repository import OrderItemRepository, OrderRepository
from .table import OrderItemTable, OrderTable

__all__ = [
    "Order",
    "OrderItem",
    "OrderItemRepository",
    "OrderItemTable",
    "OrderRepository",
    "OrderStatus",
    "OrderTable",
]
