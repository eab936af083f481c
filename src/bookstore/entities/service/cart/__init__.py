"""Entity package: Cart and its items."""

from .entity import Cart, CartItem
from .repository import CartItemRepository, CartRepository
from .table import CartItemTable, CartTable

__all__ = [
    "Cart",
    "CartItem",
    "CartItemRepository",
    "CartItemTable",
    "CartRepository",
    "CartTable",
]
