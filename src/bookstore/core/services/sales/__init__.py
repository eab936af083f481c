from .cart_service import CartService
from .order_service import OrderService

__all__ = ["CartService", "OrderService"]
