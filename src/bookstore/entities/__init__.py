"""Entities module with an entity-centric structure.

Each entity package holds:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .core.user import User, UserRepository, UserRole, UserTable
from .service.author import Author, AuthorRepository, AuthorTable
from .service.book import (
    Book,
    BookRepository,
    BookSearchKey,
    BookTable,
    Photo,
    PhotoRepository,
    PhotoTable,
)
from .service.cart import (
    Cart,
    CartItem,
    CartItemRepository,
    CartItemTable,
    CartRepository,
    CartTable,
)
from .service.category import Category, CategoryRepository, CategoryTable
from .service.order import (
    Order,
    OrderItem,
    OrderItemRepository,
    OrderItemTable,
    OrderRepository,
    OrderStatus,
    OrderTable,
)
from .service.publisher import Publisher, PublisherRepository, PublisherTable

__all__ = [
    "Author",
    "AuthorRepository",
    "AuthorTable",
    "Book",
    "BookRepository",
    "BookSearchKey",
    "BookTable",
    "Cart",
    "CartItem",
    "CartItemRepository",
    "CartItemTable",
    "CartRepository",
    "CartTable",
    "Category",
    "CategoryRepository",
    "CategoryTable",
    "Order",
    "OrderItem",
    "OrderItemRepository",
    "OrderItemTable",
    "OrderRepository",
    "OrderStatus",
    "OrderTable",
    "Photo",
    "PhotoRepository",
    "PhotoTable",
    "Publisher",
    "PublisherRepository",
    "PublisherTable",
    "User",
    "UserRepository",
    "UserRole",
    "UserTable",
]
