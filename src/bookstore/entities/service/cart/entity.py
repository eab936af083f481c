"""Entity: Cart."""

from pydantic import Field

from src.bookstore.entities.core._base import Entity


class Cart(Entity):
    """Shopping cart; each user owns at most one."""

    user_id: str = Field(description="Owning user")


class CartItem(Entity):
    """A book and quantity placed in a cart."""

    cart_id: str = Field(description="Owning cart")
    book_id: str = Field(description="Book in the cart")
    quantity: int = Field(gt=0, description="Number of copies")
