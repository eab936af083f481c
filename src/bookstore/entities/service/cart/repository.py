"""Cart repositories."""

from sqlmodel import select

from src.bookstore.entities.core._repository import EntityRepository

from .entity import Cart, CartItem
from .table import CartItemTable, CartTable


class CartRepository(EntityRepository[Cart, CartTable]):
    """Data-access layer for carts."""

    entity_type = Cart
    table_type = CartTable
    entity_name = "Cart"

    def get_by_user(self, user_id: str) -> Cart | None:
        statement = select(CartTable).where(CartTable.user_id == user_id)
        row = self._session.exec(statement).first()
        return self._to_entity(row) if row is not None else None


class CartItemRepository(EntityRepository[CartItem, CartItemTable]):
    """Data-access layer for cart lines."""

    entity_type = CartItem
    table_type = CartItemTable
    entity_name = "Cart item"

    def list_for_cart(self, cart_id: str) -> list[CartItem]:
        statement = (
            select(CartItemTable)
            .where(CartItemTable.cart_id == cart_id)
            .order_by(CartItemTable.created_at, CartItemTable.id)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def get_line(self, cart_id: str, book_id: str) -> CartItem | None:
        statement = select(CartItemTable).where(
            CartItemTable.cart_id == cart_id, CartItemTable.book_id == book_id
        )
        row = self._session.exec(statement).first()
        return self._to_entity(row) if row is not None else None

    def delete_for_cart(self, cart_id: str) -> int:
        statement = select(CartItemTable).where(CartItemTable.cart_id == cart_id)
        rows = self._session.exec(statement).all()
        for row in rows:
            self._session.delete(row)
        self._session.flush()
        return len(rows)
