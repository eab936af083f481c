"""Order repositories."""

from sqlmodel import col, func, select

from src.bookstore.entities.core._repository import EntityRepository

from .entity import Order, OrderItem
from .table import OrderItemTable, OrderTable


class OrderRepository(EntityRepository[Order, OrderTable]):
    """Data-access layer for orders."""

    entity_type = Order
    table_type = OrderTable
    entity_name = "Order"

    def list_newest_first(self, user_id: str | None = None) -> list[Order]:
        statement = select(OrderTable)
        if user_id is not None:
            statement = statement.where(OrderTable.user_id == user_id)
        statement = statement.order_by(
            col(OrderTable.created_at).desc(), col(OrderTable.id).desc()
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def count_for_user(self, user_id: str) -> int:
        statement = (
            select(func.count())
            .select_from(OrderTable)
            .where(OrderTable.user_id == user_id)
        )
        return self._session.exec(statement).one()


class OrderItemRepository(EntityRepository[OrderItem, OrderItemTable]):
    """Data-access layer for order lines."""

    entity_type = OrderItem
    table_type = OrderItemTable
    entity_name = "Order item"

    def list_for_order(self, order_id: str) -> list[OrderItem]:
        statement = (
            select(OrderItemTable)
            .where(OrderItemTable.order_id == order_id)
            .order_by(OrderItemTable.created_at, OrderItemTable.id)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]
