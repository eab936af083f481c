"""Checkout and order lifecycle."""

from loguru import logger

from src.bookstore.core.exceptions import DomainValidationError, EntityNotFoundError
from src.bookstore.core.models.order import OrderCreate, OrderDetail, OrderLine
from src.bookstore.core.services.database import UnitOfWork
from src.bookstore.entities import Order, OrderItem, OrderStatus, User


class OrderService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def _detail(self, order: Order) -> OrderDetail:
        items = self._uow.order_items.list_for_order(order.id)
        return OrderDetail(
            **order.model_dump(),
            items=[
                OrderLine(
                    id=item.id,
                    book_id=item.book_id,
                    book_title=item.book_title,
                    unit_price=item.unit_price,
                    quantity=item.quantity,
                    line_total=item.line_total,
                )
                for item in items
            ],
        )

    def create_order(self, user_id: str, new_order: OrderCreate) -> OrderDetail:
        """Check out the user's cart into a new pending order and empty the cart.

        Each line copies the book's current title and price.
        """
        cart = self._uow.carts.get_by_user(user_id)

        lines: list[tuple[str, str, float, int]] = []
        for item in self._uow.cart_items.list_for_cart(cart.id) if cart else []:
            book = self._uow.books.get_active(item.book_id)
            if book is None:
                continue
            lines.append((book.id, book.title, book.price, item.quantity))

        if cart is None or not lines:
            logger.warning("Checkout rejected for user {}: cart is empty", user_id)
            raise DomainValidationError("Cannot place an order with an empty cart")

        total = round(sum(price * qty for _, _, price, qty in lines), 2)
        order = self._uow.orders.create(
            Order(user_id=user_id, total=total, **new_order.model_dump())
        )
        for book_id, title, price, quantity in lines:
            self._uow.order_items.create(
                OrderItem(
                    order_id=order.id,
                    book_id=book_id,
                    book_title=title,
                    unit_price=price,
                    quantity=quantity,
                )
            )

        self._uow.cart_items.delete_for_cart(cart.id)
        self._uow.commit()
        logger.info("Order placed: {} by {} (total {})", order.id, user_id, total)
        return self._detail(order)

    def get_orders(self, user_id: str | None = None) -> list[Order]:
        """All orders, or only ``user_id``'s, newest first."""
        return self._uow.orders.list_newest_first(user_id)

    def get_order_detail(self, order_id: str) -> OrderDetail | None:
        order = self._uow.orders.get(order_id)
        if order is None:
            return None
        return self._detail(order)

    def get_order_for_user(self, order_id: str, user: User) -> OrderDetail:
        """Order detail visible to ``user``; customers only see their own orders."""
        order = self._uow.orders.get(order_id)
        # hide other customers' orders behind a 404
        if order is None or (not user.is_admin and order.user_id != user.id):
            raise EntityNotFoundError("Order", order_id)
        return self._detail(order)

    def update_status(self, order_id: str, status: OrderStatus) -> OrderDetail:
        order = self._uow.orders.get(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)

        if not order.can_transition_to(status):
            logger.warning(
                "Rejected status change for order {}: {} -> {}",
                order_id,
                order.status,
                status,
            )
            raise DomainValidationError(
                f"Cannot change order status from {order.status} to {status}"
            )

        updated = self._uow.orders.update(order.model_copy(update={"status": status}))
        self._uow.commit()
        logger.info("Order {} status: {} -> {}", order_id, order.status, status)
        return self._detail(updated)

    def cancel_order(self, order_id: str, user: User) -> OrderDetail:
        order = self._uow.orders.get(order_id)
        if order is None or (not user.is_admin and order.user_id != user.id):
            raise EntityNotFoundError("Order", order_id)
        if not order.is_cancellable:
            raise DomainValidationError(f"An order that is {order.status} cannot be cancelled")

        updated = self._uow.orders.update(
            order.model_copy(update={"status": OrderStatus.CANCELLED})
        )
        self._uow.commit()
        logger.info("Order cancelled: {} by {}", order_id, user.id)
        return self._detail(updated)
