"""Shopping cart operations."""

from loguru import logger

from src.bookstore.core.exceptions import EntityNotFoundError
from src.bookstore.core.models.cart import CartDetail, CartLine
from src.bookstore.core.services.database import UnitOfWork
from src.bookstore.entities import Cart, CartItem


class CartService:
    """Each user owns one cart, created the first time it is needed.

    Lines pointing at books that were deleted after being added are dropped
    whenever the cart is read.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def _get_or_create_cart(self, user_id: str) -> Cart:
        cart = self._uow.carts.get_by_user(user_id)
        if cart is None:
            cart = self._uow.carts.create(Cart(user_id=user_id))
        return cart

    def _require_line(self, cart: Cart, item_id: str) -> CartItem:
        item = self._uow.cart_items.get(item_id)
        if item is None or item.cart_id != cart.id:
            raise EntityNotFoundError("Cart item", item_id)
        return item

    def _detail(self, cart: Cart) -> CartDetail:
        lines: list[CartLine] = []
        for item in self._uow.cart_items.list_for_cart(cart.id):
            book = self._uow.books.get_active(item.book_id)
            if book is None:
                logger.info("Dropping stale cart line {} (book {})", item.id, item.book_id)
                self._uow.cart_items.delete(item.id)
                continue
            lines.append(
                CartLine(
                    id=item.id,
                    book_id=book.id,
                    book_title=book.title,
                    unit_price=book.price,
                    quantity=item.quantity,
                    line_total=round(book.price * item.quantity, 2),
                )
            )
        return CartDetail(
            id=cart.id,
            user_id=cart.user_id,
            items=lines,
            total_quantity=sum(line.quantity for line in lines),
            total=round(sum(line.line_total for line in lines), 2),
        )

    def get_cart(self, user_id: str) -> CartDetail:
        cart = self._get_or_create_cart(user_id)
        detail = self._detail(cart)
        self._uow.commit()
        return detail

    def add_item(self, user_id: str, book_id: str, quantity: int = 1) -> CartDetail:
        if self._uow.books.get_active(book_id) is None:
            raise EntityNotFoundError("Book", book_id)

        cart = self._get_or_create_cart(user_id)
        line = self._uow.cart_items.get_line(cart.id, book_id)
        if line is None:
            self._uow.cart_items.create(
                CartItem(cart_id=cart.id, book_id=book_id, quantity=quantity)
            )
        else:
            self._uow.cart_items.update(
                line.model_copy(update={"quantity": line.quantity + quantity})
            )

        detail = self._detail(cart)
        self._uow.commit()
        return detail

    def update_item(self, user_id: str, item_id: str, quantity: int) -> CartDetail:
        """Set a line's quantity; 0 removes the line."""
        cart = self._get_or_create_cart(user_id)
        line = self._require_line(cart, item_id)
        if quantity <= 0:
            self._uow.cart_items.delete(line.id)
        else:
            self._uow.cart_items.update(line.model_copy(update={"quantity": quantity}))

        detail = self._detail(cart)
        self._uow.commit()
        return detail

    def remove_item(self, user_id: str, item_id: str) -> CartDetail:
        cart = self._get_or_create_cart(user_id)
        line = self._require_line(cart, item_id)
        self._uow.cart_items.delete(line.id)

        detail = self._detail(cart)
        self._uow.commit()
        return detail

    def clear(self, user_id: str) -> int:
        cart = self._uow.carts.get_by_user(user_id)
        if cart is None:
            return 0
        removed = self._uow.cart_items.delete_for_cart(cart.id)
        self._uow.commit()
        return removed
