"""Unit of work grouping the repositories that share one database session."""

from functools import cached_property

from loguru import logger
from sqlmodel import Session

from src.bookstore.entities import (
    AuthorRepository,
    BookRepository,
    CartItemRepository,
    CartRepository,
    CategoryRepository,
    OrderItemRepository,
    OrderRepository,
    PhotoRepository,
    PublisherRepository,
    UserRepository,
)


class UnitOfWork:
    """Expose every repository over a single session and own its transaction.

    Services perform their reads and writes through the repositories and call
    ``commit`` once per operation; a failed commit is rolled back before the
    error propagates.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    @cached_property
    def books(self) -> BookRepository:
        return BookRepository(self.session)

    @cached_property
    def photos(self) -> PhotoRepository:
        return PhotoRepository(self.session)

    @cached_property
    def authors(self) -> AuthorRepository:
        return AuthorRepository(self.session)

    @cached_property
    def publishers(self) -> PublisherRepository:
        return PublisherRepository(self.session)

    @cached_property
    def categories(self) -> CategoryRepository:
        return CategoryRepository(self.session)

    @cached_property
    def carts(self) -> CartRepository:
        return CartRepository(self.session)

    @cached_property
    def cart_items(self) -> CartItemRepository:
        return CartItemRepository(self.session)

    @cached_property
    def orders(self) -> OrderRepository:
        return OrderRepository(self.session)

    @cached_property
    def order_items(self) -> OrderItemRepository:
        return OrderItemRepository(self.session)

    @cached_property
    def users(self) -> UserRepository:
        return UserRepository(self.session)

    def commit(self) -> None:
        try:
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.bind(error_type=type(e).__name__).error("Commit failed: {}", e)
            raise

    def rollback(self) -> None:
        self.session.rollback()
