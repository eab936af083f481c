"""Data layer tests: entities, table conversion and repositories.

Repositories run against an in-memory SQLite database, so queries, joins and
constraints are exercised for real.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from src.bookstore.core.exceptions import EntityNotFoundError
from src.bookstore.entities import (
    Author,
    Book,
    BookSearchKey,
    Cart,
    CartItem,
    Order,
    OrderItem,
    OrderStatus,
    Photo,
    Publisher,
    User,
    UserRole,
)


class TestEntities:
    """Domain entities and their invariants."""

    def test_entity_defaults(self):
        author = Author(name="Ursula K. Le Guin")

        assert author.id
        assert author.created_at is not None
        assert author.updated_at is not None

    def test_entity_ids_are_unique(self):
        assert Author(name="A").id != Author(name="A").id

    def test_book_rejects_non_positive_pages(self):
        with pytest.raises(ValueError):
            Book(title="T", pages=0, sku="S", price=1, author_id="a", publisher_id="p")

    def test_book_rejects_negative_price(self):
        with pytest.raises(ValueError):
            Book(title="T", pages=1, sku="S", price=-1, author_id="a", publisher_id="p")

    def test_user_password_hash_never_serialized(self):
        user = User(
            username="reader",
            email="reader@example.com",
            first_name="Ada",
            last_name="Reader",
            password_hash="hashed",
        )

        assert "password_hash" not in user.model_dump()
        assert "hashed" not in user.model_dump_json()
        assert "hashed" not in repr(user)
        assert user.full_name == "Ada Reader"
        assert user.role == UserRole.CUSTOMER
        assert not user.is_admin

    def test_user_equality_ignores_timestamps(self):
        user = User(username="abc", email="a@b.c", first_name="A", last_name="B")
        copy = user.model_copy(update={"updated_at": user.updated_at.replace(year=2000)})

        assert user == copy

    @pytest.mark.parametrize(
        ("current", "target", "allowed"),
        [
            (OrderStatus.PENDING, OrderStatus.CONFIRMED, True),
            (OrderStatus.PENDING, OrderStatus.CANCELLED, True),
            (OrderStatus.CONFIRMED, OrderStatus.SHIPPING, True),
            (OrderStatus.CONFIRMED, OrderStatus.CANCELLED, True),
            (OrderStatus.SHIPPING, OrderStatus.DELIVERED, True),
            (OrderStatus.SHIPPING, OrderStatus.CANCELLED, False),
            (OrderStatus.PENDING, OrderStatus.DELIVERED, False),
            (OrderStatus.DELIVERED, OrderStatus.PENDING, False),
            (OrderStatus.CANCELLED, OrderStatus.CONFIRMED, False),
        ],
    )
    def test_order_status_transitions(self, current, target, allowed):
        order = Order(user_id="u", total=0, shipping_address="x", status=current)

        assert order.can_transition_to(target) is allowed

    def test_order_item_line_total(self):
        item = OrderItem(
            order_id="o", book_id="b", book_title="T", unit_price=9.99, quantity=3
        )

        assert item.line_total == 29.97


class TestEntityRepository:
    """Generic CRUD behaviour, exercised through the author repository."""

    def test_create_and_get(self, uow):
        created = uow.authors.create(Author(name="Tolkien", description="Linguist"))

        fetched = uow.authors.get(created.id)
        assert fetched == created

    def test_get_missing_returns_none(self, uow):
        assert uow.authors.get("missing") is None

    def test_update_persists_and_touches_updated_at(self, uow):
        created = uow.authors.create(Author(name="Tolkien"))

        updated = uow.authors.update(created.model_copy(update={"description": "Prof."}))

        assert updated.description == "Prof."
        assert uow.authors.get(created.id).description == "Prof."

    def test_update_missing_raises(self, uow):
        with pytest.raises(EntityNotFoundError):
            uow.authors.update(Author(name="Ghost"))

    def test_delete(self, uow):
        created = uow.authors.create(Author(name="Tolkien"))

        assert uow.authors.delete(created.id) is True
        assert uow.authors.get(created.id) is None
        assert uow.authors.delete(created.id) is False

    def test_list_all_and_count(self, uow):
        for name in ("Zadie Smith", "Agatha Christie"):
            uow.authors.create(Author(name=name))

        assert [a.name for a in uow.authors.list_all()] == [
            "Agatha Christie",
            "Zadie Smith",
        ]
        assert uow.authors.count() == 2

    def test_get_by_name_is_case_insensitive(self, uow):
        uow.publishers.create(Publisher(name="Penguin"))

        assert uow.publishers.get_by_name("  penguin ") is not None
        assert uow.publishers.get_by_name("Puffin") is None

    def test_unique_name_enforced_by_table(self, uow, session):
        uow.authors.create(Author(name="Tolkien"))

        with pytest.raises(IntegrityError):
            uow.authors.create(Author(name="Tolkien"))
        session.rollback()


class TestBookRepository:
    """Listing, search and paging queries."""

    def test_soft_deleted_books_are_hidden(self, uow, book_factory):
        kept = book_factory(title="Kept")
        gone = book_factory(title="Gone")
        uow.books.update(gone.model_copy(update={"is_deleted": True}))

        assert [b.id for b in uow.books.list_active()] == [kept.id]
        assert uow.books.get_active(gone.id) is None
        assert uow.books.get(gone.id) is not None

    def test_get_by_sku_includes_deleted(self, uow, book_factory):
        book = book_factory(sku="ISBN-1")
        uow.books.update(book.model_copy(update={"is_deleted": True}))

        assert uow.books.get_by_sku("ISBN-1").id == book.id

    def test_list_by_category_name(self, uow, book_factory, category):
        in_category = book_factory(category_id=category.id)
        book_factory()

        result = uow.books.list_by_category_name("FANTASY")

        assert [b.id for b in result] == [in_category.id]
        assert uow.books.list_by_category_name("Unknown") == []

    def test_search_by_title_escapes_wildcards(self, uow, book_factory):
        book_factory(title="100% Pure")
        book_factory(title="1000 Pure")

        assert [b.title for b in uow.books.search_by_title("100%")] == ["100% Pure"]

    def test_get_page_counts_all_matches(self, uow, book_factory):
        for _ in range(7):
            book_factory()

        page, total = uow.books.get_page(BookSearchKey.TITLE, "", 2, 3)

        assert total == 7
        assert [b.title for b in page] == ["Book 004", "Book 005", "Book 006"]

    def test_get_page_by_author(self, uow, book_factory):
        book_factory(author_name="Terry Pratchett")
        book_factory(author_name="Terry Pratchett")
        book_factory(author_name="Neil Gaiman")

        page, total = uow.books.get_page(BookSearchKey.AUTHOR, "pratchett", 1, 10)

        assert total == 2
        assert len(page) == 2

    def test_count_referencing_includes_soft_deleted(self, uow, book_factory):
        book = book_factory()
        assert uow.books.count_referencing("author_id", book.author_id) == 1

        uow.books.update(book.model_copy(update={"is_deleted": True}))
        assert uow.books.count_referencing("author_id", book.author_id) == 1

    def test_photos_for_book(self, uow, book_factory):
        book = book_factory()
        other = book_factory()
        photo = uow.photos.create(
            Photo(book_id=book.id, url="https://x/1.jpg", public_id="p1", is_main=True)
        )

        assert [p.id for p in uow.photos.list_for_book(book.id)] == [photo.id]
        assert uow.photos.get_for_book(other.id, photo.id) is None


class TestCartAndOrderRepositories:
    def test_one_cart_line_per_book(self, uow, session, user_factory, book_factory):
        user = user_factory()
        book = book_factory()
        cart = uow.carts.create(Cart(user_id=user.id))
        uow.cart_items.create(CartItem(cart_id=cart.id, book_id=book.id, quantity=1))

        assert uow.cart_items.get_line(cart.id, book.id).quantity == 1
        with pytest.raises(IntegrityError):
            uow.cart_items.create(CartItem(cart_id=cart.id, book_id=book.id, quantity=2))
        session.rollback()

    def test_delete_for_cart(self, uow, user_factory, book_factory):
        user = user_factory()
        cart = uow.carts.create(Cart(user_id=user.id))
        for _ in range(3):
            uow.cart_items.create(
                CartItem(cart_id=cart.id, book_id=book_factory().id, quantity=1)
            )

        assert uow.cart_items.delete_for_cart(cart.id) == 3
        assert uow.cart_items.list_for_cart(cart.id) == []

    def test_orders_filtered_by_user(self, uow, user_factory):
        alice = user_factory()
        bob = user_factory()
        uow.orders.create(Order(user_id=alice.id, total=1, shipping_address="A st"))
        uow.orders.create(Order(user_id=bob.id, total=2, shipping_address="B st"))

        assert {o.user_id for o in uow.orders.list_newest_first()} == {alice.id, bob.id}
        assert [o.user_id for o in uow.orders.list_newest_first(alice.id)] == [alice.id]
        assert uow.orders.count_for_user(bob.id) == 1

    def test_order_status_round_trips_as_enum(self, uow, user_factory):
        user = user_factory()
        order = uow.orders.create(
            Order(user_id=user.id, total=5, shipping_address="x")
        )
        uow.orders.update(order.model_copy(update={"status": OrderStatus.SHIPPING}))

        assert uow.orders.get(order.id).status is OrderStatus.SHIPPING


class TestUserRepository:
    def test_lookup_by_username_and_email(self, uow, user_factory):
        user = user_factory(username="Reader", email="Reader@Example.com")

        assert uow.users.get_by_username("reader").id == user.id
        assert uow.users.get_by_email("reader@example.com").id == user.id
        assert uow.users.get_by_username("nobody") is None

    def test_password_hash_persisted(self, uow, user_factory):
        user = user_factory()

        assert uow.users.get(user.id).password_hash
