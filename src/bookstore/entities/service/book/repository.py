"""Book and photo repositories."""

from typing import Any

from sqlmodel import col, func, select

from src.bookstore.entities.core._repository import EntityRepository
from src.bookstore.entities.service.author.table import AuthorTable
from src.bookstore.entities.service.category.table import CategoryTable
from src.bookstore.entities.service.publisher.table import PublisherTable

from .entity import Book, BookSearchKey, Photo
from .table import BookTable, PhotoTable

_ACTIVE = BookTable.is_deleted == False  # noqa: E712


class BookRepository(EntityRepository[Book, BookTable]):
    """Data-access layer for books.

    Listing and search queries skip soft-deleted rows; ``get``, ``get_by_sku``
    and ``count_referencing`` do not.
    """

    entity_type = Book
    table_type = BookTable
    entity_name = "Book"
    default_order = ("title", "id")

    def get_active(self, book_id: str) -> Book | None:
        book = self.get(book_id)
        if book is None or book.is_deleted:
            return None
        return book

    def get_by_sku(self, sku: str) -> Book | None:
        """Look up by SKU, including soft-deleted books (SKUs are never reused)."""
        statement = select(BookTable).where(BookTable.sku == sku)
        row = self._session.exec(statement).first()
        return self._to_entity(row) if row is not None else None

    def list_active(self) -> list[Book]:
        statement = select(BookTable).where(_ACTIVE).order_by(*self._order_by())
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def list_by_category_name(self, category_name: str) -> list[Book]:
        statement = (
            select(BookTable)
            .join(CategoryTable, CategoryTable.id == BookTable.category_id)
            .where(func.lower(CategoryTable.name) == category_name.strip().lower())
            .where(_ACTIVE)
            .order_by(*self._order_by())
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def search_by_title(self, search_title: str) -> list[Book]:
        statement = select(BookTable).where(_ACTIVE)
        if search_title:
            statement = statement.where(
                col(BookTable.title).icontains(search_title.strip(), autoescape=True)
            )
        statement = statement.order_by(*self._order_by())
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def _search_statement(self, search_key: BookSearchKey, search_title: str) -> Any:
        statement = select(BookTable).where(_ACTIVE)
        term = search_title.strip()
        if not term:
            return statement

        if search_key is BookSearchKey.AUTHOR:
            statement = statement.join(AuthorTable, AuthorTable.id == BookTable.author_id)
            column: Any = AuthorTable.name
        elif search_key is BookSearchKey.PUBLISHER:
            statement = statement.join(
                PublisherTable, PublisherTable.id == BookTable.publisher_id
            )
            column = PublisherTable.name
        elif search_key is BookSearchKey.CATEGORY:
            statement = statement.join(
                CategoryTable, CategoryTable.id == BookTable.category_id
            )
            column = CategoryTable.name
        elif search_key is BookSearchKey.SKU:
            column = BookTable.sku
        else:
            column = BookTable.title

        return statement.where(col(column).icontains(term, autoescape=True))

    def get_page(
        self,
        search_key: BookSearchKey,
        search_title: str,
        page: int,
        page_size: int,
    ) -> tuple[list[Book], int]:
        """Return one page of matching books and the total number of matches."""
        statement = self._search_statement(search_key, search_title)

        count_statement = select(func.count()).select_from(statement.subquery())
        total_row = self._session.exec(count_statement).one()

        paged = (
            statement.order_by(*self._order_by())
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        books = [self._to_entity(row) for row in self._session.exec(paged).all()]
        return books, total_row

    def count_referencing(self, column: str, entity_id: str) -> int:
        """Count books whose ``column`` (author_id, publisher_id, category_id) points at ``entity_id``.

        Soft-deleted books are counted too; their rows still hold the foreign key.
        """
        statement = (
            select(func.count())
            .select_from(BookTable)
            .where(getattr(BookTable, column) == entity_id)
        )
        return self._session.exec(statement).one()


class PhotoRepository(EntityRepository[Photo, PhotoTable]):
    """Data-access layer for book photos."""

    entity_type = Photo
    table_type = PhotoTable
    entity_name = "Photo"

    def list_for_book(self, book_id: str) -> list[Photo]:
        statement = (
            select(PhotoTable)
            .where(PhotoTable.book_id == book_id)
            .order_by(PhotoTable.created_at, PhotoTable.id)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def get_for_book(self, book_id: str, photo_id: str) -> Photo | None:
        photo = self.get(photo_id)
        if photo is None or photo.book_id != book_id:
            return None
        return photo
