"""Book catalog operations: listing, filtering, paging and CRUD."""

from loguru import logger

from src.bookstore.core.exceptions import (
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)
from src.bookstore.core.models.book import BookCreate, BookDetail, BookUpdate
from src.bookstore.core.services.database import UnitOfWork
from src.bookstore.entities import Book, BookSearchKey
from src.bookstore.runtime.context import get_config

from .author_service import AuthorService
from .publisher_service import PublisherService


class BookService:
    """Business rules for books.

    Authors and publishers are referenced by name on create and update and
    are created on the fly when no entity with that name exists yet.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow
        self._authors = AuthorService(uow)
        self._publishers = PublisherService(uow)

    def get_list_books(self) -> list[Book]:
        return self._uow.books.list_active()

    def get_books_by_category(self, category_name: str) -> list[Book]:
        return self._uow.books.list_by_category_name(category_name)

    def get_book_by_id(self, book_id: str) -> Book | None:
        return self._uow.books.get_active(book_id)

    def get_all_book_by_filter(self, search_title: str) -> list[Book]:
        return self._uow.books.search_by_title(search_title or "")

    def get_all_paging(
        self,
        search_key: int,
        search_title: str | None,
        page: int,
        page_size: int,
    ) -> tuple[list[Book], int]:
        """Return one page of books matching the search and the total match count.

        ``search_key`` picks the field ``search_title`` is matched against, see
        :class:`BookSearchKey`. Pages are 1-based.
        """
        try:
            key = BookSearchKey(search_key)
        except ValueError as e:
            raise DomainValidationError(f"Unknown search key: {search_key}") from e

        max_page_size = get_config().pagination.max_page_size
        if page < 1:
            raise DomainValidationError("page must be >= 1")
        if page_size < 1 or page_size > max_page_size:
            raise DomainValidationError(
                f"page_size must be between 1 and {max_page_size}"
            )

        return self._uow.books.get_page(key, search_title or "", page, page_size)

    def get_detail_book_data(self, book_id: str) -> BookDetail | None:
        book = self._uow.books.get_active(book_id)
        if book is None:
            return None

        author = self._uow.authors.get(book.author_id)
        publisher = self._uow.publishers.get(book.publisher_id)
        category = (
            self._uow.categories.get(book.category_id) if book.category_id else None
        )
        photos = self._uow.photos.list_for_book(book.id)
        main_photo = next((p for p in photos if p.is_main), None)

        return BookDetail(
            **book.model_dump(exclude={"is_deleted"}),
            author_name=author.name if author else None,
            publisher_name=publisher.name if publisher else None,
            category_name=category.name if category else None,
            photos=photos,
            main_photo_url=main_photo.url if main_photo else None,
        )

    def _ensure_sku_available(self, sku: str, current_id: str | None = None) -> None:
        existing = self._uow.books.get_by_sku(sku)
        if existing is not None and existing.id != current_id:
            raise ConflictError(f"A book with SKU '{sku}' already exists")

    def _ensure_category_exists(self, category_id: str | None) -> None:
        if category_id is not None and self._uow.categories.get(category_id) is None:
            raise EntityNotFoundError("Category", category_id)

    def add_new_book(self, new_book: BookCreate) -> str:
        """Create a book and return its id."""
        self._ensure_sku_available(new_book.sku)
        self._ensure_category_exists(new_book.category_id)

        author = self._authors.get_or_create(new_book.author_name)
        publisher = self._publishers.get_or_create(new_book.publisher_name)

        book = Book(
            **new_book.model_dump(exclude={"author_name", "publisher_name"}),
            author_id=author.id,
            publisher_id=publisher.id,
        )
        created = self._uow.books.create(book)
        self._uow.commit()
        logger.info("Book created: {} ({})", created.id, created.sku)
        return created.id

    def update_book(self, book_for_update: BookUpdate, book_id: str) -> bool:
        """Apply the supplied fields; ``False`` when the book does not exist."""
        book = self._uow.books.get_active(book_id)
        if book is None:
            return False

        changes = book_for_update.model_dump(
            exclude_unset=True, exclude={"author_name", "publisher_name"}
        )
        if changes.get("sku"):
            self._ensure_sku_available(changes["sku"], current_id=book_id)
        if "category_id" in changes:
            self._ensure_category_exists(changes["category_id"])
        if book_for_update.author_name:
            changes["author_id"] = self._authors.get_or_create(
                book_for_update.author_name
            ).id
        if book_for_update.publisher_name:
            changes["publisher_id"] = self._publishers.get_or_create(
                book_for_update.publisher_name
            ).id

        self._uow.books.update(book.model_copy(update=changes))
        self._uow.commit()
        logger.info("Book updated: {}", book_id)
        return True

    def delete_book(self, book_id: str) -> bool:
        """Soft-delete a book; ``False`` when it does not exist."""
        book = self._uow.books.get_active(book_id)
        if book is None:
            return False

        self._uow.books.update(book.model_copy(update={"is_deleted": True}))
        self._uow.commit()
        logger.info("Book deleted: {}", book_id)
        return True
