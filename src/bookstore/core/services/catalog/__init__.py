from .author_service import AuthorService
from .book_service import BookService
from .category_service import CategoryService
from .photo_service import PhotoService
from .publisher_service import PublisherService

__all__ = [
    "AuthorService",
    "BookService",
    "CategoryService",
    "PhotoService",
    "PublisherService",
]
