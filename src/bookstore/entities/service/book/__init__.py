"""Entity package: Book and its photos."""

from .entity import Book, BookSearchKey, Photo
from .repository import BookRepository, PhotoRepository
from .table import BookTable, PhotoTable

__all__ = [
    "Book",
    "BookSearchKey",
    "BookRepository",
    "BookTable",
    "Photo",
    "PhotoRepository",
    "PhotoTable",
]
