"""Book photo management backed by the external image host."""

from loguru import logger

from src.bookstore.core.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    PhotoStorageError,
)
from src.bookstore.core.services.database import UnitOfWork
from src.bookstore.core.services.storage import PhotoStorageService
from src.bookstore.entities import Photo


class PhotoService:
    def __init__(self, uow: UnitOfWork, storage: PhotoStorageService) -> None:
        self._uow = uow
        self._storage = storage

    def list_photos(self, book_id: str) -> list[Photo]:
        return self._uow.photos.list_for_book(book_id)

    def _require_book(self, book_id: str) -> None:
        if self._uow.books.get_active(book_id) is None:
            raise EntityNotFoundError("Book", book_id)

    async def upload_photo(
        self,
        book_id: str,
        filename: str,
        content: bytes,
        content_type: str | None,
    ) -> Photo:
        """Upload an image for a book; the first photo of a book becomes main."""
        self._require_book(book_id)

        if not content_type or not content_type.startswith("image/"):
            raise DomainValidationError("Only image uploads are accepted")
        if not content:
            raise DomainValidationError("Uploaded file is empty")
        max_size = self._storage.config.max_file_size_bytes
        if len(content) > max_size:
            raise DomainValidationError(f"Image exceeds the {max_size} byte limit")

        uploaded = await self._storage.upload(filename, content, content_type)

        is_first = not self._uow.photos.list_for_book(book_id)
        photo = self._uow.photos.create(
            Photo(
                book_id=book_id,
                url=uploaded.url,
                public_id=uploaded.public_id,
                is_main=is_first,
            )
        )
        self._uow.commit()
        return photo

    def set_main_photo(self, book_id: str, photo_id: str) -> Photo:
        target = self._uow.photos.get_for_book(book_id, photo_id)
        if target is None:
            raise EntityNotFoundError("Photo", photo_id)

        for photo in self._uow.photos.list_for_book(book_id):
            if photo.is_main != (photo.id == photo_id):
                self._uow.photos.update(
                    photo.model_copy(update={"is_main": photo.id == photo_id})
                )
        self._uow.commit()
        return target.model_copy(update={"is_main": True})

    async def delete_photo(self, book_id: str, photo_id: str) -> bool:
        """Remove the hosted image and its row; the oldest remaining photo becomes main."""
        photo = self._uow.photos.get_for_book(book_id, photo_id)
        if photo is None:
            return False

        await self._storage.destroy(photo.public_id)
        self._uow.photos.delete(photo_id)

        if photo.is_main:
            remaining = self._uow.photos.list_for_book(book_id)
            if remaining:
                self._uow.photos.update(remaining[0].model_copy(update={"is_main": True}))

        self._uow.commit()
        return True

    async def purge_book_photos(self, book_id: str) -> int:
        """Drop every photo of a (deleted) book; host failures are logged only."""
        photos = self._uow.photos.list_for_book(book_id)
        for photo in photos:
            try:
                await self._storage.destroy(photo.public_id)
            except PhotoStorageError as e:
                logger.warning("Could not remove image {}: {}", photo.public_id, e)
            self._uow.photos.delete(photo.id)
        self._uow.commit()
        return len(photos)
