"""Tests for book photos and the image host client."""

import hashlib
from unittest.mock import patch

import httpx
import pytest

from src.bookstore.core.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    PhotoStorageError,
)
from src.bookstore.core.services.catalog import BookService, PhotoService
from src.bookstore.core.services.storage import PhotoStorageService, sign_params
from src.bookstore.runtime.config.config_data import PhotoConfig
from tests.fixtures.dummies import DummyAsyncClient, DummyResponse, FakePhotoStorage

JPEG = b"\xff\xd8\xff\xe0fake-jpeg"


@pytest.fixture
def storage() -> FakePhotoStorage:
    return FakePhotoStorage()


@pytest.fixture
def service(uow, storage) -> PhotoService:
    return PhotoService(uow, storage)


class TestPhotoService:
    async def test_first_upload_becomes_main(self, service, book_factory):
        book = book_factory()

        first = await service.upload_photo(book.id, "a.jpg", JPEG, "image/jpeg")
        second = await service.upload_photo(book.id, "b.jpg", JPEG, "image/jpeg")

        assert first.is_main
        assert not second.is_main
        assert first.url.startswith("https://")
        assert [p.id for p in service.list_photos(book.id)] == [first.id, second.id]

    async def test_rejects_non_images(self, service, book_factory):
        book = book_factory()

        with pytest.raises(DomainValidationError):
            await service.upload_photo(book.id, "a.pdf", b"%PDF", "application/pdf")

    async def test_rejects_oversized_files(self, service, storage, book_factory):
        storage._config = PhotoConfig(
            cloud_name="demo", api_key="k", api_secret="s", max_file_size_bytes=4
        )
        book = book_factory()

        with pytest.raises(DomainValidationError):
            await service.upload_photo(book.id, "a.jpg", JPEG, "image/jpeg")
        assert storage.uploaded == []

    async def test_unknown_book(self, service):
        with pytest.raises(EntityNotFoundError):
            await service.upload_photo("missing", "a.jpg", JPEG, "image/jpeg")

    async def test_set_main_photo(self, service, book_factory):
        book = book_factory()
        first = await service.upload_photo(book.id, "a.jpg", JPEG, "image/jpeg")
        second = await service.upload_photo(book.id, "b.jpg", JPEG, "image/jpeg")

        service.set_main_photo(book.id, second.id)

        mains = {p.id: p.is_main for p in service.list_photos(book.id)}
        assert mains == {first.id: False, second.id: True}

    async def test_set_main_photo_of_other_book(self, service, book_factory):
        book = book_factory()
        other = book_factory()
        photo = await service.upload_photo(book.id, "a.jpg", JPEG, "image/jpeg")

        with pytest.raises(EntityNotFoundError):
            service.set_main_photo(other.id, photo.id)

    async def test_delete_main_promotes_oldest(self, service, storage, book_factory):
        book = book_factory()
        first = await service.upload_photo(book.id, "a.jpg", JPEG, "image/jpeg")
        second = await service.upload_photo(book.id, "b.jpg", JPEG, "image/jpeg")

        assert await service.delete_photo(book.id, first.id) is True

        remaining = service.list_photos(book.id)
        assert [p.id for p in remaining] == [second.id]
        assert remaining[0].is_main
        assert storage.destroyed == [first.public_id]

    async def test_delete_missing_photo(self, service, book_factory):
        book = book_factory()

        assert await service.delete_photo(book.id, "missing") is False

    async def test_purge_tolerates_host_failures(self, uow, book_factory):
        storage = FakePhotoStorage(fail_destroy=True)
        service = PhotoService(uow, storage)
        book = book_factory()
        await service.upload_photo(book.id, "a.jpg", JPEG, "image/jpeg")
        BookService(uow).delete_book(book.id)

        assert await service.purge_book_photos(book.id) == 1
        assert service.list_photos(book.id) == []


class TestPhotoStorageService:
    @pytest.fixture
    def config(self) -> PhotoConfig:
        return PhotoConfig(
            cloud_name="demo",
            api_key="123",
            api_secret="shh",
            folder="books",
            base_url="https://api.example.com/v1_1",
        )

    def test_sign_params(self):
        expected = hashlib.sha1(b"folder=books&timestamp=100shh").hexdigest()

        assert sign_params({"timestamp": "100", "folder": "books"}, "shh") == expected

    async def test_upload_posts_signed_form(self, config):
        calls: list = []
        response = DummyResponse(
            200, {"secure_url": "https://res/x.jpg", "public_id": "books/x"}
        )

        with patch(
            "src.bookstore.core.services.storage.photo_storage.httpx.AsyncClient",
            lambda *a, **k: DummyAsyncClient(response, calls),
        ):
            uploaded = await PhotoStorageService(config).upload(
                "x.jpg", JPEG, "image/jpeg"
            )

        assert uploaded.url == "https://res/x.jpg"
        assert uploaded.public_id == "books/x"
        url, kwargs = calls[0]
        assert url == "https://api.example.com/v1_1/demo/image/upload"
        data = kwargs["data"]
        assert data["api_key"] == "123"
        assert data["folder"] == "books"
        assert data["signature"] == sign_params(
            {"folder": "books", "timestamp": data["timestamp"]}, "shh"
        )
        assert kwargs["files"]["file"][0] == "x.jpg"

    async def test_upload_rejected(self, config):
        with patch(
            "src.bookstore.core.services.storage.photo_storage.httpx.AsyncClient",
            lambda *a, **k: DummyAsyncClient(DummyResponse(401, text="bad key"), []),
        ):
            with pytest.raises(PhotoStorageError):
                await PhotoStorageService(config).upload("x.jpg", JPEG, "image/jpeg")

    async def test_upload_network_error(self, config):
        class Broken(DummyAsyncClient):
            async def post(self, url, **kwargs):
                raise httpx.ConnectError("refused")

        with patch(
            "src.bookstore.core.services.storage.photo_storage.httpx.AsyncClient",
            lambda *a, **k: Broken(DummyResponse(200), []),
        ):
            with pytest.raises(PhotoStorageError):
                await PhotoStorageService(config).upload("x.jpg", JPEG, "image/jpeg")

    async def test_not_configured(self):
        with pytest.raises(PhotoStorageError):
            await PhotoStorageService(PhotoConfig()).upload("x.jpg", JPEG, "image/jpeg")

    @pytest.mark.parametrize("result", ["ok", "not found"])
    async def test_destroy(self, config, result):
        calls: list = []

        with patch(
            "src.bookstore.core.services.storage.photo_storage.httpx.AsyncClient",
            lambda *a, **k: DummyAsyncClient(DummyResponse(200, {"result": result}), calls),
        ):
            await PhotoStorageService(config).destroy("books/x")

        url, kwargs = calls[0]
        assert url == "https://api.example.com/v1_1/demo/image/destroy"
        assert kwargs["data"]["public_id"] == "books/x"

    @pytest.mark.parametrize("action", ["upload", "destroy"])
    async def test_non_json_success_response(self, config, action):
        class HtmlResponse(DummyResponse):
            def json(self):
                raise ValueError("Expecting value: line 1 column 1 (char 0)")

        storage = PhotoStorageService(config)
        with patch(
            "src.bookstore.core.services.storage.photo_storage.httpx.AsyncClient",
            lambda *a, **k: DummyAsyncClient(HtmlResponse(200, text="<html>"), []),
        ):
            with pytest.raises(PhotoStorageError, match="malformed"):
                if action == "upload":
                    await storage.upload("x.jpg", JPEG, "image/jpeg")
                else:
                    await storage.destroy("books/x")
