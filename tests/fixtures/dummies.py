from __future__ import annotations

from src.bookstore.core.exceptions import PhotoStorageError
from src.bookstore.core.models.order import OrderDetail
from src.bookstore.core.services.storage import PhotoStorageService, UploadedImage
from src.bookstore.entities import User
from src.bookstore.runtime.config.config_data import EmailConfig, PhotoConfig


class FakePhotoStorage(PhotoStorageService):
    """Records uploads and removals instead of calling the image host."""

    def __init__(self, fail_destroy: bool = False):
        super().__init__(
            PhotoConfig(cloud_name="demo", api_key="key", api_secret="secret")
        )
        self.uploaded: list[str] = []
        self.destroyed: list[str] = []
        self.fail_destroy = fail_destroy

    async def upload(self, filename: str, content: bytes, content_type: str) -> UploadedImage:
        public_id = f"bookstore/books/{len(self.uploaded) + 1}"
        self.uploaded.append(filename)
        return UploadedImage(
            url=f"https://res.example.com/{public_id}.jpg", public_id=public_id
        )

    async def destroy(self, public_id: str) -> None:
        if self.fail_destroy:
            raise PhotoStorageError("image host down")
        self.destroyed.append(public_id)


class FakeEmailService:
    """Collects sent messages."""

    def __init__(self):
        self.config = EmailConfig(enabled=True)
        self.sent: list[tuple[str, str]] = []

    async def send_email(self, to: str, subject: str, body: str) -> bool:
        self.sent.append((to, subject))
        return True

    async def send_order_confirmation(self, order: OrderDetail, user: User) -> bool:
        return await self.send_email(user.email, f"Order confirmation {order.id}", "")

    async def send_welcome(self, user: User) -> bool:
        return await self.send_email(user.email, "Welcome to the book store", "")


class DummyResponse:
    def __init__(self, status_code: int, payload=None, text: str = ""):
        self.status_code = status_code
        self._payload = payload or {}
        self.text = text

    def json(self):
        return self._payload


class DummyAsyncClient:
    """Stands in for ``httpx.AsyncClient``; records every POST."""

    def __init__(self, response: DummyResponse, calls: list, *args, **kwargs):
        self._response = response
        self.calls = calls

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def post(self, url: str, **kwargs):
        self.calls.append((url, kwargs))
        return self._response
