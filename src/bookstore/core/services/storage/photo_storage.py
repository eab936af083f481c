"""Client for a Cloudinary-compatible image hosting API."""

from __future__ import annotations

import hashlib
import time
from dataclasses import dataclass

import httpx
from loguru import logger

from src.bookstore.core.exceptions import PhotoStorageError
from src.bookstore.runtime.config.config_data import PhotoConfig
from src.bookstore.runtime.context import get_config


@dataclass(frozen=True)
class UploadedImage:
    url: str
    public_id: str


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Sign request parameters the way the upload API expects.

    Parameters are sorted by name, joined as ``k=v`` pairs with ``&``, suffixed
    with the API secret and hashed with SHA-1.
    """
    to_sign = "&".join(f"{k}={params[k]}" for k in sorted(params) if params[k] != "")
    return hashlib.sha1((to_sign + api_secret).encode("utf-8")).hexdigest()


class PhotoStorageService:
    """Uploads and destroys book images on the external image host."""

    def __init__(self, config: PhotoConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> PhotoConfig:
        return self._config or get_config().photo

    def _endpoint(self, action: str) -> str:
        cfg = self.config
        return f"{cfg.base_url.rstrip('/')}/{cfg.cloud_name}/image/{action}"

    def _signed(self, params: dict[str, str]) -> dict[str, str]:
        cfg = self.config
        if not cfg.configured:
            raise PhotoStorageError("Image hosting is not configured")
        params = {**params, "timestamp": str(int(time.time()))}
        return {
            **params,
            "api_key": cfg.api_key or "",
            "signature": sign_params(params, cfg.api_secret or ""),
        }

    @staticmethod
    def _json_body(resp: httpx.Response) -> dict:
        try:
            body = resp.json()
        except ValueError as e:
            raise PhotoStorageError("Image host returned a malformed response") from e
        if not isinstance(body, dict):
            raise PhotoStorageError("Image host returned a malformed response")
        return body

    async def upload(
        self, filename: str, content: bytes, content_type: str
    ) -> UploadedImage:
        data = self._signed({"folder": self.config.folder})
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                resp = await client.post(
                    self._endpoint("upload"),
                    data=data,
                    files={"file": (filename, content, content_type)},
                )
        except httpx.HTTPError as e:
            raise PhotoStorageError(f"Image upload failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            logger.warning("Image host rejected upload: {} {}", resp.status_code, resp.text[:200])
            raise PhotoStorageError(f"Image upload failed with status {resp.status_code}")

        body = self._json_body(resp)
        url = body.get("secure_url") or body.get("url")
        public_id = body.get("public_id")
        if not url or not public_id:
            raise PhotoStorageError("Image host returned an incomplete response")
        logger.info("Image uploaded: {}", public_id)
        return UploadedImage(url=url, public_id=public_id)

    async def destroy(self, public_id: str) -> None:
        data = self._signed({"public_id": public_id})
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                resp = await client.post(self._endpoint("destroy"), data=data)
        except httpx.HTTPError as e:
            raise PhotoStorageError(f"Image removal failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise PhotoStorageError(f"Image removal failed with status {resp.status_code}")

        result = self._json_body(resp).get("result")
        # "not found" means the asset is already gone
        if result not in ("ok", "not found"):
            raise PhotoStorageError(f"Image removal failed: {result}")
        logger.info("Image removed: {} ({})", public_id, result)
