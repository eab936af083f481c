"""Outgoing email through an HTTP provider."""

from __future__ import annotations

import hashlib

import httpx
from loguru import logger

from src.bookstore.core.exceptions import EmailConfigurationError, EmailDeliveryError
from src.bookstore.core.models.order import OrderDetail
from src.bookstore.entities import User
from src.bookstore.runtime.config.config_data import EmailConfig
from src.bookstore.runtime.context import get_config


def idempotency_key(to: str, subject: str, body: str) -> str:
    """Stable key so the provider drops duplicate sends of the same message."""
    payload_hash = hashlib.sha256(
        (to + "\x1f" + subject + "\x1f" + body).encode("utf-8")
    ).hexdigest()
    return f"email:{payload_hash}"


class EmailService:
    def __init__(self, config: EmailConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> EmailConfig:
        return self._config or get_config().email

    async def send_email(self, to: str, subject: str, body: str) -> bool:
        """Send a plain-text email.

        Returns ``False`` without contacting the provider when email is disabled.

        Raises:
            EmailConfigurationError: If the provider URL or API key is missing
            EmailDeliveryError: If the provider is unreachable or rejects the message
        """
        cfg = self.config
        if not cfg.enabled:
            logger.info("Email disabled, skipping '{}' to {}", subject, to)
            return False
        if not cfg.api_url or not cfg.api_key:
            raise EmailConfigurationError("Email provider not configured")

        payload = {
            "from": {"email": cfg.sender, "name": cfg.sender_name},
            "personalizations": [{"to": [{"email": to}], "subject": subject}],
            "content": [{"type": "text/plain", "value": body}],
        }
        headers = {
            "Authorization": f"Bearer {cfg.api_key}",
            "Idempotency-Key": idempotency_key(to, subject, body),
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=cfg.timeout_seconds) as client:
                resp = await client.post(cfg.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"Email provider unreachable: {e}") from e

        if 200 <= resp.status_code < 300:
            logger.info("Email sent: '{}' to {}", subject, to)
            return True

        raise EmailDeliveryError(
            f"Email send failed {resp.status_code}: {resp.text[:200]}"
        )

    async def send_order_confirmation(self, order: OrderDetail, user: User) -> bool:
        lines = "\n".join(
            f"  {item.quantity} x {item.book_title} @ {item.unit_price:.2f} = {item.line_total:.2f}"
            for item in order.items
        )
        body = (
            f"Hello {user.full_name},\n\n"
            f"Thank you for your order {order.id}.\n\n"
            f"{lines}\n\n"
            f"Total: {order.total:.2f}\n"
            f"Shipping to: {order.shipping_address}\n\n"
            f"{self.config.sender_name}"
        )
        return await self.send_email(user.email, f"Order confirmation {order.id}", body)

    async def send_welcome(self, user: User) -> bool:
        body = (
            f"Hello {user.full_name},\n\n"
            f"Your account '{user.username}' has been created.\n\n"
            f"{self.config.sender_name}"
        )
        return await self.send_email(user.email, "Welcome to the book store", body)
