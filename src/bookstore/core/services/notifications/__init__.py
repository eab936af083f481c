from .email_service import EmailService, idempotency_key

__all__ = ["EmailService", "idempotency_key"]
