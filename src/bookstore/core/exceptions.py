"""Domain errors raised by services and translated to HTTP responses by the app."""


class BookStoreError(Exception):
    """Base class for all domain errors."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EntityNotFoundError(BookStoreError, LookupError):
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(BookStoreError):
    status_code = 409


class DomainValidationError(BookStoreError, ValueError):
    status_code = 400


class PermissionDeniedError(BookStoreError):
    status_code = 403


class ExternalServiceError(BookStoreError):
    """An upstream provider (email, image host) failed or is misconfigured."""

    status_code = 502


class EmailConfigurationError(ExternalServiceError):
    pass


class EmailDeliveryError(ExternalServiceError):
    pass


class PhotoStorageError(ExternalServiceError):
    pass
