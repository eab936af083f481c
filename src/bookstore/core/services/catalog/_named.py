"""Shared CRUD behaviour for the uniquely named catalog entities."""

from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger

from src.bookstore.core.exceptions import ConflictError, EntityNotFoundError
from src.bookstore.core.services.database import UnitOfWork
from src.bookstore.entities.core._base import Entity
from src.bookstore.entities.core._repository import EntityRepository

NamedT = TypeVar("NamedT", bound=Entity)


class NamedEntityService(Generic[NamedT]):
    """List, get, create, update and delete for authors, publishers and categories.

    Names are unique case-insensitively. Deletion is refused while any book
    still references the entity through ``reference_column``, soft-deleted
    books included.
    """

    repository_name: ClassVar[str]
    reference_column: ClassVar[str]
    entity_label: ClassVar[str]

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    @property
    def _repository(self) -> EntityRepository:
        return getattr(self._uow, self.repository_name)

    def get_all(self) -> list[NamedT]:
        return self._repository.list_all()

    def get_by_id(self, entity_id: str) -> NamedT | None:
        return self._repository.get(entity_id)

    def _ensure_name_available(self, name: str, current_id: str | None = None) -> None:
        existing = self._repository.get_by_name(name)  # type: ignore[attr-defined]
        if existing is not None and existing.id != current_id:
            raise ConflictError(f"{self.entity_label} '{name}' already exists")

    def create(self, entity: NamedT) -> NamedT:
        self._ensure_name_available(entity.name)  # type: ignore[attr-defined]
        created = self._repository.create(entity)
        self._uow.commit()
        logger.info("{} created: {}", self.entity_label, created.id)
        return created

    def update(self, entity_id: str, changes: dict[str, Any]) -> NamedT:
        current = self._repository.get(entity_id)
        if current is None:
            raise EntityNotFoundError(self.entity_label, entity_id)

        if changes.get("name"):
            self._ensure_name_available(changes["name"], current_id=entity_id)

        updated = self._repository.update(current.model_copy(update=changes))
        self._uow.commit()
        return updated

    def delete(self, entity_id: str) -> bool:
        if self._repository.get(entity_id) is None:
            return False

        in_use = self._uow.books.count_referencing(self.reference_column, entity_id)
        if in_use:
            logger.warning(
                "Refusing to delete {} {}: referenced by {} book(s)",
                self.entity_label,
                entity_id,
                in_use,
            )
            raise ConflictError(
                f"{self.entity_label} is still referenced by {in_use} book(s)"
            )

        self._repository.delete(entity_id)
        self._uow.commit()
        logger.info("{} deleted: {}", self.entity_label, entity_id)
        return True

    def get_or_create(self, name: str) -> NamedT:
        """Return the entity with this name, creating it if needed.

        The new row is flushed, not committed; the caller's operation commits it.
        """
        existing = self._repository.get_by_name(name)  # type: ignore[attr-defined]
        if existing is not None:
            return existing
        logger.info("Creating {} '{}' on the fly", self.entity_label.lower(), name)
        return self._repository.create(self._new(name.strip()))

    def _new(self, name: str) -> NamedT:
        raise NotImplementedError
