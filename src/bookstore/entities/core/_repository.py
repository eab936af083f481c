"""Generic data-access base shared by the entity repositories."""

from typing import Any, ClassVar, Generic, TypeVar

from sqlmodel import Session, func, select

from src.bookstore.core.exceptions import EntityNotFoundError
from src.bookstore.entities.core._base import Entity, EntityTable, utc_now

EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)


class EntityRepository(Generic[EntityT, TableT]):
    """CRUD operations mapping a domain entity onto its table model.

    Repositories flush but never commit; the unit of work owns the transaction.
    """

    entity_type: ClassVar[type[Entity]]
    table_type: ClassVar[type[EntityTable]]
    entity_name: ClassVar[str] = "Entity"
    default_order: ClassVar[tuple[str, ...]] = ("created_at",)

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)  # type: ignore[return-value]

    def _to_row(self, entity: EntityT) -> TableT:
        values: dict[str, Any] = {
            name: getattr(entity, name)
            for name in self.table_type.model_fields
            if hasattr(entity, name)
        }
        return self.table_type(**values)  # type: ignore[return-value]

    def _order_by(self) -> list[Any]:
        return [getattr(self.table_type, column) for column in self.default_order]

    def get_row(self, entity_id: str) -> TableT | None:
        return self._session.get(self.table_type, entity_id)  # type: ignore[return-value]

    def create(self, entity: EntityT) -> EntityT:
        row = self._to_row(entity)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def get(self, entity_id: str) -> EntityT | None:
        row = self.get_row(entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def update(self, entity: EntityT) -> EntityT:
        row = self.get_row(entity.id)
        if row is None:
            raise EntityNotFoundError(self.entity_name, entity.id)

        for name in self.table_type.model_fields:
            if name in ("id", "created_at") or not hasattr(entity, name):
                continue
            setattr(row, name, getattr(entity, name))
        row.updated_at = utc_now()

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, entity_id: str) -> bool:
        row = self.get_row(entity_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def list_all(self) -> list[EntityT]:
        statement = select(self.table_type).order_by(*self._order_by())
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def count(self) -> int:
        statement = select(func.count()).select_from(self.table_type)
        return self._session.exec(statement).one()
