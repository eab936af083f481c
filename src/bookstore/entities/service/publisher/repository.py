"""Publisher repository."""

from sqlmodel import func, select

from src.bookstore.entities.core._repository import EntityRepository

from .entity import Publisher
from .table import PublisherTable


class PublisherRepository(EntityRepository[Publisher, PublisherTable]):
    """Data-access layer for publishers."""

    entity_type = Publisher
    table_type = PublisherTable
    entity_name = "Publisher"
    default_order = ("name",)

    def get_by_name(self, name: str) -> Publisher | None:
        statement = select(PublisherTable).where(
            func.lower(PublisherTable.name) == name.strip().lower()
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)
