"""Author repository."""

from sqlmodel import func, select

from src.bookstore.entities.core._repository import EntityRepository

from .entity import Author
from .table import AuthorTable


class AuthorRepository(EntityRepository[Author, AuthorTable]):
    """Data-access layer for authors."""

    entity_type = Author
    table_type = AuthorTable
    entity_name = "Author"
    default_order = ("name",)

    def get_by_name(self, name: str) -> Author | None:
        statement = select(AuthorTable).where(
            func.lower(AuthorTable.name) == name.strip().lower()
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)
