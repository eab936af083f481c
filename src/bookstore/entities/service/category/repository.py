"""Category repository."""

from sqlmodel import func, select

from src.bookstore.entities.core._repository import EntityRepository

from .entity import Category
from .table import CategoryTable


class CategoryRepository(EntityRepository[Category, CategoryTable]):
    """Data-access layer for categories."""

    entity_type = Category
    table_type = CategoryTable
    entity_name = "Category"
    default_order = ("name",)

    def get_by_name(self, name: str) -> Category | None:
        statement = select(CategoryTable).where(
            func.lower(CategoryTable.name) == name.strip().lower()
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)
