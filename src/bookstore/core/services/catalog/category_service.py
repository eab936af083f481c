from src.bookstore.entities import Category

from ._named import NamedEntityService


class CategoryService(NamedEntityService[Category]):
    repository_name = "categories"
    reference_column = "category_id"
    entity_label = "Category"

    def _new(self, name: str) -> Category:
        return Category(name=name)
