from src.bookstore.entities import Author

from ._named import NamedEntityService


class AuthorService(NamedEntityService[Author]):
    repository_name = "authors"
    reference_column = "author_id"
    entity_label = "Author"

    def _new(self, name: str) -> Author:
        return Author(name=name)
