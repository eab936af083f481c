from src.bookstore.entities import Publisher

from ._named import NamedEntityService


class PublisherService(NamedEntityService[Publisher]):
    repository_name = "publishers"
    reference_column = "publisher_id"
    entity_label = "Publisher"

    def _new(self, name: str) -> Publisher:
        return Publisher(name=name)
