"""Schema management for the relational store."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


def register_tables() -> None:
    """Import every table model so it is attached to ``SQLModel.metadata``."""
    import src.bookstore.entities  # noqa: F401


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        register_tables()
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        register_tables()
        SQLModel.metadata.drop_all(self._engine)
        logger.warning("All database tables dropped.")
