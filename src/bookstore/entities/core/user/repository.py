from sqlmodel import func, select

from src.bookstore.entities.core._repository import EntityRepository

from .entity import User
from .table import UserTable


class UserRepository(EntityRepository[User, UserTable]):
    """Data-access layer for users."""

    entity_type = User
    table_type = UserTable
    entity_name = "User"
    default_order = ("username",)

    def get_by_username(self, username: str) -> User | None:
        statement = select(UserTable).where(
            func.lower(UserTable.username) == username.strip().lower()
        )
        row = self._session.exec(statement).first()
        return self._to_entity(row) if row is not None else None

    def get_by_email(self, email: str) -> User | None:
        statement = select(UserTable).where(
            func.lower(UserTable.email) == email.strip().lower()
        )
        row = self._session.exec(statement).first()
        return self._to_entity(row) if row is not None else None
