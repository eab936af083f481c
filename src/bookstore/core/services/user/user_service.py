"""User accounts and credential checks."""

from loguru import logger

from src.bookstore.core.exceptions import (
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)
from src.bookstore.core.models.user import AuthResult, UserCreate, UserRegister, UserUpdate
from src.bookstore.core.security import hash_password, verify_password
from src.bookstore.core.services.database import UnitOfWork
from src.bookstore.core.services.jwt import JwtGeneratorService
from src.bookstore.entities import User, UserRole


class UserService:
    def __init__(
        self, uow: UnitOfWork, jwt_generator: JwtGeneratorService | None = None
    ) -> None:
        self._uow = uow
        self._jwt_generator = jwt_generator or JwtGeneratorService()

    def _ensure_unique(
        self, username: str | None, email: str | None, current_id: str | None = None
    ) -> None:
        if username:
            existing = self._uow.users.get_by_username(username)
            if existing is not None and existing.id != current_id:
                raise ConflictError(f"Username '{username}' is already taken")
        if email:
            existing = self._uow.users.get_by_email(email)
            if existing is not None and existing.id != current_id:
                raise ConflictError(f"Email '{email}' is already registered")

    def register(self, new_user: UserRegister) -> User:
        """Create a customer account."""
        return self.create_user(
            UserCreate(**new_user.model_dump(), role=UserRole.CUSTOMER)
        )

    def create_user(self, new_user: UserCreate) -> User:
        """Create an account with any role (admin-only at the HTTP layer)."""
        self._ensure_unique(new_user.username, new_user.email)

        user = User(
            **new_user.model_dump(exclude={"password"}),
            password_hash=hash_password(new_user.password),
        )
        created = self._uow.users.create(user)
        self._uow.commit()
        logger.info("User created: {} ({}, {})", created.id, created.username, created.role)
        return created

    def authenticate(self, username: str, password: str) -> AuthResult | None:
        user = self._uow.users.get_by_username(username)
        if user is None or not verify_password(user.password_hash, password):
            logger.warning("Failed login for '{}'", username)
            return None

        token = self._jwt_generator.generate_access_token(
            user_id=user.id, role=user.role.value, username=user.username
        )
        logger.info("User logged in: {}", user.id)
        return AuthResult(user=user, token=token)

    def get_all(self) -> list[User]:
        return self._uow.users.list_all()

    def get_by_id(self, user_id: str) -> User | None:
        return self._uow.users.get(user_id)

    def update(self, user_id: str, changes: UserUpdate) -> User:
        user = self._uow.users.get(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)

        values = changes.model_dump(exclude_unset=True)
        self._ensure_unique(None, values.get("email"), current_id=user_id)

        updated = self._uow.users.update(user.model_copy(update=values))
        self._uow.commit()
        if "role" in values and values["role"] != user.role:
            logger.info("User {} role: {} -> {}", user_id, user.role, values["role"])
        return updated

    def change_password(self, user_id: str, old_password: str, new_password: str) -> None:
        user = self._uow.users.get(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        if not verify_password(user.password_hash, old_password):
            raise DomainValidationError("Current password is incorrect")

        self._uow.users.update(
            user.model_copy(update={"password_hash": hash_password(new_password)})
        )
        self._uow.commit()
        logger.info("Password changed for user {}", user_id)

    def delete(self, user_id: str) -> bool:
        """Delete a user and their cart; refused while the user has orders."""
        if self._uow.users.get(user_id) is None:
            return False

        orders = self._uow.orders.count_for_user(user_id)
        if orders:
            logger.warning("Refusing to delete user {}: {} order(s)", user_id, orders)
            raise ConflictError(f"User has {orders} order(s) and cannot be deleted")

        cart = self._uow.carts.get_by_user(user_id)
        if cart is not None:
            self._uow.cart_items.delete_for_cart(cart.id)
            self._uow.carts.delete(cart.id)

        self._uow.users.delete(user_id)
        self._uow.commit()
        logger.info("User deleted: {}", user_id)
        return True
