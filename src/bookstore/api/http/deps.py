"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, HTTPException, Request
from sqlmodel import Session

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.core.services.catalog import (
    AuthorService,
    BookService,
    CategoryService,
    PhotoService,
    PublisherService,
)
from src.bookstore.core.services.database import UnitOfWork
from src.bookstore.core.services.jwt import JwtGeneratorService, JwtVerificationService
from src.bookstore.core.services.notifications import EmailService
from src.bookstore.core.services.sales import CartService, OrderService
from src.bookstore.core.services.storage import PhotoStorageService
from src.bookstore.core.services.user import UserService
from src.bookstore.entities import User, UserRole


def _app_deps(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a request-scoped database session."""
    session = _app_deps(request).database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_unit_of_work(db: Session = Depends(get_db_session)) -> UnitOfWork:
    return UnitOfWork(db)


def get_jwt_generation_service(request: Request) -> JwtGeneratorService:
    """Get the JWT generation service instance."""
    return _app_deps(request).jwt_generation_service


def get_jwt_verify_service(request: Request) -> JwtVerificationService:
    """Get the JWT verification service instance."""
    return _app_deps(request).jwt_verify_service


def get_email_service(request: Request) -> EmailService:
    """Get the email service instance."""
    return _app_deps(request).email_service


def get_photo_storage_service(request: Request) -> PhotoStorageService:
    """Get the image hosting client instance."""
    return _app_deps(request).photo_storage_service


def get_book_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> BookService:
    return BookService(uow)


def get_author_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> AuthorService:
    return AuthorService(uow)


def get_publisher_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> PublisherService:
    return PublisherService(uow)


def get_category_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CategoryService:
    return CategoryService(uow)


def get_photo_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: PhotoStorageService = Depends(get_photo_storage_service),
) -> PhotoService:
    return PhotoService(uow, storage)


def get_cart_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> CartService:
    return CartService(uow)


def get_order_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> OrderService:
    return OrderService(uow)


def get_user_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
    jwt_generator: JwtGeneratorService = Depends(get_jwt_generation_service),
) -> UserService:
    return UserService(uow, jwt_generator)


async def get_current_user(
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    jwt_verify: JwtVerificationService = Depends(get_jwt_verify_service),
) -> User:
    """Authenticate the request using a Bearer token.

    A valid token is not enough: the user it names must still exist.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing Bearer token")

    token = auth_header.split(" ", 1)[1]
    claims = jwt_verify.verify_jwt(token)

    user = uow.users.get(claims.subject)
    if user is None:
        raise HTTPException(status_code=401, detail="User no longer exists")

    request.state.claims = claims
    return user


def require_role(required_role: UserRole):
    """Create a dependency that requires a specific role for the authenticated user."""

    async def dep(user: User = Depends(get_current_user)) -> User:
        if user.role != required_role:
            raise HTTPException(
                status_code=403, detail=f"Missing required role: {required_role}"
            )
        return user

    return dep


require_admin = require_role(UserRole.ADMIN)
