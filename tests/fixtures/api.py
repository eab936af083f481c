from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from src.bookstore.api.http.app import app
from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.core.services.database import DbSessionService
from src.bookstore.core.services.jwt import JwtGeneratorService, JwtVerificationService
from src.bookstore.entities import User, UserRole

from .dummies import FakeEmailService, FakePhotoStorage


@pytest.fixture
def email_fake() -> FakeEmailService:
    return FakeEmailService()


@pytest.fixture
def photo_storage_fake() -> FakePhotoStorage:
    return FakePhotoStorage()


@pytest.fixture
def client(
    engine: Engine,
    email_fake: FakeEmailService,
    photo_storage_fake: FakePhotoStorage,
) -> Generator[TestClient]:
    """Test client wired to the in-memory database and fake providers.

    The lifespan is not entered, so the dependencies set here are the ones used.
    """
    previous = getattr(app.state, "app_dependencies", None)
    app.state.app_dependencies = ApplicationDependencies(
        database_service=DbSessionService(engine),
        jwt_generation_service=JwtGeneratorService(),
        jwt_verify_service=JwtVerificationService(),
        email_service=email_fake,  # type: ignore[arg-type]
        photo_storage_service=photo_storage_fake,
    )
    try:
        yield TestClient(app)
    finally:
        app.state.app_dependencies = previous


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    def _headers(user: User) -> dict[str, str]:
        token = JwtGeneratorService().generate_access_token(
            user_id=user.id, role=user.role.value, username=user.username
        )
        return {"Authorization": f"Bearer {token.access_token}"}

    return _headers


@pytest.fixture
def admin(user_factory) -> User:
    return user_factory(role=UserRole.ADMIN, username="admin", email="admin@example.com")


@pytest.fixture
def customer(user_factory) -> User:
    return user_factory(username="reader", email="reader@example.com")


@pytest.fixture
def admin_headers(admin: User, auth_headers) -> dict[str, str]:
    return auth_headers(admin)


@pytest.fixture
def customer_headers(customer: User, auth_headers) -> dict[str, str]:
    return auth_headers(customer)
