"""Registration, login and current-user endpoints."""

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from loguru import logger

from src.bookstore.api.http.deps import (
    get_current_user,
    get_email_service,
    get_user_service,
)
from src.bookstore.core.exceptions import ExternalServiceError
from src.bookstore.core.models.claims import AccessToken
from src.bookstore.core.models.user import LoginRequest, UserRegister
from src.bookstore.core.services.notifications import EmailService
from src.bookstore.core.services.user import UserService
from src.bookstore.entities import User

router = APIRouter()


async def send_welcome(email_service: EmailService, user: User) -> None:
    try:
        await email_service.send_welcome(user)
    except ExternalServiceError as e:
        logger.bind(user_id=user.id).warning("Welcome email failed: {}", e)


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
def register(
    payload: UserRegister,
    background_tasks: BackgroundTasks,
    service: UserService = Depends(get_user_service),
    email_service: EmailService = Depends(get_email_service),
) -> User:
    """Create a customer account."""
    user = service.register(payload)
    background_tasks.add_task(send_welcome, email_service, user)
    return user


@router.post("/login", response_model=AccessToken)
def login(
    payload: LoginRequest, service: UserService = Depends(get_user_service)
) -> AccessToken:
    """Exchange username and password for a bearer token."""
    result = service.authenticate(payload.username, payload.password)
    if result is None:
        raise HTTPException(
            status_code=401,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return result.token


@router.get("/me", response_model=User)
async def me(user: User = Depends(get_current_user)) -> User:
    """Return the authenticated user."""
    return user
