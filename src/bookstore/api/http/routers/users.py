"""User administration router."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.bookstore.api.http.deps import get_current_user, get_user_service, require_admin
from src.bookstore.core.models.common import CreatedResponse, MessageResponse
from src.bookstore.core.models.user import PasswordChange, UserCreate, UserUpdate
from src.bookstore.core.services.user import UserService
from src.bookstore.entities import User

router = APIRouter()


@router.put("/me/password", response_model=MessageResponse)
def change_own_password(
    payload: PasswordChange,
    user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    service.change_password(user.id, payload.old_password, payload.new_password)
    return MessageResponse(message="Password changed")


@router.get("/", response_model=list[User], dependencies=[Depends(require_admin)])
def list_users(service: UserService = Depends(get_user_service)) -> list[User]:
    return service.get_all()


@router.get("/{user_id}", response_model=User, dependencies=[Depends(require_admin)])
def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> User:
    user = service.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post(
    "/",
    response_model=CreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_user(
    payload: UserCreate, service: UserService = Depends(get_user_service)
) -> CreatedResponse:
    """Create a user with any role."""
    return CreatedResponse(id=service.create_user(payload).id)


@router.put("/{user_id}", response_model=User, dependencies=[Depends(require_admin)])
def update_user(
    user_id: str,
    payload: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> User:
    return service.update(user_id, payload)


@router.delete(
    "/{user_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)]
)
def delete_user(
    user_id: str, service: UserService = Depends(get_user_service)
) -> MessageResponse:
    if not service.delete(user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return MessageResponse(message="User deleted successfully")
