"""Request and response models for users and authentication."""

from pydantic import BaseModel, EmailStr, Field

from src.bookstore.core.models.claims import AccessToken
from src.bookstore.core.models.common import PartialUpdate
from src.bookstore.core.security import MIN_PASSWORD_LENGTH
from src.bookstore.entities import User, UserRole


class UserRegister(BaseModel):
    username: str = Field(min_length=3, max_length=64)
    email: EmailStr
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    phone: str | None = None
    address: str | None = None


class UserCreate(UserRegister):
    """Admin-side creation; the role can be chosen."""

    role: UserRole = UserRole.CUSTOMER


class UserUpdate(PartialUpdate):
    required_fields = ("email", "first_name", "last_name", "role")

    email: EmailStr | None = None
    first_name: str | None = Field(default=None, min_length=1)
    last_name: str | None = Field(default=None, min_length=1)
    phone: str | None = None
    address: str | None = None
    role: UserRole | None = None


class PasswordChange(BaseModel):
    old_password: str
    new_password: str = Field(min_length=MIN_PASSWORD_LENGTH)


class LoginRequest(BaseModel):
    username: str
    password: str


class AuthResult(BaseModel):
    """Authenticated user together with the issued bearer token."""

    user: User
    token: AccessToken
