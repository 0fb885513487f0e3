"""Pydantic DTOs for actors, sign-in and profile updates."""

from datetime import datetime

from pydantic import BaseModel, Field

from advisordesk.domain.entities import UserRole

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class LoginRequest(BaseModel):
    """Credentials submitted to POST /login."""

    email: str = Field(..., min_length=3, max_length=255, examples=["sayanth@example.com"])
    password: str = Field(..., min_length=1, max_length=255)


class RegisterRequest(BaseModel):
    """Schema for registering a new actor."""

    name: str = Field(..., min_length=2, max_length=255, examples=["Bob Client"])
    email: str = Field(..., max_length=255, pattern=_EMAIL_PATTERN, examples=["bob@example.com"])
    password: str = Field(..., min_length=6, max_length=255)
    role: UserRole = UserRole.CLIENT


class SubAdminCreate(BaseModel):
    """Schema for the main admin creating a sub-admin."""

    name: str = Field(..., min_length=2, max_length=255, examples=["Alice Advisor"])
    email: str = Field(..., max_length=255, pattern=_EMAIL_PATTERN, examples=["alice@example.com"])
    password: str = Field(..., min_length=6, max_length=255)


class UserUpdate(BaseModel):
    """Schema for updating an actor — all fields optional.

    Changing the password of one's own account requires ``current_password``.
    """

    name: str | None = Field(None, min_length=2, max_length=255)
    email: str | None = Field(None, max_length=255, pattern=_EMAIL_PATTERN)
    password: str | None = Field(None, min_length=6, max_length=255)
    current_password: str | None = None


class UserResponse(BaseModel):
    """Actor as returned to callers — never carries password material."""

    id: str
    name: str
    email: str
    role: UserRole
    is_main_admin: bool
    created_at: datetime
    last_login_at: datetime | None = None

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    """Bearer token plus the signed-in actor."""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserResponse
