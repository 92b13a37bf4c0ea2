"""Request/response schemas for auth endpoints."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

Role = Literal["admin", "citizen"]


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=8, max_length=128, description="Password")


class RegisterRequest(BaseModel):
    """Citizen self-registration. Role is always 'citizen'."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=8, max_length=128, description="Password")
    full_name: str = Field(..., min_length=1, max_length=255, description="Display name")

    @field_validator("username", "full_name")
    @classmethod
    def strip_non_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class CurrentUser(BaseModel):
    """Authenticated user (id, username, full_name, role) for dependency injection."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    full_name: str
    role: Role


class UserListItem(BaseModel):
    """User entry for admin list (no password)."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    full_name: str
    role: Role


class UsersListResponse(BaseModel):
    """Response for GET /users (admin only)."""

    users: list[UserListItem]
