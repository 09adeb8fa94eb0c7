"""Authentication-related request and response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Payload for user login."""

    email: str
    password: str


class TokenResponse(BaseModel):
    """JWT response payload."""

    access_token: str
    token_type: str = "bearer"


class AuthUserResponse(BaseModel):
    """User response for auth endpoints."""

    id: int
    email: str
    full_name: str | None = None
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class ProfileUpdate(BaseModel):
    """Name and/or password change for the logged-in user."""

    full_name: str | None = None
    current_password: str | None = None
    new_password: str | None = Field(default=None, min_length=6)
