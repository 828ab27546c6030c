"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field

from app.schemas.user import UserPublic


class RegisterRequest(BaseModel):
    """Self-registration payload. Role is always normal_user."""

    name: str | None = Field(default=None, description="Full name (20-60 characters)")
    email: str | None = Field(default=None, description="Email address")
    password: str | None = Field(
        default=None,
        description="8-16 characters with an uppercase letter and a special character",
    )
    address: str | None = Field(default=None, description="Postal address (max 400 characters)")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str | None = Field(default=None, description="Email")
    password: str | None = Field(default=None, description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class AuthResponse(TokenResponse):
    """Login/registration result: token plus the authenticated user."""

    message: str
    user: UserPublic


class CurrentUser(BaseModel):
    """Authenticated user (id, name, email, role) for dependency injection."""

    id: int
    name: str
    email: str
    role: str

    class Config:
        from_attributes = True
