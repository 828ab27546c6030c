"""Schemas for user profiles and admin user management."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["normal_user", "store_owner", "system_administrator"]


class UserPublic(BaseModel):
    """User fields safe to return to clients (no password hash)."""

    id: int
    name: str
    email: str
    address: str | None = None
    role: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class UserCreateRequest(BaseModel):
    """Admin-created user; any role may be assigned."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    address: str | None = None
    role: str | None = Field(default=None, description="normal_user, store_owner or system_administrator")


class ProfileUpdateRequest(BaseModel):
    """Fields a user may change on their own profile."""

    name: str | None = None
    email: str | None = None
    address: str | None = None


class PasswordChangeRequest(BaseModel):
    current_password: str | None = None
    new_password: str | None = None


class MessageResponse(BaseModel):
    message: str


class UserResponse(BaseModel):
    """Mutation result carrying the affected user."""

    message: str
    user: UserPublic


class UserListItem(UserPublic):
    """
    User entry for the admin list.

    store_rating is the average over all ratings of the user's stores for
    store owners (0 when unrated) and None for other roles.
    """

    store_rating: float | None = None
    rating_count: int = 0


class OwnedStoreSummary(BaseModel):
    name: str
    email: str
    address: str


class UserDetail(UserListItem):
    """Admin view of one user; store owners also carry their store."""

    store: OwnedStoreSummary | None = None
