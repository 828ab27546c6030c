"""Pydantic request/response schemas."""

from app.schemas.admin import DashboardStats
from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from app.schemas.health import HealthResponse
from app.schemas.rating import (
    RatingCreateRequest,
    RatingDetailItem,
    RatingOut,
    RatingResponse,
    RatingUpdateRequest,
    StoreRatingItem,
    UserRatingItem,
)
from app.schemas.store import (
    AdminStoreItem,
    OwnerStoreItem,
    StoreCreateRequest,
    StoreCreateResponse,
    StoreDetail,
    StoreListItem,
)
from app.schemas.user import (
    UserCreateRequest,
    UserDetail,
    UserListItem,
    UserPublic,
    UserResponse,
)

__all__ = [
    "AdminStoreItem",
    "AuthResponse",
    "CurrentUser",
    "DashboardStats",
    "HealthResponse",
    "LoginRequest",
    "OwnerStoreItem",
    "RatingCreateRequest",
    "RatingDetailItem",
    "RatingOut",
    "RatingResponse",
    "RatingUpdateRequest",
    "RegisterRequest",
    "StoreCreateRequest",
    "StoreCreateResponse",
    "StoreDetail",
    "StoreListItem",
    "StoreRatingItem",
    "TokenResponse",
    "UserCreateRequest",
    "UserDetail",
    "UserListItem",
    "UserPublic",
    "UserRatingItem",
    "UserResponse",
]
