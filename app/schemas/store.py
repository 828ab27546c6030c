"""Schemas for stores and their rating aggregates."""

from datetime import datetime

from pydantic import BaseModel, Field


class StoreCreateRequest(BaseModel):
    """Admin payload to add a store for an existing store owner."""

    name: str | None = Field(default=None, description="Store name (at least 3 characters)")
    email: str | None = Field(default=None, description="Store contact email")
    address: str | None = Field(default=None, description="Store address (max 400 characters)")
    owner_email: str | None = Field(default=None, description="Email of a store_owner user")


class StoreBase(BaseModel):
    id: int
    name: str
    email: str
    address: str
    owner_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class StoreCreateResponse(BaseModel):
    message: str
    store: StoreBase


class OwnRating(BaseModel):
    """The calling user's rating of a store, if any."""

    id: int
    rating: int
    comment: str | None = None

    class Config:
        from_attributes = True


class StoreListItem(StoreBase):
    """Store as browsed by users: average rating, count and the caller's own rating."""

    rating: float = 0.0
    rating_count: int = 0
    user_rating: OwnRating | None = None


class OwnerStoreItem(StoreBase):
    """Store owned by the caller with its average rating."""

    rating: float = 0.0
    rating_count: int = 0


class AdminStoreItem(StoreBase):
    """Store as listed for administrators."""

    avg_rating: float = 0.0
    rating_count: int = 0


class StoreDetail(StoreBase):
    owner_name: str
    owner_email: str
    rating: float = 0.0
    total_ratings: int = 0
