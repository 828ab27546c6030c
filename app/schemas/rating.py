"""Schemas for rating submission and listings."""

from datetime import datetime

from pydantic import BaseModel, Field


class RatingCreateRequest(BaseModel):
    store_id: int = Field(..., description="Store being rated")
    rating: int | None = Field(default=None, description="Score from 1 to 5")
    comment: str | None = Field(default=None, description="Optional free-text comment")


class RatingUpdateRequest(BaseModel):
    rating: int | None = Field(default=None, description="Score from 1 to 5")
    comment: str | None = Field(default=None, description="Optional free-text comment")


class RatingOut(BaseModel):
    id: int
    user_id: int
    store_id: int
    rating: int
    comment: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class RatingResponse(BaseModel):
    message: str
    rating: RatingOut


class UserRatingItem(RatingOut):
    """A rating by the caller, with the rated store's name and address."""

    store_name: str
    store_address: str


class StoreRatingItem(RatingOut):
    """A rating on a store, with the rater's name and email."""

    user_name: str
    user_email: str


class RatingDetailItem(StoreRatingItem):
    """A rating with both sides named: rater name/email and store name."""

    store_name: str
