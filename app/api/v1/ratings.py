"""Rating submission and rating listings for users and store owners."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user, require_user_or_admin
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.rating import (
    RatingCreateRequest,
    RatingOut,
    RatingResponse,
    RatingUpdateRequest,
    StoreRatingItem,
    UserRatingItem,
)
from app.services import ratings as rating_service
from app.services.errors import ServiceError

router = APIRouter()


@router.post("", response_model=RatingResponse, status_code=status.HTTP_201_CREATED)
def submit_rating(
    body: RatingCreateRequest,
    current_user: Annotated[CurrentUser, Depends(require_user_or_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> RatingResponse:
    """Rate a store 1-5 with an optional comment. One rating per user and store."""
    try:
        row = rating_service.submit_rating(
            db,
            current_user.id,
            store_id=body.store_id,
            rating=body.rating,
            comment=body.comment,
        )
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return RatingResponse(
        message="Rating submitted successfully",
        rating=RatingOut.model_validate(row),
    )


@router.get("/user", response_model=list[UserRatingItem])
def list_my_ratings(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> list[UserRatingItem]:
    """The caller's ratings, newest first, with store name and address."""
    return rating_service.list_user_ratings(db, current_user.id)


@router.get("/store/{store_id}", response_model=list[StoreRatingItem])
def list_store_ratings(
    store_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> list[StoreRatingItem]:
    """Ratings on a store with rater name and email (store owner or admin only)."""
    try:
        return rating_service.list_store_ratings(db, current_user, store_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.put("/{rating_id}", response_model=RatingResponse)
def update_rating(
    rating_id: int,
    body: RatingUpdateRequest,
    current_user: Annotated[CurrentUser, Depends(require_user_or_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> RatingResponse:
    """Change score and comment of a rating (its author or an admin)."""
    try:
        row = rating_service.update_rating(
            db,
            current_user,
            rating_id,
            rating=body.rating,
            comment=body.comment,
        )
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return RatingResponse(
        message="Rating updated successfully",
        rating=RatingOut.model_validate(row),
    )
