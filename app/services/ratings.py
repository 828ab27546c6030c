"""Rating submission, updates and listings."""

import logging

from sqlalchemy.orm import Session

from app.models import Rating, Store, User
from app.models.user import ROLE_ADMIN
from app.schemas.auth import CurrentUser
from app.schemas.rating import RatingDetailItem, RatingOut, StoreRatingItem, UserRatingItem
from app.services.errors import DuplicateError, NotFoundError, PermissionDeniedError
from app.services.stores import get_store
from app.services.validation import check_rating

logger = logging.getLogger(__name__)


def get_user_rating(db: Session, user_id: int, store_id: int) -> Rating | None:
    """Return the user's rating for the store, or None if they have not rated it."""
    return (
        db.query(Rating)
        .filter(Rating.user_id == user_id, Rating.store_id == store_id)
        .first()
    )


def submit_rating(
    db: Session,
    user_id: int,
    *,
    store_id: int,
    rating: int | None,
    comment: str | None,
) -> Rating:
    """
    Insert a rating after checking the score, the store and prior ratings.

    One rating per (user, store) is a lookup-then-insert, not a table
    constraint: two concurrent submissions can both pass the lookup.
    """
    check_rating(rating)
    get_store(db, store_id)
    if get_user_rating(db, user_id, store_id) is not None:
        raise DuplicateError("You already rated this store")

    row = Rating(user_id=user_id, store_id=store_id, rating=rating, comment=comment)
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(
        "Rating submitted",
        extra={"rating_id": row.id, "store_id": store_id, "user_id": user_id},
    )
    return row


def update_rating(
    db: Session,
    user: CurrentUser,
    rating_id: int,
    *,
    rating: int | None,
    comment: str | None,
) -> Rating:
    """Change score and comment; only the author or an administrator may do so."""
    check_rating(rating)
    row = db.query(Rating).filter(Rating.id == rating_id).first()
    if row is None:
        raise NotFoundError("Rating not found")
    if row.user_id != user.id and user.role != ROLE_ADMIN:
        raise PermissionDeniedError("Not authorized to update this rating")

    row.rating = rating
    row.comment = comment
    db.commit()
    db.refresh(row)
    return row


def list_user_ratings(db: Session, user_id: int) -> list[UserRatingItem]:
    """The user's ratings, newest first, with store name and address."""
    rows = (
        db.query(Rating, Store.name, Store.address)
        .join(Store, Rating.store_id == Store.id)
        .filter(Rating.user_id == user_id)
        .order_by(Rating.created_at.desc(), Rating.id.desc())
        .all()
    )
    return [
        UserRatingItem(
            **RatingOut.model_validate(r).model_dump(),
            store_name=store_name,
            store_address=store_address,
        )
        for r, store_name, store_address in rows
    ]


def list_store_ratings(db: Session, user: CurrentUser, store_id: int) -> list[StoreRatingItem]:
    """
    Ratings on one store, newest first, with rater name and email.

    Visible to the store's owner and to administrators only.
    """
    store = get_store(db, store_id)
    if store.owner_id != user.id and user.role != ROLE_ADMIN:
        raise PermissionDeniedError("Not authorized to view these ratings")

    rows = (
        db.query(Rating, User.name, User.email)
        .join(User, Rating.user_id == User.id)
        .filter(Rating.store_id == store_id)
        .order_by(Rating.created_at.desc(), Rating.id.desc())
        .all()
    )
    return [
        StoreRatingItem(
            **RatingOut.model_validate(r).model_dump(),
            user_name=user_name,
            user_email=user_email,
        )
        for r, user_name, user_email in rows
    ]


def list_all_ratings(db: Session, *, store_id: int | None = None) -> list[RatingDetailItem]:
    """Every rating, newest first, with rater and store names; optionally one store only."""
    query = (
        db.query(Rating, User.name, User.email, Store.name.label("store_name"))
        .join(User, Rating.user_id == User.id)
        .join(Store, Rating.store_id == Store.id)
    )
    if store_id is not None:
        query = query.filter(Rating.store_id == store_id)
    rows = query.order_by(Rating.created_at.desc(), Rating.id.desc()).all()
    return [
        RatingDetailItem(
            **RatingOut.model_validate(r).model_dump(),
            user_name=user_name,
            user_email=user_email,
            store_name=store_name,
        )
        for r, user_name, user_email, store_name in rows
    ]
