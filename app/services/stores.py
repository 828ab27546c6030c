"""Stores and their rating aggregates (average and count per store)."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Query, Session

from app.models import Rating, Store, User
from app.models.user import ROLE_STORE_OWNER
from app.schemas.store import (
    AdminStoreItem,
    OwnerStoreItem,
    OwnRating,
    StoreDetail,
    StoreListItem,
)
from app.services.errors import FieldValidationError, NotFoundError
from app.services.validation import check_store_fields

logger = logging.getLogger(__name__)


def _stores_with_ratings(db: Session) -> Query:
    """Stores LEFT JOIN ratings, yielding (Store, average, count); average is 0 when unrated."""
    return (
        db.query(
            Store,
            func.coalesce(func.avg(Rating.rating), 0).label("avg_rating"),
            func.count(Rating.id).label("rating_count"),
        )
        .outerjoin(Rating, Rating.store_id == Store.id)
        .group_by(Store.id)
    )


def _substring(column, value: str):
    return column.ilike(f"%{value}%")


def list_stores_for_user(
    db: Session,
    user_id: int,
    *,
    name: str | None = None,
    address: str | None = None,
) -> list[StoreListItem]:
    """
    Stores for browsing, ordered by name, each with the caller's own rating (if any).

    name and address are case-insensitive substring filters.
    """
    query = _stores_with_ratings(db)
    if name:
        query = query.filter(_substring(Store.name, name))
    if address:
        query = query.filter(_substring(Store.address, address))
    rows = query.order_by(Store.name, Store.id).all()

    store_ids = [store.id for store, _, _ in rows]
    own: dict[int, Rating] = {}
    if store_ids:
        for rating in (
            db.query(Rating)
            .filter(Rating.user_id == user_id, Rating.store_id.in_(store_ids))
            .all()
        ):
            own[rating.store_id] = rating

    items = []
    for store, avg, count in rows:
        item = StoreListItem.model_validate(store)
        item.rating = float(avg)
        item.rating_count = int(count)
        if store.id in own:
            item.user_rating = OwnRating.model_validate(own[store.id])
        items.append(item)
    return items


def list_stores_for_admin(
    db: Session,
    *,
    name: str | None = None,
    email: str | None = None,
    address: str | None = None,
) -> list[AdminStoreItem]:
    """All stores newest first with average rating and count; substring filters."""
    query = _stores_with_ratings(db)
    if name:
        query = query.filter(_substring(Store.name, name))
    if email:
        query = query.filter(_substring(Store.email, email))
    if address:
        query = query.filter(_substring(Store.address, address))
    rows = query.order_by(Store.created_at.desc(), Store.id.desc()).all()

    items = []
    for store, avg, count in rows:
        item = AdminStoreItem.model_validate(store)
        item.avg_rating = float(avg)
        item.rating_count = int(count)
        items.append(item)
    return items


def list_owner_stores(db: Session, owner_id: int) -> list[OwnerStoreItem]:
    """Stores owned by owner_id, newest first, with average rating and count."""
    rows = (
        _stores_with_ratings(db)
        .filter(Store.owner_id == owner_id)
        .order_by(Store.created_at.desc(), Store.id.desc())
        .all()
    )
    items = []
    for store, avg, count in rows:
        item = OwnerStoreItem.model_validate(store)
        item.rating = float(avg)
        item.rating_count = int(count)
        items.append(item)
    return items


def get_store(db: Session, store_id: int) -> Store:
    store = db.query(Store).filter(Store.id == store_id).first()
    if store is None:
        raise NotFoundError("Store not found")
    return store


def get_store_rating(db: Session, store_id: int) -> tuple[float, int]:
    """Return (average, total) for one store; (0.0, 0) when it has no ratings."""
    avg, total = (
        db.query(func.avg(Rating.rating), func.count(Rating.id))
        .filter(Rating.store_id == store_id)
        .one()
    )
    return float(avg or 0), int(total or 0)


def get_store_detail(db: Session, store_id: int) -> StoreDetail:
    store = get_store(db, store_id)
    average, total = get_store_rating(db, store_id)
    return StoreDetail(
        id=store.id,
        name=store.name,
        email=store.email,
        address=store.address,
        owner_id=store.owner_id,
        created_at=store.created_at,
        updated_at=store.updated_at,
        owner_name=store.owner.name,
        owner_email=store.owner.email,
        rating=average,
        total_ratings=total,
    )


def create_store(
    db: Session,
    *,
    name: str | None,
    email: str | None,
    address: str | None,
    owner_email: str | None,
) -> Store:
    """
    Validate and insert a store for an existing store owner.

    Raises FieldValidationError for bad fields or when owner_email does not
    belong to a store_owner user.
    """
    check_store_fields(name, email, address)
    owner = (
        db.query(User)
        .filter(User.email == owner_email, User.role == ROLE_STORE_OWNER)
        .first()
        if owner_email
        else None
    )
    if owner is None:
        raise FieldValidationError("Store owner not found")

    store = Store(name=name, email=email, address=address, owner_id=owner.id)
    db.add(store)
    db.commit()
    db.refresh(store)
    logger.info("Store created", extra={"store_id": store.id, "owner_id": owner.id})
    return store
