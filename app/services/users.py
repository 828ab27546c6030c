"""User accounts: creation, profile changes and the admin user listing."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.security import hash_password, verify_password
from app.models import Rating, Store, User
from app.models.user import ROLE_STORE_OWNER
from app.schemas.user import OwnedStoreSummary, UserDetail, UserListItem
from app.services.errors import DuplicateError, FieldValidationError, NotFoundError
from app.services.validation import (
    ROLE_MESSAGE,
    check_password,
    check_profile_fields,
    check_user_fields,
    is_valid_role,
)

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def create_user(
    db: Session,
    *,
    name: str | None,
    email: str | None,
    password: str | None,
    address: str | None,
    role: str | None,
) -> User:
    """
    Validate and insert a user with a bcrypt password hash.

    Raises FieldValidationError for bad fields and DuplicateError when the
    email is already registered.
    """
    check_user_fields(name, email, password, address, role)
    if get_user_by_email(db, email) is not None:
        raise DuplicateError("Email already registered")

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        address=address,
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("User created", extra={"user_id": user.id, "role": user.role})
    return user


def get_user(db: Session, user_id: int) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise NotFoundError("User not found")
    return user


def update_profile(
    db: Session,
    user: User,
    *,
    name: str | None,
    email: str | None,
    address: str | None,
) -> User:
    """Update name, email and address; the email must not belong to another user."""
    check_profile_fields(name, email, address)
    if email != user.email:
        taken = (
            db.query(User.id)
            .filter(User.email == email, User.id != user.id)
            .first()
        )
        if taken is not None:
            raise DuplicateError("Email already taken")

    user.name = name
    user.email = email
    user.address = address
    db.commit()
    db.refresh(user)
    return user


def change_password(
    db: Session,
    user: User,
    *,
    current_password: str | None,
    new_password: str | None,
) -> None:
    """Replace the password hash after checking the current password."""
    if not current_password or not new_password:
        raise FieldValidationError("Current and new password required")
    if not verify_password(current_password, user.password_hash):
        raise FieldValidationError("Current password incorrect")
    check_password(new_password)

    user.password_hash = hash_password(new_password)
    db.commit()
    logger.info("Password changed", extra={"user_id": user.id})


def _owner_rating(role: str, avg: float | None, count: int | None) -> tuple[float | None, int]:
    if role != ROLE_STORE_OWNER:
        return None, 0
    return float(avg or 0), int(count or 0)


def list_users(
    db: Session,
    *,
    name: str | None = None,
    email: str | None = None,
    address: str | None = None,
    role: str | None = None,
) -> list[UserListItem]:
    """
    List users newest first, with store owners' average rating across all their stores.

    name, email and address are case-insensitive substring filters; role is exact.
    """
    query = (
        db.query(
            User,
            func.avg(Rating.rating).label("store_rating"),
            func.count(Rating.id).label("rating_count"),
        )
        .outerjoin(Store, Store.owner_id == User.id)
        .outerjoin(Rating, Rating.store_id == Store.id)
    )
    if name:
        query = query.filter(User.name.ilike(f"%{name}%"))
    if email:
        query = query.filter(User.email.ilike(f"%{email}%"))
    if address:
        query = query.filter(User.address.ilike(f"%{address}%"))
    if role:
        query = query.filter(User.role == role)
    rows = query.group_by(User.id).order_by(User.created_at.desc(), User.id.desc()).all()

    items = []
    for user, avg, count in rows:
        store_rating, rating_count = _owner_rating(user.role, avg, count)
        item = UserListItem.model_validate(user)
        item.store_rating = store_rating
        item.rating_count = rating_count
        items.append(item)
    return items


def get_user_detail(db: Session, user_id: int) -> UserDetail:
    """One user for the admin view; store owners include their first store and rating."""
    user = get_user(db, user_id)
    detail = UserDetail.model_validate(user)
    if user.role != ROLE_STORE_OWNER:
        return detail

    store = (
        db.query(Store)
        .filter(Store.owner_id == user.id)
        .order_by(Store.created_at, Store.id)
        .first()
    )
    if store is not None:
        detail.store = OwnedStoreSummary(
            name=store.name, email=store.email, address=store.address
        )
    avg, count = (
        db.query(func.avg(Rating.rating), func.count(Rating.id))
        .join(Store, Rating.store_id == Store.id)
        .filter(Store.owner_id == user.id)
        .one()
    )
    detail.store_rating, detail.rating_count = _owner_rating(user.role, avg, count)
    return detail


def set_role(db: Session, email: str, role: str) -> User:
    """Change a user's role (maintenance CLI)."""
    if not is_valid_role(role):
        raise FieldValidationError(ROLE_MESSAGE)
    user = get_user_by_email(db, email)
    if user is None:
        raise NotFoundError("User not found")
    user.role = role
    db.commit()
    db.refresh(user)
    return user


def reset_password(db: Session, email: str, new_password: str) -> User:
    """Set a new password without the current one (maintenance CLI)."""
    check_password(new_password)
    user = get_user_by_email(db, email)
    if user is None:
        raise NotFoundError("User not found")
    user.password_hash = hash_password(new_password)
    db.commit()
    return user
