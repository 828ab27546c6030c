"""Admin dashboard counts."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import Rating, Store, User
from app.schemas.admin import DashboardStats


def get_counts(db: Session) -> DashboardStats:
    """Total users, stores and ratings."""
    return DashboardStats(
        users=db.query(func.count(User.id)).scalar() or 0,
        stores=db.query(func.count(Store.id)).scalar() or 0,
        ratings=db.query(func.count(Rating.id)).scalar() or 0,
    )
