"""Sample data for local development: users, stores and ratings."""

import logging

from sqlalchemy.orm import Session

from app.core.security import hash_password
from app.models import Rating, Store, User
from app.models.user import ROLE_ADMIN, ROLE_NORMAL_USER, ROLE_STORE_OWNER
from app.services.validation import check_password

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    {
        "name": "John Smith Johnson Williams Brown",
        "email": "john@example.com",
        "address": "123 Main Street, City, State 12345, USA",
        "role": ROLE_NORMAL_USER,
    },
    {
        "name": "Sarah Davis Miller Wilson Taylor",
        "email": "sarah@example.com",
        "address": "456 Oak Avenue, Town, State 67890, USA",
        "role": ROLE_NORMAL_USER,
    },
    {
        "name": "Mike Chen Rodriguez Martinez",
        "email": "mike@example.com",
        "address": "789 Business Road, District, State 11111, USA",
        "role": ROLE_STORE_OWNER,
    },
    {
        "name": "Emily Thompson Anderson Jackson",
        "email": "emily@example.com",
        "address": "321 Commerce Lane, Plaza, State 22222, USA",
        "role": ROLE_STORE_OWNER,
    },
]

SAMPLE_STORES = [
    {
        "name": "Tech Store",
        "email": "tech@example.com",
        "address": "123 Tech Street, Innovation City, IC 12345, USA",
    },
    {
        "name": "Fashion Shop",
        "email": "fashion@example.com",
        "address": "456 Style Avenue, Fashion District, FD 67890, USA",
    },
    {
        "name": "Book Store",
        "email": "books@example.com",
        "address": "789 Book Road, Reading Town, RT 11111, USA",
    },
]

# (user index, store index, score, comment)
SAMPLE_RATINGS = [
    (0, 0, 5, "Great store!"),
    (0, 1, 4, "Good selection"),
    (1, 0, 4, "Nice service"),
    (1, 2, 5, "Amazing books!"),
]

DEFAULT_SAMPLE_PASSWORD = "Sample@123"


def clear_sample_data(session: Session) -> None:
    """Delete all ratings and stores and every user except administrators."""
    session.query(Rating).delete(synchronize_session="fetch")
    session.query(Store).delete(synchronize_session="fetch")
    session.query(User).filter(User.role != ROLE_ADMIN).delete(synchronize_session="fetch")
    session.flush()


def seed_database(session: Session, password: str = DEFAULT_SAMPLE_PASSWORD) -> dict[str, int]:
    """
    Replace non-admin data with the sample set. Every sample user gets `password`.

    Stores are assigned to store owners round-robin. Returns inserted row counts.
    """
    check_password(password)
    clear_sample_data(session)

    password_hash = hash_password(password)
    users = [User(password_hash=password_hash, **data) for data in SAMPLE_USERS]
    session.add_all(users)
    session.flush()

    owners = [u for u in users if u.role == ROLE_STORE_OWNER]
    normal_users = [u for u in users if u.role == ROLE_NORMAL_USER]
    stores = [
        Store(owner_id=owners[i % len(owners)].id, **data)
        for i, data in enumerate(SAMPLE_STORES)
    ]
    session.add_all(stores)
    session.flush()

    ratings = [
        Rating(
            user_id=normal_users[u].id,
            store_id=stores[s].id,
            rating=score,
            comment=comment,
        )
        for u, s, score, comment in SAMPLE_RATINGS
    ]
    session.add_all(ratings)
    session.commit()

    counts = {"users": len(users), "stores": len(stores), "ratings": len(ratings)}
    logger.info("Sample data seeded", extra=counts)
    return counts
