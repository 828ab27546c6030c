"""ORM model for application users (auth and role-based access)."""

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from app.models.base import Base

ROLE_NORMAL_USER = "normal_user"
ROLE_STORE_OWNER = "store_owner"
ROLE_ADMIN = "system_administrator"

ROLES = (ROLE_NORMAL_USER, ROLE_STORE_OWNER, ROLE_ADMIN)


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'normal_user', 'store_owner' or 'system_administrator'
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "role IN ('normal_user', 'store_owner', 'system_administrator')",
            name="role",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(60), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    address = Column(String(400), nullable=False)
    role = Column(String(32), nullable=False, default=ROLE_NORMAL_USER, index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    stores = relationship("Store", back_populates="owner")
    ratings = relationship("Rating", back_populates="user")
