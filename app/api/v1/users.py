"""Endpoints for the signed-in user: profile, password and owned stores."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user, require_store_owner
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.store import OwnerStoreItem
from app.schemas.user import (
    MessageResponse,
    PasswordChangeRequest,
    ProfileUpdateRequest,
    UserPublic,
    UserResponse,
)
from app.services import users as user_service
from app.services.errors import ServiceError
from app.services.stores import list_owner_stores

router = APIRouter()


@router.get("/profile", response_model=UserPublic)
def get_profile(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserPublic:
    """Return the caller's own profile (no password hash)."""
    try:
        user = user_service.get_user(db, current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return UserPublic.model_validate(user)


@router.put("/profile", response_model=UserResponse)
def update_profile(
    body: ProfileUpdateRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Update name, email and address. Email must not be used by another account."""
    try:
        user = user_service.get_user(db, current_user.id)
        user = user_service.update_profile(
            db, user, name=body.name, email=body.email, address=body.address
        )
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return UserResponse(
        message="Profile updated successfully",
        user=UserPublic.model_validate(user),
    )


@router.put("/change-password", response_model=MessageResponse)
def change_password(
    body: PasswordChangeRequest,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Change the caller's password; the current password must match."""
    try:
        user = user_service.get_user(db, current_user.id)
        user_service.change_password(
            db,
            user,
            current_password=body.current_password,
            new_password=body.new_password,
        )
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return MessageResponse(message="Password changed successfully")


@router.get("/stores", response_model=list[OwnerStoreItem])
def get_my_stores(
    owner: Annotated[CurrentUser, Depends(require_store_owner)],
    db: Annotated[Session, Depends(get_db)],
) -> list[OwnerStoreItem]:
    """Stores owned by the caller (store owners only), with average rating and count."""
    return list_owner_stores(db, owner.id)
