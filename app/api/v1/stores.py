"""Store browsing, admin store listing/creation and store details."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user, require_admin
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.store import (
    AdminStoreItem,
    StoreBase,
    StoreCreateRequest,
    StoreCreateResponse,
    StoreDetail,
    StoreListItem,
)
from app.services import stores as store_service
from app.services.errors import ServiceError

router = APIRouter()


def add_store(body: StoreCreateRequest, db: Session) -> StoreCreateResponse:
    """Shared by POST /stores and POST /admin/stores."""
    try:
        store = store_service.create_store(
            db,
            name=body.name,
            email=body.email,
            address=body.address,
            owner_email=body.owner_email,
        )
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return StoreCreateResponse(
        message="Store created successfully",
        store=StoreBase.model_validate(store),
    )


@router.get("", response_model=list[StoreListItem])
def list_stores(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    name: Annotated[str | None, Query(description="Substring of the store name")] = None,
    address: Annotated[str | None, Query(description="Substring of the store address")] = None,
) -> list[StoreListItem]:
    """
    Browse stores ordered by name.

    Each store carries its average rating (0 when unrated), the number of
    ratings, and the caller's own rating in user_rating (null if not rated).
    """
    return store_service.list_stores_for_user(
        db, current_user.id, name=name, address=address
    )


@router.get("/admin", response_model=list[AdminStoreItem])
def list_stores_admin(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
    name: Annotated[str | None, Query()] = None,
    email: Annotated[str | None, Query()] = None,
    address: Annotated[str | None, Query()] = None,
) -> list[AdminStoreItem]:
    """All stores with avg_rating and rating_count, newest first (admin only)."""
    return store_service.list_stores_for_admin(
        db, name=name, email=email, address=address
    )


@router.post("", response_model=StoreCreateResponse, status_code=status.HTTP_201_CREATED)
def create_store(
    body: StoreCreateRequest,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> StoreCreateResponse:
    """Add a store owned by the store_owner with owner_email (admin only)."""
    return add_store(body, db)


@router.get("/{store_id}", response_model=StoreDetail)
def get_store(
    store_id: int,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> StoreDetail:
    """Store details with owner name/email, average rating and total ratings."""
    try:
        return store_service.get_store_detail(db, store_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
