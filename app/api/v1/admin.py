"""Administrator endpoints: dashboard counts, user management and stores."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.api.v1.stores import add_store
from app.core.database import get_db
from app.schemas.admin import DashboardStats
from app.schemas.store import AdminStoreItem, StoreCreateRequest, StoreCreateResponse
from app.schemas.user import (
    UserCreateRequest,
    UserDetail,
    UserListItem,
    UserPublic,
    UserResponse,
)
from app.services import stores as store_service
from app.services import users as user_service
from app.services.dashboard import get_counts
from app.services.errors import ServiceError

# Every route here requires an administrator.
router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/dashboard", response_model=DashboardStats)
def get_dashboard(db: Annotated[Session, Depends(get_db)]) -> DashboardStats:
    """Total users, stores and ratings."""
    return get_counts(db)


@router.get("/users", response_model=list[UserListItem])
def list_users(
    db: Annotated[Session, Depends(get_db)],
    name: Annotated[str | None, Query()] = None,
    email: Annotated[str | None, Query()] = None,
    address: Annotated[str | None, Query()] = None,
    role: Annotated[str | None, Query(description="Exact role")] = None,
) -> list[UserListItem]:
    """
    Users newest first. Store owners carry store_rating (average over all
    ratings of their stores) and rating_count.
    """
    return user_service.list_users(
        db, name=name, email=email, address=address, role=role
    )


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreateRequest,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Create a user with any role."""
    try:
        user = user_service.create_user(
            db,
            name=body.name,
            email=body.email,
            password=body.password,
            address=body.address,
            role=body.role,
        )
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return UserResponse(
        message="User created successfully",
        user=UserPublic.model_validate(user),
    )


@router.get("/users/{user_id}", response_model=UserDetail)
def get_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> UserDetail:
    try:
        return user_service.get_user_detail(db, user_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e


@router.get("/stores", response_model=list[AdminStoreItem])
def list_stores(
    db: Annotated[Session, Depends(get_db)],
    name: Annotated[str | None, Query()] = None,
    email: Annotated[str | None, Query()] = None,
    address: Annotated[str | None, Query()] = None,
) -> list[AdminStoreItem]:
    return store_service.list_stores_for_admin(
        db, name=name, email=email, address=address
    )


@router.post("/stores", response_model=StoreCreateResponse, status_code=status.HTTP_201_CREATED)
def create_store(
    body: StoreCreateRequest,
    db: Annotated[Session, Depends(get_db)],
) -> StoreCreateResponse:
    return add_store(body, db)
