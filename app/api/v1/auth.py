"""Registration, JWT login and auth dependencies (get_current_user and role checks)."""

from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.security import create_access_token, decode_access_token, verify_password
from app.models.user import ROLE_ADMIN, ROLE_NORMAL_USER, ROLE_STORE_OWNER, User
from app.schemas.auth import AuthResponse, CurrentUser, LoginRequest, RegisterRequest
from app.schemas.user import UserPublic
from app.services.errors import ServiceError
from app.services.users import create_user, get_user_by_email

router = APIRouter()
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Create a normal_user account and return a JWT access token for it.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    try:
        user = create_user(
            db,
            name=body.name,
            email=body.email,
            password=body.password,
            address=body.address,
            role=ROLE_NORMAL_USER,
        )
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    token = create_access_token(sub=user.id, role=user.role)
    return AuthResponse(
        message="User registered successfully",
        user=UserPublic.model_validate(user),
        access_token=token,
        token_type="bearer",
    )


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Authenticate with email and password; returns a JWT access token and the user."""
    if not body.email or not body.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password required",
        )

    user = get_user_by_email(db, body.email)
    if user is None or not verify_password(body.password, user.password_hash):
        raise _unauthorized("Invalid credentials")
    token = create_access_token(sub=user.id, role=user.role)
    return AuthResponse(
        message="Login successful",
        user=UserPublic.model_validate(user),
        access_token=token,
        token_type="bearer",
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: require valid Bearer JWT and return the current user. Raises 401 if missing or invalid."""
    if credentials is None:
        raise _unauthorized("Not authenticated")
    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.PyJWTError:
        raise _unauthorized("Invalid or expired token")
    sub = payload.get("sub")
    if not sub:
        raise _unauthorized("Invalid token payload")
    try:
        user_id = int(sub)
    except (TypeError, ValueError):
        raise _unauthorized("Invalid token payload")
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise _unauthorized("User not found")
    # Role comes from the row, not the token, so role changes apply immediately.
    return CurrentUser(id=user.id, name=user.name, email=user.email, role=user.role)


def require_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require role 'system_administrator'. Raises 403 otherwise."""
    if current_user.role != ROLE_ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return current_user


def require_store_owner(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require role 'store_owner'. Raises 403 otherwise."""
    if current_user.role != ROLE_STORE_OWNER:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Store owner access required",
        )
    return current_user


def require_user_or_admin(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Dependency: require role 'normal_user' or 'system_administrator'. Raises 403 for store owners."""
    if current_user.role not in (ROLE_NORMAL_USER, ROLE_ADMIN):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User access required",
        )
    return current_user
