"""Liveness endpoint reporting environment and database reachability."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()

SERVICE_NAME = "store-rating-api"


@router.get("/", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Always 200 while the process is up; database reports connected or disconnected."""
    return HealthResponse(
        status="ok",
        service=SERVICE_NAME,
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
