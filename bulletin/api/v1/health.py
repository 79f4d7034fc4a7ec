"""Health check endpoint with database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from bulletin import __version__
from bulletin.core.config import get_settings
from bulletin.core.database import check_db_connected, get_db
from bulletin.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Service status and database connectivity, for load balancers and monitoring."""
    return HealthResponse(
        status="ok",
        version=__version__,
        environment=get_settings().APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
