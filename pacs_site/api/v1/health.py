"""Health check for the site: process up and database reachable."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pacs_site.core.config import settings
from pacs_site.core.database import check_db_connected, get_db
from pacs_site.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """'connected' when the SQLite file or PostgreSQL server answers a trivial query."""
    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
