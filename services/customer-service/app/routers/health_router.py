"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from .. import __version__
from ..config import settings
from ..database import MongoManager
from ..dependencies import get_mongo_manager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(manager: MongoManager = Depends(get_mongo_manager)):
    """
    Health check endpoint.

    Reports ``degraded`` when MongoDB does not answer a ping.
    """
    database_ok = await manager.ping()
    return HealthResponse(
        status="healthy" if database_ok else "degraded",
        service=settings.SERVICE_NAME,
        version=__version__,
        database="connected" if database_ok else "unavailable",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
