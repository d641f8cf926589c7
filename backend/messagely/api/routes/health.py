from fastapi import APIRouter
from datetime import datetime, timezone
import logging

from ..schemas import HealthResponse
from ...db.database import get_db
from ...core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    try:
        db = get_db()
        await db.fetch_one("SELECT 1")
        database_status = "connected"
    except Exception as e:
        logger.warning(f"Health check could not reach the database: {e}")
        database_status = "disconnected"

    return HealthResponse(
        status="healthy" if database_status == "connected" else "unhealthy",
        service="messagely-api",
        version=settings.VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        database=database_status
    )
