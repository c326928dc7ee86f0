"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from adapter.mongodb.connection import get_mongodb_client
from utils.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(settings: Settings = Depends(get_settings)):
    """Health check endpoint with user store status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    if not settings.mongo_url:
        health_status["services"]["user_store"] = {
            "status": "healthy",
            "message": "In-memory store (MONGO_URL not configured)"
        }
        return JSONResponse(content=health_status, status_code=status.HTTP_200_OK)

    healthy = get_mongodb_client(settings.mongo_url) is not None
    if healthy:
        health_status["services"]["mongodb"] = {
            "status": "healthy",
            "message": "Connection successful"
        }
    else:
        logger.warning("Health check: MongoDB unreachable")
        health_status["services"]["mongodb"] = {
            "status": "unhealthy",
            "message": "Connection failed"
        }
        health_status["status"] = "degraded"

    return JSONResponse(
        content=health_status,
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE
    )
