"""
Route de santé du service.
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from ...container import Container
from ..deps import get_container

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health(request: Request, container: Container = Depends(get_container)):
    """État du service et resume de la configuration (sans secrets)."""
    settings = container.config()
    return {
        "success": True,
        "message": "Movies API is healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - request.app.state.started_at, 3),
        "config": {
            "hasOMDBKey": settings.omdb_enabled,
            "ratingsApiUrl": settings.ratings_api_url,
            "environment": settings.environment,
        },
    }
