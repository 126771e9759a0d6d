"""
Routes du service de notes local.

Ce sont les endpoints interrogés par LocalRatingsClient : la liste brute des
notes individuelles d'un film, par ID interne.
"""

import asyncio
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from loguru import logger

from ...core.errors import AppError
from ...core.ports.repositories import IRatingsStore
from ..deps import get_ratings_store
from ..validators import parse_movie_id

router = APIRouter(prefix="/ratings", tags=["Ratings"])


@router.get("/heartbeat")
async def heartbeat():
    """Vérifie que le service de notes répond."""
    return {
        "success": True,
        "message": "Have fun with the project!",
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/{movie_id}")
async def get_ratings(movie_id: str, store: IRatingsStore = Depends(get_ratings_store)):
    """Notes individuelles d'un film (404 si aucune)."""
    movie_id_int = parse_movie_id(movie_id)
    records = await asyncio.to_thread(store.list_for_movie, movie_id_int)
    if not records:
        raise AppError.not_found(f"No ratings found for movieId: {movie_id_int}")

    logger.info("Notes servies", movie_id=movie_id_int, ratings_count=len(records))
    return [record.to_dict() for record in records]
