"""
Routes du catalogue de films : listes paginées et fiche détaillée.
"""

import time
from typing import Any, Optional

from fastapi import APIRouter, Depends
from loguru import logger

from ...services.catalog_service import CatalogService
from ...services.movie_details import MovieDetailsService
from ...utils.constants import (
    GENRES_FETCHED,
    MOVIE_DETAILS_FETCHED,
    MOVIES_BY_GENRE_FETCHED,
    MOVIES_BY_YEAR_FETCHED,
    MOVIES_FETCHED,
)
from ..deps import get_catalog_service, get_movie_details_service
from ..validators import parse_genre, parse_order, parse_page, parse_year

router = APIRouter(prefix="/movies", tags=["Movies"])


def _success(message: str, data: Any) -> dict[str, Any]:
    return {"success": True, "message": message, "data": data}


@router.get("")
async def list_all_movies(
    page: Optional[str] = None,
    service: CatalogService = Depends(get_catalog_service),
):
    """Liste paginée de tout le catalogue."""
    result = await service.list_movies(parse_page(page))
    return _success(MOVIES_FETCHED, result.to_dict())


@router.get("/details/{imdb_id}")
async def get_movie_details(
    imdb_id: str,
    service: MovieDetailsService = Depends(get_movie_details_service),
):
    """Fiche détaillée d'un film avec ses notes agrégées."""
    start = time.perf_counter()
    details = await service.compose_details(imdb_id)
    logger.info(
        MOVIE_DETAILS_FETCHED,
        imdb_id=imdb_id,
        title=details.title,
        ratings_count=len(details.ratings),
        duration_ms=round((time.perf_counter() - start) * 1000, 1),
    )
    return _success(MOVIE_DETAILS_FETCHED, details.to_dict())


@router.get("/year/{year}")
async def list_movies_by_year(
    year: str,
    page: Optional[str] = None,
    order: Optional[str] = None,
    service: CatalogService = Depends(get_catalog_service),
):
    """Films sortis une année donnée, tries par date de sortie."""
    result = await service.list_by_year(parse_year(year), parse_page(page), parse_order(order))
    return _success(MOVIES_BY_YEAR_FETCHED, result.to_dict())


@router.get("/genre")
async def list_movies_by_genre(
    genre: Optional[str] = None,
    page: Optional[str] = None,
    service: CatalogService = Depends(get_catalog_service),
):
    """Films dont les genres contiennent le texte donné."""
    result = await service.list_by_genre(parse_genre(genre), parse_page(page))
    return _success(MOVIES_BY_GENRE_FETCHED, result.to_dict())


@router.get("/genres")
async def list_genres(service: CatalogService = Depends(get_catalog_service)):
    """Index des genres presents dans le catalogue."""
    return _success(GENRES_FETCHED, await service.list_genres())
