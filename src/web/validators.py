"""
Validation des paramètres de requête bruts.

Les paramètres sont reçus sous forme de chaînes pour produire les messages
d'erreur de l'API (enveloppe VALIDATION_ERROR) plutôt que les 422 de FastAPI.
"""

from typing import Optional

from src.core.errors import AppError
from src.core.ports.repositories import SortOrder
from src.utils.constants import (
    GENRE_REQUIRED,
    INVALID_MOVIE_ID,
    INVALID_PAGE_PARAMETER,
    INVALID_SORT_ORDER,
    INVALID_YEAR_PARAMETER,
    MAX_YEAR,
    MIN_YEAR,
)


def _to_int(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_page(raw: Optional[str]) -> int:
    """Page optionnelle, entier strictement positif (1 par défaut)."""
    if raw is None:
        return 1
    page = _to_int(raw)
    if page is None or page < 1:
        raise AppError.validation(INVALID_PAGE_PARAMETER, page=raw)
    return page


def parse_year(raw: str) -> int:
    """Année obligatoire, strictement comprise entre MIN_YEAR et MAX_YEAR."""
    year = _to_int(raw) if raw else None
    if year is None or not MIN_YEAR < year < MAX_YEAR:
        raise AppError.validation(INVALID_YEAR_PARAMETER, year=raw)
    return year


def parse_order(raw: Optional[str]) -> SortOrder:
    """Ordre de tri optionnel, 'asc' (défaut) ou 'desc'."""
    if not raw:
        return "asc"
    if raw == "asc":
        return "asc"
    if raw == "desc":
        return "desc"
    raise AppError.validation(INVALID_SORT_ORDER, order=raw)


def parse_genre(raw: Optional[str]) -> str:
    """Genre obligatoire et non vide."""
    if not raw or not raw.strip():
        raise AppError.validation(GENRE_REQUIRED)
    return raw


def parse_movie_id(raw: str) -> int:
    """ID interne de film, entier."""
    movie_id = _to_int(raw)
    if movie_id is None:
        raise AppError.validation(INVALID_MOVIE_ID, movie_id=raw)
    return movie_id
