"""
Service de consultation paginée du catalogue.

Listes complètes, par année de sortie et par genre, plus l'index des genres.
Chaque page est lue avec son total en une seule passe dans un thread, pour ne
pas bloquer la boucle asyncio.
"""

import asyncio
import math
from collections.abc import Callable

from loguru import logger

from src.core.entities.movie import CatalogEntry, MoviePage
from src.core.ports.repositories import ICatalogStore, SortOrder
from src.services.movie_mapper import parse_names, to_summary


class CatalogService:
    """Service de listes paginées du catalogue."""

    DEFAULT_PAGE_SIZE = 50

    def __init__(self, catalog: ICatalogStore, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        """
        Initialise le service.

        Args:
            catalog: Catalogue de films
            page_size: Nombre de films par page
        """
        self._catalog = catalog
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    def _offset(self, page: int) -> int:
        return (page - 1) * self._page_size

    def _build_page(
        self,
        page: int,
        list_fn: Callable[[], list[CatalogEntry]],
        count_fn: Callable[[], int],
    ) -> MoviePage:
        entries = list_fn()
        total_count = count_fn()
        return MoviePage(
            movies=[to_summary(entry) for entry in entries],
            page=page,
            total_pages=math.ceil(total_count / self._page_size),
            total_count=total_count,
        )

    async def list_movies(self, page: int = 1) -> MoviePage:
        """Liste une page du catalogue complet."""
        result = await asyncio.to_thread(
            self._build_page,
            page,
            lambda: self._catalog.list_movies(self._page_size, self._offset(page)),
            self._catalog.count_movies,
        )
        logger.info(
            "Films listés", page=page, count=len(result.movies), total_count=result.total_count
        )
        return result

    async def list_by_year(self, year: int, page: int = 1, order: SortOrder = "asc") -> MoviePage:
        """Liste une page des films sortis une année donnée, tries par date de sortie."""
        result = await asyncio.to_thread(
            self._build_page,
            page,
            lambda: self._catalog.list_by_year(year, self._page_size, self._offset(page), order),
            lambda: self._catalog.count_by_year(year),
        )
        logger.info(
            "Films listés par année",
            year=year,
            page=page,
            order=order,
            count=len(result.movies),
            total_count=result.total_count,
        )
        return result

    async def list_by_genre(self, genre: str, page: int = 1) -> MoviePage:
        """Liste une page des films d'un genre."""
        result = await asyncio.to_thread(
            self._build_page,
            page,
            lambda: self._catalog.list_by_genre(genre, self._page_size, self._offset(page)),
            lambda: self._catalog.count_by_genre(genre),
        )
        logger.info(
            "Films listés par genre",
            genre=genre,
            page=page,
            count=len(result.movies),
            total_count=result.total_count,
        )
        return result

    async def list_genres(self) -> list[str]:
        """Retourne les noms de genres distincts, dans l'ordre de première apparition."""
        fields = await asyncio.to_thread(self._catalog.list_genre_fields)
        genres: dict[str, None] = {}
        for field in fields:
            for name in parse_names(field, field="genres"):
                genres.setdefault(name)
        return list(genres)
