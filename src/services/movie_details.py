"""
Service de composition de la fiche détaillée d'un film.

Le film est lu dans le catalogue avant toute autre chose : un film inconnu
(NOT_FOUND) ou une base indisponible (STORAGE_UNAVAILABLE) interrompt la
requête sans interroger les sources de notes.
"""

import asyncio

from loguru import logger

from src.core.entities.movie import DetailView
from src.core.errors import AppError
from src.core.ports.repositories import ICatalogStore
from src.services.movie_mapper import to_detail_view
from src.services.ratings_aggregator import RatingsAggregatorService
from src.utils.constants import IMDB_ID_REQUIRED


class MovieDetailsService:
    """Service de composition des fiches film."""

    def __init__(
        self,
        catalog: ICatalogStore,
        aggregator: RatingsAggregatorService,
    ) -> None:
        """
        Initialise le service.

        Args:
            catalog: Catalogue de films
            aggregator: Service d'agrégation des notes
        """
        self._catalog = catalog
        self._aggregator = aggregator

    async def compose_details(self, imdb_id: str) -> DetailView:
        """
        Construit la fiche détaillée d'un film.

        Args:
            imdb_id: ID IMDb du film

        Returns:
            Fiche détaillée, avec une liste de notes éventuellement vide

        Raises:
            AppError: VALIDATION si l'ID est vide, NOT_FOUND si le film est
                inconnu, STORAGE_UNAVAILABLE si la base est inaccessible
        """
        if not imdb_id or not imdb_id.strip():
            raise AppError.validation(IMDB_ID_REQUIRED)

        entry = await asyncio.to_thread(self._catalog.get_by_imdb_id, imdb_id)
        logger.info("Film trouvé dans le catalogue", imdb_id=imdb_id, title=entry.title)

        aggregated = await self._aggregator.aggregate(imdb_id)
        return to_detail_view(entry, aggregated)
