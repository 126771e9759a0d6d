"""
Service d'agrégation des notes d'un film.

Interroge en parallèle la source locale et la source distante (OMDb), attend
que les deux soient terminées puis construit la liste ordonnée des notes et la
note moyenne. Une source en échec est simplement omise.
"""

import asyncio
from typing import Optional

from loguru import logger

from src.core.entities.movie import AggregatedRatings, Rating
from src.core.errors import AppError, ErrorKind
from src.core.ports.rating_sources import IRatingSource


class RatingsAggregatorService:
    """
    Service d'agrégation des sources de notes.

    L'ordre des notes est fixe : source locale puis source distante. La note
    moyenne provient uniquement de la source locale.
    """

    def __init__(
        self,
        local_source: IRatingSource,
        remote_source: IRatingSource,
    ) -> None:
        """
        Initialise le service d'agrégation.

        Args:
            local_source: Source de notes locale (moyenne numérique)
            remote_source: Source de notes distante (valeur brute)
        """
        self._local_source = local_source
        self._remote_source = remote_source

    async def aggregate(self, imdb_id: str) -> AggregatedRatings:
        """
        Récupère et assemble les notes d'un film.

        Les deux sources tournent dans deux tâches indépendantes ; l'échec ou
        la lenteur de l'une n'annule pas l'autre.

        Args:
            imdb_id: ID IMDb du film

        Returns:
            Notes résolues et note moyenne (None sans note locale)

        Raises:
            AppError: STORAGE_UNAVAILABLE si une source n'a pas pu lire le catalogue
        """
        local_task = asyncio.create_task(self._local_source.fetch(imdb_id))
        remote_task = asyncio.create_task(self._remote_source.fetch(imdb_id))
        local_result, remote_result = await asyncio.gather(
            local_task, remote_task, return_exceptions=True
        )

        local = self._settle(self._local_source, local_result, imdb_id)
        remote = self._settle(self._remote_source, remote_result, imdb_id)

        ratings = tuple(rating for rating in (local, remote) if rating is not None)
        average_rating = float(local.value) if local is not None else None

        logger.info(
            "Notes agrégées",
            imdb_id=imdb_id,
            ratings_count=len(ratings),
            has_local_rating=local is not None,
            has_remote_rating=remote is not None,
        )
        return AggregatedRatings(ratings=ratings, average_rating=average_rating)

    @staticmethod
    def _settle(
        source: IRatingSource,
        result: Optional[Rating] | BaseException,
        imdb_id: str,
    ) -> Optional[Rating]:
        """Retourne la note d'une source, ou None si elle a échoue."""
        if not isinstance(result, BaseException):
            return result

        if isinstance(result, AppError):
            if result.kind is ErrorKind.STORAGE_UNAVAILABLE:
                raise result
            if result.kind is ErrorKind.UNEXPECTED_SOURCE_FAILURE:
                logger.error(
                    "Échec inattendu d'une source de notes - poursuite sans cette note",
                    imdb_id=imdb_id,
                    source=source.source,
                    error=result.message,
                )
                return None

        logger.warning(
            "Échec d'une source de notes - poursuite sans cette note",
            imdb_id=imdb_id,
            source=source.source,
            error=repr(result),
        )
        return None
