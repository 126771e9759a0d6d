"""
Client du service de notes local.

Implémente IRatingSource : l'ID IMDb est d'abord traduit en ID interne via le
catalogue, puis GET {ratings_api_url}/ratings/{movie_id} retourne les notes
individuelles du film, dont la moyenne arrondie au dixième devient la note
"Local".

Usage:
    client = LocalRatingsClient(base_url="http://localhost:3000", catalog=repo)
    rating = await client.fetch("tt0111161")
    await client.close()
"""

import asyncio
import math
from decimal import ROUND_HALF_UP, Decimal
from numbers import Real
from typing import Any, Optional

import httpx
from loguru import logger

from src.core.entities.movie import Rating
from src.core.errors import AppError, ErrorKind
from src.core.ports.rating_sources import IRatingSource
from src.core.ports.repositories import ICatalogStore
from src.utils.constants import LOCAL_RATING_SOURCE, RATINGS_API_ERROR, RATINGS_API_UNUSABLE


def average_rating(values: list[float]) -> float:
    """
    Moyenne arithmétique arrondie à une décimale (arrondi commercial).

    Args:
        values: Notes individuelles (non vide)

    Returns:
        Moyenne arrondie, ex: [3, 4, 5] -> 4.0, [8, 8.5] -> 8.3
    """
    mean = sum(values) / len(values)
    return float(Decimal(str(mean)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _extract_values(payload: Any) -> Optional[list[float]]:
    """
    Extrait les notes numériques du payload.

    Returns:
        Les notes, ou None si le payload est vide, malformé ou contient une
        valeur non finie (NaN, Infinity)
    """
    if not isinstance(payload, list) or not payload:
        return None
    values = []
    for item in payload:
        if not isinstance(item, dict):
            return None
        value = item.get("rating")
        if isinstance(value, bool) or not isinstance(value, Real):
            return None
        try:
            value = float(value)
        except OverflowError:
            return None
        if not math.isfinite(value):
            return None
        values.append(value)
    return values


class LocalRatingsClient(IRatingSource):
    """
    Source de notes adossée au service de notes local.

    Le client HTTP est propre à cette source (pool de connexions dédié) et
    borné par un timeout de 5 secondes, applique à la fois au client httpx
    et à l'ensemble de l'opération (résolution d'ID + requête).
    """

    DEFAULT_TIMEOUT = 5.0

    def __init__(
        self,
        base_url: str,
        catalog: ICatalogStore,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL de base du service de notes (sans / final)
            catalog: Catalogue pour traduire ID IMDb -> ID interne
            timeout: Délai maximum en secondes
        """
        self._base_url = base_url.rstrip("/")
        self._catalog = catalog
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le crée si nécessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne le libellé de la source."""
        return LOCAL_RATING_SOURCE

    async def fetch(self, imdb_id: str) -> Optional[Rating]:
        """
        Récupère la note moyenne locale d'un film.

        Args:
            imdb_id: ID IMDb du film

        Returns:
            Rating("Local", moyenne) ou None si le film n'a pas d'ID interne,
            si la réponse est vide/malformée ou si le service est injoignable

        Raises:
            AppError: STORAGE_UNAVAILABLE si le catalogue est inaccessible,
                UNEXPECTED_SOURCE_FAILURE pour toute autre erreur inattendue
        """
        try:
            async with asyncio.timeout(self._timeout):
                return await self._fetch(imdb_id)
        except TimeoutError:
            logger.warning(
                "Service de notes local trop lent - note ignorée",
                imdb_id=imdb_id,
                timeout=self._timeout,
            )
            return None
        except httpx.HTTPError as e:
            logger.warning(
                "Échec de l'appel au service de notes local - note ignorée",
                imdb_id=imdb_id,
                error=str(e) or type(e).__name__,
                status=e.response.status_code if isinstance(e, httpx.HTTPStatusError) else None,
            )
            return None
        except AppError as e:
            if e.kind is ErrorKind.SOURCE_UNAVAILABLE:
                logger.warning(
                    "Réponse inexploitable du service de notes local - note ignorée",
                    imdb_id=imdb_id,
                    **e.context,
                )
                return None
            if e.kind is ErrorKind.STORAGE_UNAVAILABLE:
                raise
            logger.error("Erreur inattendue de la source locale", imdb_id=imdb_id, error=repr(e))
            raise AppError.unexpected_source_failure(
                RATINGS_API_ERROR, imdb_id=imdb_id, source=self.source
            ) from e
        except Exception as e:
            logger.exception("Erreur inattendue de la source locale", imdb_id=imdb_id)
            raise AppError.unexpected_source_failure(
                RATINGS_API_ERROR, imdb_id=imdb_id, source=self.source
            ) from e

    async def _fetch(self, imdb_id: str) -> Optional[Rating]:
        movie_id = await asyncio.to_thread(self._catalog.get_movie_id, imdb_id)
        if movie_id is None:
            logger.info("Aucun ID interne pour ce film - pas de note locale", imdb_id=imdb_id)
            return None

        client = self._get_client()
        response = await client.get(f"/ratings/{movie_id}")
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError:
            payload = None
        logger.debug(
            "Réponse brute du service de notes local",
            imdb_id=imdb_id,
            movie_id=movie_id,
            response=payload,
        )

        values = _extract_values(payload)
        if values is None:
            raise AppError.source_unavailable(
                RATINGS_API_UNUSABLE, movie_id=movie_id, reason="empty or malformed payload"
            )
        if not math.isfinite(sum(values)):
            raise AppError.source_unavailable(
                RATINGS_API_UNUSABLE, movie_id=movie_id, reason="sum out of float range"
            )

        rating = Rating(source=self.source, value=average_rating(values))
        logger.info(
            "Note locale récupérée",
            imdb_id=imdb_id,
            movie_id=movie_id,
            rating=rating.value,
            ratings_count=len(values),
        )
        return rating

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
