"""
Client OMDb pour la note Rotten Tomatoes.

Implémente IRatingSource pour l'API OMDb (Open Movie Database), interrogée
directement par ID IMDb. Seule l'entrée "Rotten Tomatoes" de la liste Ratings
est retenue, avec sa valeur telle que fournie ("87%").

Sans clé API, aucun appel n'est effectué.

Usage:
    client = OMDbClient(api_key="your_key")
    rating = await client.fetch("tt0111161")
    await client.close()
"""

import asyncio
import math
from typing import Any, Optional

import httpx
from loguru import logger

from src.core.entities.movie import Rating
from src.core.errors import AppError, ErrorKind
from src.core.ports.rating_sources import IRatingSource
from src.utils.constants import OMDB_API_ERROR, OMDB_API_UNUSABLE, ROTTEN_TOMATOES_SOURCE


def find_rating(payload: Any, source: str) -> Optional[Any]:
    """
    Cherche la valeur d'une note par son libellé dans un payload OMDb.

    Args:
        payload: Réponse JSON décodée de l'API
        source: Libellé recherché (ex: "Rotten Tomatoes")

    Returns:
        La valeur brute (str ou nombre) ou None si absente
    """
    if not isinstance(payload, dict):
        return None
    ratings = payload.get("Ratings")
    if not isinstance(ratings, list):
        return None
    for entry in ratings:
        if isinstance(entry, dict) and entry.get("Source") == source:
            return entry.get("Value")
    return None


class OMDbClient(IRatingSource):
    """
    Source de notes adossée à l'API OMDb.

    Attributes:
        OMDB_BASE_URL: URL par défaut de l'API
    """

    OMDB_BASE_URL = "https://www.omdbapi.com/"
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = OMDB_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        target_source: str = ROTTEN_TOMATOES_SOURCE,
    ) -> None:
        """
        Initialise le client OMDb.

        Args:
            api_key: Clé API OMDb, None pour désactiver la source
            base_url: URL de l'API
            timeout: Délai maximum en secondes
            target_source: Libellé de la note à extraire
        """
        self._api_key = api_key.strip() if api_key else None
        self._base_url = base_url
        self._timeout = timeout
        self._target_source = target_source
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le crée si nécessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne le libellé de la note extraite."""
        return self._target_source

    @property
    def enabled(self) -> bool:
        """Vrai si une clé API est configurée."""
        return bool(self._api_key)

    async def fetch(self, imdb_id: str) -> Optional[Rating]:
        """
        Récupère la note Rotten Tomatoes d'un film.

        Args:
            imdb_id: ID IMDb du film

        Returns:
            Rating("Rotten Tomatoes", valeur brute) ou None si la clé est
            absente, si OMDb ne connaît pas le film, si la note n'existe pas
            ou si l'API est injoignable

        Raises:
            AppError: UNEXPECTED_SOURCE_FAILURE pour toute erreur inattendue
        """
        if not self.enabled:
            logger.warning(
                "Clé API OMDb non configurée - note Rotten Tomatoes ignorée", imdb_id=imdb_id
            )
            return None

        try:
            async with asyncio.timeout(self._timeout):
                return await self._fetch(imdb_id)
        except TimeoutError:
            logger.warning(
                "API OMDb trop lente - note ignorée", imdb_id=imdb_id, timeout=self._timeout
            )
            return None
        except httpx.HTTPError as e:
            response = e.response if isinstance(e, httpx.HTTPStatusError) else None
            logger.warning(
                "Échec de l'appel à l'API OMDb - note ignorée",
                imdb_id=imdb_id,
                error=str(e) or type(e).__name__,
                status=response.status_code if response is not None else None,
                response_data=response.text if response is not None else None,
            )
            return None
        except AppError as e:
            if e.kind is ErrorKind.SOURCE_UNAVAILABLE:
                logger.warning(
                    "Réponse OMDb inexploitable - note ignorée", imdb_id=imdb_id, **e.context
                )
                return None
            logger.error("Erreur inattendue de l'API OMDb", imdb_id=imdb_id, error=repr(e))
            raise AppError.unexpected_source_failure(
                OMDB_API_ERROR, imdb_id=imdb_id, source=self.source
            ) from e
        except Exception as e:
            logger.exception("Erreur inattendue de l'API OMDb", imdb_id=imdb_id)
            raise AppError.unexpected_source_failure(
                OMDB_API_ERROR, imdb_id=imdb_id, source=self.source
            ) from e

    async def _fetch(self, imdb_id: str) -> Optional[Rating]:
        client = self._get_client()
        response = await client.get(
            self._base_url,
            params={"i": imdb_id, "apikey": self._api_key},
        )
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError:
            raise AppError.source_unavailable(OMDB_API_UNUSABLE, reason="non-JSON body")
        logger.debug("Réponse brute de l'API OMDb", imdb_id=imdb_id, response=payload)

        if isinstance(payload, dict) and payload.get("Response") == "False":
            logger.warning(
                "OMDb a retourné une erreur", imdb_id=imdb_id, error=payload.get("Error")
            )
            return None

        value = find_rating(payload, self._target_source)
        if value is None:
            ratings = payload.get("Ratings") if isinstance(payload, dict) else None
            available = (
                [entry.get("Source") for entry in ratings if isinstance(entry, dict)]
                if isinstance(ratings, list)
                else []
            )
            logger.info(
                "Pas de note Rotten Tomatoes pour ce film",
                imdb_id=imdb_id,
                available_ratings=available,
            )
            return None

        if isinstance(value, float) and not math.isfinite(value):
            raise AppError.source_unavailable(OMDB_API_UNUSABLE, reason="non-finite value")

        logger.info("Note Rotten Tomatoes récupérée", imdb_id=imdb_id, rating=value)
        return Rating(source=self._target_source, value=value)

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
