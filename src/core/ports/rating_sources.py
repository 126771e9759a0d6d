"""
Interface port pour les sources de notes.

Une source de notes est une opération faillible qui se résout toujours :
fetch() retourne une Rating ou None, jamais une exception pour une panne
réseau ordinaire. Seules une erreur inattendue (UNEXPECTED_SOURCE_FAILURE)
ou une panne de la base (STORAGE_UNAVAILABLE) peuvent remonter.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.core.entities.movie import Rating


class IRatingSource(ABC):
    """
    Interface de base pour les sources de notes externes.

    Les implémentations gèrent le service de notes local et l'API OMDb.
    """

    @abstractmethod
    async def fetch(self, imdb_id: str) -> Optional[Rating]:
        """
        Récupère la note d'un film.

        Args :
            imdb_id : ID IMDb du film

        Retourne :
            La note étiquetée par sa source, ou None si indisponible
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne le libellé de la source (ex: 'Local', 'Rotten Tomatoes')."""
        ...
