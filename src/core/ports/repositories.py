"""
Interfaces ports pour les repositories.

Contrats de lecture sur le catalogue de films et sur la base des notes
individuelles. Les implémentations SQLModel convertissent toute erreur de la
base en AppError(STORAGE_UNAVAILABLE).
"""

from abc import ABC, abstractmethod
from typing import Literal, Optional

from src.core.entities.movie import CatalogEntry, RatingRecord

SortOrder = Literal["asc", "desc"]


class ICatalogStore(ABC):
    """
    Interface de lecture du catalogue de films.

    Définit les opérations de consultation de la table movies.
    """

    @abstractmethod
    def get_by_imdb_id(self, imdb_id: str) -> CatalogEntry:
        """Récupère un film par son ID IMDb. Lève AppError(NOT_FOUND) si absent."""
        ...

    @abstractmethod
    def get_movie_id(self, imdb_id: str) -> Optional[int]:
        """Retourne l'ID interne d'un film, ou None si l'ID IMDb est inconnu."""
        ...

    @abstractmethod
    def list_movies(self, limit: int, offset: int) -> list[CatalogEntry]:
        """Liste une page du catalogue."""
        ...

    @abstractmethod
    def count_movies(self) -> int:
        """Compte les films du catalogue."""
        ...

    @abstractmethod
    def list_by_year(
        self, year: int, limit: int, offset: int, order: SortOrder = "asc"
    ) -> list[CatalogEntry]:
        """Liste une page des films sortis une année donnée, triés par date."""
        ...

    @abstractmethod
    def count_by_year(self, year: int) -> int:
        """Compte les films sortis une année donnée."""
        ...

    @abstractmethod
    def list_by_genre(self, genre: str, limit: int, offset: int) -> list[CatalogEntry]:
        """Liste une page des films dont les genres contiennent le texte donné."""
        ...

    @abstractmethod
    def count_by_genre(self, genre: str) -> int:
        """Compte les films dont les genres contiennent le texte donné."""
        ...

    @abstractmethod
    def list_genre_fields(self) -> list[str]:
        """Retourne les champs genres sérialisés non vides de tout le catalogue."""
        ...


class IRatingsStore(ABC):
    """Interface de lecture des notes individuelles du service de notes local."""

    @abstractmethod
    def list_for_movie(self, movie_id: int) -> list[RatingRecord]:
        """Liste les notes d'un film par son ID interne."""
        ...
