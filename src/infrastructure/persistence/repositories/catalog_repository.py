"""
Implémentation SQLModel du catalogue de films.

Implémente l'interface ICatalogStore en lecture seule sur la table movies.
Chaque operation ouvre sa propre session sur l'engine injecté ; toute erreur
SQLAlchemy est convertie en AppError(STORAGE_UNAVAILABLE).
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from loguru import logger
from sqlalchemy import Engine, func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.core.entities.movie import CatalogEntry
from src.core.errors import AppError
from src.core.ports.repositories import ICatalogStore, SortOrder
from src.infrastructure.persistence.models import MovieModel
from src.utils.constants import DATABASE_QUERY_ERROR, MOVIE_NOT_FOUND


class SQLModelCatalogRepository(ICatalogStore):
    """
    Repository SQLModel pour le catalogue.

    Convertit les MovieModel (persistance) en CatalogEntry (domaine).
    """

    def __init__(self, engine: Engine) -> None:
        """
        Initialise le repository avec l'engine de la base catalogue.

        Args :
            engine : Engine SQLAlchemy de la base movies
        """
        self._engine = engine

    @contextmanager
    def _session(self, operation: str, **context) -> Iterator[Session]:
        """Ouvre une session et convertit les erreurs de la base."""
        try:
            with Session(self._engine) as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(
                "Échec de la requête catalogue",
                operation=operation,
                error=str(e),
                **context,
            )
            raise AppError.storage_unavailable(
                DATABASE_QUERY_ERROR, operation=operation, **context
            ) from e

    @staticmethod
    def _to_entity(model: MovieModel) -> CatalogEntry:
        return CatalogEntry(
            movie_id=model.movie_id,
            imdb_id=model.imdb_id,
            title=model.title,
            overview=model.overview,
            genres=model.genres,
            production_companies=model.production_companies,
            release_date=model.release_date,
            budget=model.budget,
            revenue=model.revenue,
            runtime=model.runtime,
            language=model.language,
            status=model.status,
        )

    def get_by_imdb_id(self, imdb_id: str) -> CatalogEntry:
        """Récupère un film par son ID IMDb."""
        with self._session("get_by_imdb_id", imdb_id=imdb_id) as session:
            statement = select(MovieModel).where(MovieModel.imdb_id == imdb_id)
            model = session.exec(statement).first()
            if model is None:
                logger.warning("Film introuvable", imdb_id=imdb_id)
                raise AppError.not_found(MOVIE_NOT_FOUND, imdb_id=imdb_id)
            return self._to_entity(model)

    def get_movie_id(self, imdb_id: str) -> Optional[int]:
        """Retourne l'ID interne d'un film (projection movieId seule)."""
        with self._session("get_movie_id", imdb_id=imdb_id) as session:
            statement = select(MovieModel.movie_id).where(MovieModel.imdb_id == imdb_id)
            return session.exec(statement).first()

    def list_movies(self, limit: int, offset: int) -> list[CatalogEntry]:
        """Liste une page du catalogue dans l'ordre de la table."""
        with self._session("list_movies", limit=limit, offset=offset) as session:
            statement = (
                select(MovieModel).order_by(MovieModel.movie_id).limit(limit).offset(offset)
            )
            return [self._to_entity(model) for model in session.exec(statement).all()]

    def count_movies(self) -> int:
        """Compte les films du catalogue."""
        with self._session("count_movies") as session:
            statement = select(func.count()).select_from(MovieModel)
            return session.exec(statement).one()

    def list_by_year(
        self, year: int, limit: int, offset: int, order: SortOrder = "asc"
    ) -> list[CatalogEntry]:
        """Liste les films dont la date de sortie commence par l'année donnée."""
        order_by = (
            MovieModel.release_date.desc() if order == "desc" else MovieModel.release_date.asc()
        )
        with self._session("list_by_year", year=year, limit=limit, offset=offset) as session:
            statement = (
                select(MovieModel)
                .where(func.substr(MovieModel.release_date, 1, 4) == str(year))
                .order_by(order_by)
                .limit(limit)
                .offset(offset)
            )
            return [self._to_entity(model) for model in session.exec(statement).all()]

    def count_by_year(self, year: int) -> int:
        """Compte les films sortis une année donnée."""
        with self._session("count_by_year", year=year) as session:
            statement = (
                select(func.count())
                .select_from(MovieModel)
                .where(func.substr(MovieModel.release_date, 1, 4) == str(year))
            )
            return session.exec(statement).one()

    def list_by_genre(self, genre: str, limit: int, offset: int) -> list[CatalogEntry]:
        """Liste les films dont le champ genres contient le texte donné (LIKE)."""
        with self._session("list_by_genre", genre=genre, limit=limit, offset=offset) as session:
            statement = (
                select(MovieModel)
                .where(MovieModel.genres.contains(genre))
                .order_by(MovieModel.movie_id)
                .limit(limit)
                .offset(offset)
            )
            return [self._to_entity(model) for model in session.exec(statement).all()]

    def count_by_genre(self, genre: str) -> int:
        """Compte les films dont le champ genres contient le texte donné."""
        with self._session("count_by_genre", genre=genre) as session:
            statement = (
                select(func.count())
                .select_from(MovieModel)
                .where(MovieModel.genres.contains(genre))
            )
            return session.exec(statement).one()

    def list_genre_fields(self) -> list[str]:
        """Retourne les champs genres non vides, dans l'ordre de la table."""
        with self._session("list_genre_fields") as session:
            statement = (
                select(MovieModel.genres)
                .where(MovieModel.genres.isnot(None))
                .order_by(MovieModel.movie_id)
            )
            return [genres for genres in session.exec(statement).all() if genres]
