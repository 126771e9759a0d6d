"""
Implémentation SQLModel de la base des notes individuelles.

Sert le endpoint /ratings/{movie_id} interrogé par la source de notes locale.
"""

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.core.entities.movie import RatingRecord
from src.core.errors import AppError
from src.core.ports.repositories import IRatingsStore
from src.infrastructure.persistence.models import RatingModel
from src.utils.constants import DATABASE_QUERY_ERROR


class SQLModelRatingsRepository(IRatingsStore):
    """Repository SQLModel pour les notes individuelles."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_for_movie(self, movie_id: int) -> list[RatingRecord]:
        """Liste les notes d'un film, dans l'ordre des utilisateurs."""
        statement = (
            select(RatingModel)
            .where(RatingModel.movie_id == movie_id)
            .order_by(RatingModel.user_id)
        )
        try:
            with Session(self._engine) as session:
                models = session.exec(statement).all()
                return [
                    RatingRecord(
                        user_id=model.user_id,
                        movie_id=model.movie_id,
                        rating=model.rating,
                        timestamp=model.timestamp,
                    )
                    for model in models
                ]
        except SQLAlchemyError as e:
            logger.error("Échec de la lecture des notes", movie_id=movie_id, error=str(e))
            raise AppError.storage_unavailable(DATABASE_QUERY_ERROR, movie_id=movie_id) from e
