"""
Module de persistance SQLite pour Movies API.

Ce module fournit l'infrastructure de lecture utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Construction des engines et initialisation des tables
- models.py : Modèles SQLModel représentant les tables movies et ratings
- repositories/ : Implementations des ports ICatalogStore et IRatingsStore

Usage:
    from src.infrastructure.persistence import create_db_engine, init_db, MovieModel

    engine = create_db_engine("sqlite:///db/movies.db")
    init_db(engine, [MovieModel])
"""

from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.models import MovieModel, RatingModel

__all__ = [
    "create_db_engine",
    "init_db",
    "MovieModel",
    "RatingModel",
]
