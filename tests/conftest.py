"""
Fixtures pytest partagées pour les tests Movies API.

Ce module contient les fixtures communes utilisées dans les tests:
- Bases SQLite en mémoire pré-remplies (catalogue et notes)
- Repositories SQLModel branches sur ces bases
- Mock de ICatalogStore pour les clients de notes
- Settings de test
"""

import json
from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from sqlalchemy import Engine
from sqlmodel import Session

from src.config import Settings
from src.core.ports.repositories import ICatalogStore
from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.models import MovieModel, RatingModel
from src.infrastructure.persistence.repositories import (
    SQLModelCatalogRepository,
    SQLModelRatingsRepository,
)
from tests.fixtures.ratings_responses import RATINGS_API_URL


def _genres(*names: str) -> str:
    return json.dumps([{"id": index, "name": name} for index, name in enumerate(names)])


# Ordre de la table (movieId) : 7, 42, 99, 150
SAMPLE_MOVIES = [
    {
        "movie_id": 42,
        "imdb_id": "tt0111161",
        "title": "The Shawshank Redemption",
        "overview": "Two imprisoned men bond over a number of years.",
        "production_companies": json.dumps(
            [{"id": 97, "name": "Castle Rock Entertainment"}]
        ),
        "release_date": "1994-09-23",
        "budget": 25000000,
        "revenue": 28341469,
        "runtime": 142,
        "language": "en",
        "genres": _genres("Drama", "Crime"),
        "status": "Released",
    },
    {
        "movie_id": 7,
        "imdb_id": "tt0068646",
        "title": "The Godfather",
        "overview": "The aging patriarch of an organized crime dynasty.",
        "production_companies": json.dumps([{"id": 4, "name": "Paramount Pictures"}]),
        "release_date": "1972-03-14",
        "budget": 6000000,
        "revenue": 245066411,
        "runtime": 175,
        "language": "en",
        "genres": _genres("Drama", "Crime"),
        "status": "Released",
    },
    {
        "movie_id": 99,
        "imdb_id": "tt0109830",
        "title": "Forrest Gump",
        "overview": "A man with a low IQ has accomplished great things.",
        "production_companies": json.dumps([{"id": 4, "name": "Paramount Pictures"}]),
        "release_date": "1994-07-06",
        "budget": 55000000,
        "revenue": 677945399,
        "runtime": 142,
        "language": "en",
        "genres": _genres("Comedy", "Drama", "Romance"),
        "status": "Released",
    },
    {
        # Ligne incomplete : champs optionnels absents, genres illisibles
        "movie_id": 150,
        "imdb_id": "tt0000150",
        "title": "Untitled Project",
        "genres": "{not json",
    },
]

# movieId 42 -> [8, 9, 10] (moyenne 9.0), movieId 7 -> [4.5]
SAMPLE_RATINGS = [
    {"user_id": 3, "movie_id": 42, "rating": 10.0, "timestamp": 1260759200},
    {"user_id": 1, "movie_id": 42, "rating": 8.0, "timestamp": 1260759144},
    {"user_id": 2, "movie_id": 42, "rating": 9.0, "timestamp": 1260759179},
    {"user_id": 1, "movie_id": 7, "rating": 4.5, "timestamp": 1260759300},
]


@pytest.fixture
def movies_engine() -> Iterator[Engine]:
    """Base catalogue en mémoire contenant SAMPLE_MOVIES."""
    engine = create_db_engine("sqlite://")
    init_db(engine, [MovieModel])
    with Session(engine) as session:
        session.add_all([MovieModel(**row) for row in SAMPLE_MOVIES])
        session.commit()
    yield engine
    engine.dispose()


@pytest.fixture
def ratings_engine() -> Iterator[Engine]:
    """Base des notes en mémoire contenant SAMPLE_RATINGS."""
    engine = create_db_engine("sqlite://")
    init_db(engine, [RatingModel])
    with Session(engine) as session:
        session.add_all([RatingModel(**row) for row in SAMPLE_RATINGS])
        session.commit()
    yield engine
    engine.dispose()


@pytest.fixture
def empty_engine() -> Iterator[Engine]:
    """Base en mémoire sans aucune table (simule une base inaccessible)."""
    engine = create_db_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def catalog_repository(movies_engine: Engine) -> SQLModelCatalogRepository:
    return SQLModelCatalogRepository(movies_engine)


@pytest.fixture
def ratings_repository(ratings_engine: Engine) -> SQLModelRatingsRepository:
    return SQLModelRatingsRepository(ratings_engine)


@pytest.fixture
def mock_catalog() -> MagicMock:
    """
    Mock de ICatalogStore pour les tests des sources de notes.

    tt0111161 correspond à l'ID interne 42 par défaut.
    """
    mock = MagicMock(spec=ICatalogStore)
    mock.get_movie_id.return_value = 42
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test, sans clé OMDb et sans fichier .env."""
    return Settings(
        _env_file=None,
        environment="test",
        database_url="sqlite://",
        ratings_database_url="sqlite://",
        ratings_api_url=RATINGS_API_URL,
        omdb_api_key=None,
        log_file=tmp_path / "test.log",
    )
