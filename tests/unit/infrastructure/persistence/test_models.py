"""
Tests pour les modèles SQLModel de persistance.

Vérifie le mapping des attributs snake_case vers les colonnes camelCase des
bases existantes, et la création des tables par init_db.
"""

from pathlib import Path

from sqlalchemy import inspect

from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.models import MovieModel, RatingModel


class TestMovieModel:
    """Tests pour MovieModel."""

    def test_table_name(self):
        assert MovieModel.__tablename__ == "movies"

    def test_camel_case_columns(self):
        columns = set(MovieModel.__table__.columns.keys())

        assert columns == {
            "movieId",
            "imdbId",
            "title",
            "overview",
            "productionCompanies",
            "releaseDate",
            "budget",
            "revenue",
            "runtime",
            "language",
            "genres",
            "status",
        }

    def test_primary_key(self):
        assert [column.name for column in MovieModel.__table__.primary_key] == ["movieId"]

    def test_optional_fields_default_to_none(self):
        model = MovieModel(imdb_id="tt0111161", title="The Shawshank Redemption")

        assert model.movie_id is None
        assert model.overview is None
        assert model.budget is None
        assert model.genres is None


class TestRatingModel:
    """Tests pour RatingModel."""

    def test_composite_primary_key(self):
        assert {column.name for column in RatingModel.__table__.primary_key} == {
            "userId",
            "movieId",
        }

    def test_fields(self):
        model = RatingModel(user_id=1, movie_id=42, rating=8.5, timestamp=1260759144)

        assert model.rating == 8.5
        assert model.movie_id == 42


class TestInitDb:
    """Tests de create_db_engine et init_db."""

    def test_each_database_gets_its_own_table(self):
        movies_engine = create_db_engine("sqlite://")
        ratings_engine = create_db_engine("sqlite://")

        init_db(movies_engine, [MovieModel])
        init_db(ratings_engine, [RatingModel])

        assert inspect(movies_engine).get_table_names() == ["movies"]
        assert inspect(ratings_engine).get_table_names() == ["ratings"]

    def test_init_is_idempotent(self):
        engine = create_db_engine("sqlite://")

        init_db(engine, [MovieModel])
        init_db(engine, [MovieModel])

        assert inspect(engine).get_table_names() == ["movies"]

    def test_file_database_creates_parent_directory(self, tmp_path: Path):
        db_path = tmp_path / "nested" / "movies.db"

        engine = create_db_engine(f"sqlite:///{db_path}")
        init_db(engine, [MovieModel])

        assert db_path.parent.is_dir()
        assert db_path.exists()
        engine.dispose()
