"""
Modèles SQLModel pour les bases de données Movies API.

Ces modèles représentent les tables des bases SQLite existantes. Les colonnes
conservent leurs noms camelCase d'origine (imdbId, releaseDate, ...) ; les
attributs Python sont en snake_case.

Tables:
- movies: Catalogue de films (base movies.db)
- ratings: Notes individuelles des utilisateurs (base ratings.db)

Les champs genres et productionCompanies stockent des listes JSON d'objets
{"id", "name"} sérialisées.
"""

from typing import Optional

from sqlalchemy import Column, Float, Integer, String, Text
from sqlmodel import Field, SQLModel


class MovieModel(SQLModel, table=True):
    """
    Modèle représentant un film du catalogue.

    movie_id est la clé interne utilisée par le service de notes local ;
    imdb_id est la clé publique.
    """

    __tablename__ = "movies"

    movie_id: Optional[int] = Field(
        default=None, sa_column=Column("movieId", Integer, primary_key=True)
    )
    imdb_id: str = Field(sa_column=Column("imdbId", String, unique=True, index=True))
    title: str = Field(sa_column=Column("title", String, nullable=False))
    overview: Optional[str] = Field(default=None, sa_column=Column("overview", Text))
    production_companies: Optional[str] = Field(
        default=None, sa_column=Column("productionCompanies", Text)
    )  # JSON: [{"id": 1, "name": "Warner Bros."}]
    release_date: Optional[str] = Field(
        default=None, sa_column=Column("releaseDate", String)
    )  # ISO: "1994-09-23"
    budget: Optional[int] = Field(default=None, sa_column=Column("budget", Integer))
    revenue: Optional[int] = Field(default=None, sa_column=Column("revenue", Integer))
    runtime: Optional[int] = Field(default=None, sa_column=Column("runtime", Integer))
    language: Optional[str] = Field(default=None, sa_column=Column("language", String))
    genres: Optional[str] = Field(
        default=None, sa_column=Column("genres", Text)
    )  # JSON: [{"id": 18, "name": "Drama"}]
    status: Optional[str] = Field(default=None, sa_column=Column("status", String))


class RatingModel(SQLModel, table=True):
    """
    Modèle représentant une note individuelle (base des notes).

    Lié à un film via movieId, sans clé étrangère : les deux tables vivent
    dans des bases distinctes.
    """

    __tablename__ = "ratings"

    user_id: int = Field(sa_column=Column("userId", Integer, primary_key=True))
    movie_id: int = Field(
        sa_column=Column("movieId", Integer, primary_key=True, index=True)
    )
    rating: float = Field(sa_column=Column("rating", Float, nullable=False))
    timestamp: Optional[int] = Field(default=None, sa_column=Column("timestamp", Integer))
