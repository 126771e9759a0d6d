"""
Movie catalog entities.

Entities representing a catalog row, the ratings gathered for it and the
projections handed to the HTTP layer. All of them are rebuilt per request.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional, Union

# Valeur d'une note : moyenne numérique locale ou valeur brute d'une API tierce ("87%")
RatingValue = Union[float, int, str]


@dataclass(frozen=True)
class CatalogEntry:
    """
    Movie row from the catalog database.

    Attributes:
        movie_id: Internal ID, only used to query the local ratings service
        imdb_id: IMDb ID (tt...), stable public key
        title: Movie title
        overview: Plot summary
        genres: Serialized JSON array of {"id", "name"} objects
        production_companies: Serialized JSON array of {"id", "name"} objects
        release_date: ISO release date (YYYY-MM-DD)
        budget: Budget in dollars
        revenue: Revenue in dollars
        runtime: Runtime in minutes
        language: Original language code
        status: Release status ("Released", ...)
    """

    movie_id: int
    imdb_id: str
    title: str
    overview: Optional[str] = None
    genres: Optional[str] = None
    production_companies: Optional[str] = None
    release_date: Optional[str] = None
    budget: Optional[int] = None
    revenue: Optional[int] = None
    runtime: Optional[int] = None
    language: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class Rating:
    """A rating tagged with its source label."""

    source: str
    value: RatingValue


@dataclass(frozen=True)
class AggregatedRatings:
    """
    Ratings gathered for one movie.

    Attributes:
        ratings: Resolved ratings, local source first then remote source
        average_rating: Local average only, None when the local source is absent
    """

    ratings: tuple[Rating, ...] = ()
    average_rating: Optional[float] = None


@dataclass(frozen=True)
class DetailView:
    """Movie detail payload of GET /movies/details/{imdb_id}."""

    imdb_id: str
    title: str
    description: str
    release_date: str
    budget: str
    runtime: int
    average_rating: Optional[float]
    genres: list[str] = field(default_factory=list)
    original_language: str = ""
    production_companies: list[str] = field(default_factory=list)
    ratings: list[Rating] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class MovieSummary:
    """Movie entry of a paginated listing."""

    imdb_id: str
    title: str
    genres: list[str] = field(default_factory=list)
    release_date: Optional[str] = None
    budget: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "imdbId": self.imdb_id,
            "title": self.title,
            "genres": self.genres,
            "releaseDate": self.release_date,
            "budget": self.budget,
        }


@dataclass(frozen=True)
class MoviePage:
    """One page of a movie listing."""

    movies: list[MovieSummary]
    page: int
    total_pages: int
    total_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "movies": [movie.to_dict() for movie in self.movies],
            "page": self.page,
            "totalPages": self.total_pages,
            "totalCount": self.total_count,
        }


@dataclass(frozen=True)
class RatingRecord:
    """Individual user rating served by the local ratings service."""

    user_id: int
    movie_id: int
    rating: float
    timestamp: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "movieId": self.movie_id,
            "rating": self.rating,
            "timestamp": self.timestamp,
        }
