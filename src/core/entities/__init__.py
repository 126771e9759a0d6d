"""
Business entities representing core domain concepts.

Exports:
- CatalogEntry: Movie row from the catalog
- Rating: A rating tagged with its source
- RatingRecord: Individual user rating of the local ratings service
- AggregatedRatings: Ordered ratings plus the derived average
- DetailView: Movie detail projection
- MovieSummary, MoviePage: Paginated listing projections
"""

from src.core.entities.movie import (
    AggregatedRatings,
    CatalogEntry,
    DetailView,
    MoviePage,
    MovieSummary,
    Rating,
    RatingRecord,
    RatingValue,
)

__all__ = [
    "AggregatedRatings",
    "CatalogEntry",
    "DetailView",
    "MoviePage",
    "MovieSummary",
    "Rating",
    "RatingRecord",
    "RatingValue",
]
