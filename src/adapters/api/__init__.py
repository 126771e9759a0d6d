"""
Clients API externes pour les notes de films.

Ce module fournit les adaptateurs pour communiquer avec les sources de notes:
- LocalRatingsClient: service de notes local (moyenne des notes individuelles)
- OMDbClient: The Open Movie Database pour la note Rotten Tomatoes

Chaque client possède son propre httpx.AsyncClient et son propre timeout.
Les clients implémentent IRatingSource défini dans core/ports/rating_sources.py.
"""

from src.adapters.api.local_ratings_client import LocalRatingsClient
from src.adapters.api.omdb_client import OMDbClient

__all__ = [
    "LocalRatingsClient",
    "OMDbClient",
]
