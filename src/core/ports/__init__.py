"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository : Contrats de lecture des données
- ICatalogStore : Catalogue de films
- IRatingsStore : Notes individuelles du service de notes local

Ports source de notes : Contrats pour les services externes
- IRatingSource : Source de notes faillible qui se résout toujours
"""

from src.core.ports.rating_sources import IRatingSource
from src.core.ports.repositories import ICatalogStore, IRatingsStore, SortOrder

__all__ = [
    # Repositories
    "ICatalogStore",
    "IRatingsStore",
    "SortOrder",
    # Sources de notes
    "IRatingSource",
]
