"""
Implementations SQLModel des repositories.

Ce module contient les implémentations concrètes des interfaces repository
définies dans src/core/ports/repositories.py, utilisant SQLModel pour
la lecture des bases SQLite.

Chaque repository :
- Hérite de l'interface ABC correspondante du domaine
- Reçoit un engine via injection de dépendances et ouvre une session par opération
- Convertit les modèles DB (SQLModel) en entités de domaine (dataclass)
"""

from src.infrastructure.persistence.repositories.catalog_repository import (
    SQLModelCatalogRepository,
)
from src.infrastructure.persistence.repositories.ratings_repository import (
    SQLModelRatingsRepository,
)

__all__ = [
    "SQLModelCatalogRepository",
    "SQLModelRatingsRepository",
]
