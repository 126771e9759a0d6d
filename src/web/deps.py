"""
Dépendances partagées de l'application web.

Donne accès aux services du Container DI attaché à l'application.
"""

from fastapi import Depends, Request

from ..container import Container
from ..core.ports.repositories import IRatingsStore
from ..services.catalog_service import CatalogService
from ..services.movie_details import MovieDetailsService


def get_container(request: Request) -> Container:
    """Retourne le Container DI de l'application."""
    return request.app.state.container


def get_movie_details_service(
    container: Container = Depends(get_container),
) -> MovieDetailsService:
    return container.movie_details_service()


def get_catalog_service(container: Container = Depends(get_container)) -> CatalogService:
    return container.catalog_service()


def get_ratings_store(container: Container = Depends(get_container)) -> IRatingsStore:
    return container.ratings_repository()
