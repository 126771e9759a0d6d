"""
Container d'injection de dépendances via dependency-injector.

Fournit une gestion centralisée des dépendances pour les interfaces CLI et Web.
Les engines SQLAlchemy sont construits ici et injectés dans les repositories ;
aucun composant ne crée lui-même son accès à la base.
"""

from dependency_injector import containers, providers

from .adapters.api.local_ratings_client import LocalRatingsClient
from .adapters.api.omdb_client import OMDbClient
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.models import MovieModel, RatingModel
from .infrastructure.persistence.repositories import (
    SQLModelCatalogRepository,
    SQLModelRatingsRepository,
)
from .services.catalog_service import CatalogService
from .services.movie_details import MovieDetailsService
from .services.ratings_aggregator import RatingsAggregatorService


def _init_databases(movies_engine, ratings_engine) -> None:
    """Crée les tables manquantes de chaque base."""
    init_db(movies_engine, [MovieModel])
    init_db(ratings_engine, [RatingModel])


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise les bases une fois
        details = await container.movie_details_service().compose_details("tt0111161")
    """

    # Configuration - singleton chargé une seule fois
    config = providers.Singleton(Settings)

    # Engines - construits une fois, possédés par le container
    movies_engine = providers.Singleton(
        create_db_engine,
        url=config.provided.database_url,
    )
    ratings_engine = providers.Singleton(
        create_db_engine,
        url=config.provided.ratings_database_url,
    )

    # Database - Resource pour initialisation unique
    database = providers.Resource(
        _init_databases,
        movies_engine=movies_engine,
        ratings_engine=ratings_engine,
    )

    # Repositories - une session par opération, donc Singletons
    catalog_repository = providers.Singleton(
        SQLModelCatalogRepository,
        engine=movies_engine,
    )
    ratings_repository = providers.Singleton(
        SQLModelRatingsRepository,
        engine=ratings_engine,
    )

    # Sources de notes - Singletons, chacune avec son propre pool de connexions
    local_ratings_client = providers.Singleton(
        LocalRatingsClient,
        base_url=config.provided.ratings_api_url,
        catalog=catalog_repository,
        timeout=config.provided.local_ratings_timeout,
    )
    # Si omdb_api_key est None, le client est crée mais n'appelle jamais l'API
    omdb_client = providers.Singleton(
        OMDbClient,
        api_key=config.provided.omdb_api_key,
        base_url=config.provided.omdb_api_url,
        timeout=config.provided.omdb_timeout,
    )

    # Services (stateless - Factory)
    ratings_aggregator = providers.Factory(
        RatingsAggregatorService,
        local_source=local_ratings_client,
        remote_source=omdb_client,
    )
    movie_details_service = providers.Factory(
        MovieDetailsService,
        catalog=catalog_repository,
        aggregator=ratings_aggregator,
    )
    catalog_service = providers.Factory(
        CatalogService,
        catalog=catalog_repository,
        page_size=config.provided.page_size,
    )


async def close_clients(container: Container) -> None:
    """Ferme les clients HTTP des sources de notes."""
    await container.local_ratings_client().close()
    await container.omdb_client().close()
