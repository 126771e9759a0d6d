"""
Application FastAPI de Movies API.

Initialise l'application web avec le Container DI, installe la journalisation
des requêtes et les gestionnaires d'erreurs, puis monte les routes.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from ..container import Container, close_clients
from .errors import register_error_handlers
from .middleware import RequestLoggingMiddleware
from .routes.health import router as health_router
from .routes.movies import router as movies_router
from .routes.ratings import router as ratings_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application web.

    Args:
        container: Container DI à utiliser (un nouveau Container par défaut)

    Returns:
        Application FastAPI prête à servir
    """
    if container is None:
        container = Container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise les bases au démarrage et ferme les clients HTTP à l'arrêt."""
        container.database.init()
        settings = container.config()
        logger.info(
            "Movies API démarrée",
            environment=settings.environment,
            has_omdb_key=settings.omdb_enabled,
            ratings_api_url=settings.ratings_api_url,
        )
        yield
        await close_clients(container)
        container.shutdown_resources()
        logger.info("Movies API arrêtée")

    app = FastAPI(title="Movies API", lifespan=lifespan)
    app.state.container = container
    app.state.started_at = time.monotonic()

    app.add_middleware(RequestLoggingMiddleware)
    register_error_handlers(app)

    # Routes
    app.include_router(health_router)
    app.include_router(movies_router)
    app.include_router(ratings_router)
    return app


app = create_app()
