"""
Point d'entrée CLI de Movies API.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

import asyncio
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console

from .config import Settings
from .container import Container, close_clients
from .core.errors import AppError
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="movies-api",
    help="API REST en lecture seule sur un catalogue de films",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètrès de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Environnement : {config.environment}")
    typer.echo(f"Catalogue : {config.database_url}")
    typer.echo(f"Base des notes : {config.ratings_database_url}")
    typer.echo(f"Service de notes local : {config.ratings_api_url}")
    typer.echo(f"API OMDb : {'activée' if config.omdb_enabled else 'désactivée'}")
    typer.echo(f"Taille de page : {config.page_size}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Movies API v{__version__}")


@app.command(name="init-db")
def init_database() -> None:
    """Crée les tables manquantes des bases catalogue et notes."""
    container.database.init()
    typer.echo("Bases de données initialisées")


async def _compose(imdb_id: str) -> dict:
    try:
        details = await container.movie_details_service().compose_details(imdb_id)
        return details.to_dict()
    finally:
        await close_clients(container)


@app.command()
def details(
    imdb_id: Annotated[str, typer.Argument(help="ID IMDb du film (ex: tt0111161)")],
) -> None:
    """Affiche la fiche détaillée d'un film avec ses notes."""
    try:
        data = asyncio.run(_compose(imdb_id))
    except AppError as e:
        typer.echo(f"[{e.code}] {e.message}", err=True)
        raise typer.Exit(code=1)
    console.print_json(data=data)


@app.command()
def movies(
    page: Annotated[int, typer.Option(min=1, help="Numéro de page")] = 1,
) -> None:
    """Liste une page du catalogue."""
    try:
        result = asyncio.run(container.catalog_service().list_movies(page))
    except AppError as e:
        typer.echo(f"[{e.code}] {e.message}", err=True)
        raise typer.Exit(code=1)
    for movie in result.movies:
        year = movie.release_date[:4] if movie.release_date else "----"
        typer.echo(f"{movie.imdb_id}  {year}  {movie.title}")
    typer.echo(f"Page {result.page}/{result.total_pages} - {result.total_count} films")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "0.0.0.0",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 4000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web Movies API."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("src.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    # Initialise les bases de données (crée les tables si nécessaire)
    container.database.init()

    logger.info("Démarrage de Movies API", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
