"""
Configuration des bases de données SQLite de Movies API.

Ce module fournit :
- Construction explicite des engines (catalogue et notes), injectés par le container
- Fonction d'initialisation des tables

Aucun engine global : le container DI possède les engines et les passe aux
repositories.
"""

from collections.abc import Sequence
from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine


def _is_memory_url(db_url: str) -> bool:
    return db_url in ("sqlite://", "sqlite:///:memory:")


def create_db_engine(url: str) -> Engine:
    """
    Crée l'engine SQLAlchemy pour une URL de base.

    Crée le répertoire parent si l'URL est un fichier SQLite. Les bases en
    mémoire utilisent StaticPool pour partager une connexion unique entre les
    threads (asyncio.to_thread).

    Args:
        url: URL SQLAlchemy (ex: sqlite:///db/movies.db)

    Returns:
        Engine connecté à la base
    """
    if _is_memory_url(url):
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    if url.startswith("sqlite:///"):
        db_path = Path(url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(
        url,
        echo=False,
        connect_args={"check_same_thread": False} if url.startswith("sqlite") else {},
    )


def init_db(engine: Engine, models: Sequence[type[SQLModel]]) -> None:
    """
    Crée les tables des modèles donnés si elles n'existent pas déjà.

    Chaque base ne reçoit que ses propres tables : movies pour le catalogue,
    ratings pour la base des notes.

    Args:
        engine: Engine de la base cible
        models: Modèles SQLModel (table=True) dont créer les tables
    """
    tables = [model.__table__ for model in models]
    SQLModel.metadata.create_all(engine, tables=tables)
    logger.debug(
        "Tables initialisées",
        url=engine.url.render_as_string(hide_password=True),
        tables=[table.name for table in tables],
    )
