"""
Journalisation de Movies API via loguru.

Deux handlers sont installés par configure_logging :
- stderr : une ligne colorée par événement, préfixée par l'identifiant de
  transaction de la requête HTTP en cours
- fichier (optionnel) : lignes JSON avec rotation, où les paires clé/valeur
  passées aux appels de log (imdb_id=..., source=...) arrivent dans "extra"

L'identifiant de transaction est posé par RequestLoggingMiddleware via
logger.contextualize(transaction_id=...). Hors requête (CLI, démarrage), il
vaut NO_TRANSACTION.
"""

import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger

NO_TRANSACTION = "-"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[transaction_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def _console_format(record: dict) -> str:
    """Ajoute le contexte structuré en fin de ligne quand il y en a."""
    fields = [key for key in record["extra"] if key != "transaction_id"]
    if fields:
        return CONSOLE_FORMAT + " | {extra}\n{exception}"
    return CONSOLE_FORMAT + "\n{exception}"


def _file_handler(log_file: Path, rotation_size: str, retention_count: int) -> dict[str, Any]:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    return {
        "sink": log_file,
        "level": "DEBUG",  # les réponses brutes des sources de notes sont en DEBUG
        "serialize": True,
        "rotation": rotation_size,
        "retention": retention_count,
        "compression": "zip",
        "enqueue": True,
    }


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/movies_api.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les handlers loguru par ceux de l'application.

    Args :
        log_level : Niveau minimum pour stderr (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier JSON, None pour ne journaliser que sur stderr
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
    """
    handlers: list[dict[str, Any]] = [
        {"sink": sys.stderr, "level": log_level, "format": _console_format, "colorize": True}
    ]
    if log_file is not None:
        handlers.append(_file_handler(log_file, rotation_size, retention_count))

    logger.configure(handlers=handlers, extra={"transaction_id": NO_TRANSACTION})

    logger.debug(
        "Logging configuré",
        log_level=log_level,
        log_file=str(log_file) if log_file is not None else None,
    )
