"""
Utilitaires et constantes pour Movies API.

Ce module contient les constantes partagées (libellés, messages, bornes).
"""

from src.utils.constants import (
    LOCAL_RATING_SOURCE,
    MAX_YEAR,
    MIN_YEAR,
    ROTTEN_TOMATOES_SOURCE,
)

__all__ = [
    "LOCAL_RATING_SOURCE",
    "ROTTEN_TOMATOES_SOURCE",
    "MIN_YEAR",
    "MAX_YEAR",
]
