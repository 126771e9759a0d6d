"""
Conversion des lignes du catalogue vers les formes exposées par l'API.

Les champs structures (genres, productionCompanies) sont des tableaux JSON
d'objets {"id", "name"} réduits à la liste de leurs noms. Un champ illisible
devient une liste vide.
"""

import json
from typing import Any, Optional

from loguru import logger

from src.core.entities.movie import AggregatedRatings, CatalogEntry, DetailView, MovieSummary


def parse_json_field(field: Optional[str], /, **context: Any) -> list[Any]:
    """
    Désérialise un champ JSON contenant un tableau.

    Args:
        field: Valeur brute de la colonne
        **context: Contexte ajouté au log en cas d'échec (imdb_id, field, ...)

    Returns:
        Le tableau décodé, ou [] si le champ est vide, invalide ou n'est pas un tableau
    """
    if not field:
        return []
    try:
        parsed = json.loads(field)
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning("Champ JSON illisible", value=field, error=str(e), **context)
        return []
    return parsed if isinstance(parsed, list) else []


def extract_names(items: list[Any]) -> list[str]:
    """Réduit une liste d'objets nommés (ou de chaînes) à la liste des noms."""
    names = []
    for item in items:
        if isinstance(item, str):
            name = item
        elif isinstance(item, dict):
            name = item.get("name")
        else:
            name = None
        if name:
            names.append(str(name))
    return names


def parse_names(field: Optional[str], /, **context: Any) -> list[str]:
    """Raccourci parse_json_field + extract_names."""
    return extract_names(parse_json_field(field, **context))


def format_budget(budget: Optional[int]) -> str:
    """Formate un budget en dollars avec séparateurs de milliers ('' si absent)."""
    if budget is None:
        return ""
    return f"${budget:,}"


def to_summary(entry: CatalogEntry) -> MovieSummary:
    """Convertit une ligne du catalogue en entrée de liste."""
    return MovieSummary(
        imdb_id=entry.imdb_id,
        title=entry.title,
        genres=parse_names(entry.genres, imdb_id=entry.imdb_id, field="genres"),
        release_date=entry.release_date,
        budget=format_budget(entry.budget) if entry.budget is not None else None,
    )


def to_detail_view(entry: CatalogEntry, aggregated: AggregatedRatings) -> DetailView:
    """
    Fusionne une ligne du catalogue et ses notes en fiche détaillée.

    Les champs absents prennent la valeur vide de leur type ("", 0, []),
    seule average_rating reste nullable.
    """
    return DetailView(
        imdb_id=entry.imdb_id,
        title=entry.title,
        description=entry.overview or "",
        release_date=entry.release_date or "",
        budget=format_budget(entry.budget),
        runtime=entry.runtime or 0,
        average_rating=aggregated.average_rating,
        genres=parse_names(entry.genres, imdb_id=entry.imdb_id, field="genres"),
        original_language=entry.language or "",
        production_companies=parse_names(
            entry.production_companies, imdb_id=entry.imdb_id, field="production_companies"
        ),
        ratings=list(aggregated.ratings),
    )
