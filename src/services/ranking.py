"""
Classement des resultats du catalogue par popularite.
"""

from collections.abc import Iterable

from src.core.ports.api_clients import CatalogResult

# Taille du classement /top
TOP_LIMIT = 20


def rank_by_popularity(
    results: Iterable[CatalogResult], limit: int = TOP_LIMIT
) -> list[CatalogResult]:
    """
    Trie les resultats par popularite decroissante et garde les premiers.

    Le tri est stable : a popularite egale, l'ordre d'entree est conserve.

    Args:
        results: Resultats fusionnes (films et series)
        limit: Nombre maximum de resultats retournes

    Returns:
        Au plus `limit` resultats, popularite non croissante
    """
    return sorted(results, key=lambda result: result.popularity, reverse=True)[:limit]
