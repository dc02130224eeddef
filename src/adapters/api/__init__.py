"""
Client API externe pour le catalogue de films et series.

Ce module fournit l'adaptateur vers TMDB (The Movie Database) :
- TMDBClient : recherche multi-type, classements populaires, posters
- RateLimitError / get_with_retry : relance avec backoff sur 429 et coupures reseau

Le client implemente ICatalogClient defini dans core/ports/api_clients.py.
"""

from src.adapters.api.retry import RateLimitError, get_with_retry, with_retry
from src.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "TMDBClient",
    "RateLimitError",
    "get_with_retry",
    "with_retry",
]
