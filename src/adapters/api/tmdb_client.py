"""
Client TMDB pour la recherche et les classements de films et series.

Implemente l'interface ICatalogClient pour TMDB (The Movie Database).
Chaque appel interroge l'API (aucun cache) et relance sur rate limiting.

Usage:
    client = TMDBClient(api_key="your_key")
    results = await client.search("Inception")
    movies = await client.popular_movies()
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.adapters.api.retry import DEFAULT_ATTEMPTS, RateLimitError, get_with_retry
from src.core.exceptions import CatalogDecodeError, CatalogNetworkError
from src.core.ports.api_clients import CatalogResult, ICatalogClient
from src.core.value_objects import MediaKind


class TMDBClient(ICatalogClient):
    """
    Client API TMDB pour le catalogue du bot.

    Implemente ICatalogClient avec:
    - Recherche multi-type (films et series, les personnes sont ignorees)
    - Films et series populaires, le type etant impose par l'endpoint
    - Recuperation du poster d'un media precis
    - Retry automatique sur rate limiting (429) et coupures reseau

    Les erreurs httpx sont converties en CatalogNetworkError et les
    reponses illisibles en CatalogDecodeError.

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
        TMDB_IMAGE_BASE_URL: URL de base pour les images (posters)
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"

    def __init__(
        self,
        api_key: str,
        language: str = "fr-FR",
        timeout: Optional[float] = None,
        max_attempts: int = DEFAULT_ATTEMPTS,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API v3 ou Read Access Token v4
            language: Langue des titres et resumes (ex: "fr-FR")
            timeout: Timeout HTTP en secondes, None pour aucun timeout
            max_attempts: Nombre de tentatives par requete
        """
        self._api_key = api_key
        self._language = language
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self.TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    async def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> dict:
        """
        Execute un GET et decode le corps JSON.

        Raises:
            CatalogNetworkError: Erreur de transport ou statut HTTP en erreur
            CatalogDecodeError: Corps non JSON ou qui n'est pas un objet
        """
        query = {"language": self._language, **(params or {})}
        logger.debug(f"TMDB GET {path} {params or ''}")
        try:
            response = await get_with_retry(
                self._get_client(), path, params=query, max_attempts=self._max_attempts
            )
        except httpx.HTTPStatusError as e:
            raise CatalogNetworkError(
                f"TMDB {path} : HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except RateLimitError as e:
            raise CatalogNetworkError(f"TMDB {path} : {e}", status_code=429) from e
        except httpx.HTTPError as e:
            raise CatalogNetworkError(f"TMDB {path} : {e!r}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise CatalogDecodeError(f"TMDB {path} : reponse non JSON") from e
        if not isinstance(data, dict):
            raise CatalogDecodeError(f"TMDB {path} : objet JSON attendu")
        return data

    def _poster_url(self, poster_path: Optional[str]) -> Optional[str]:
        """Construit l'URL complete du poster, None si pas de chemin."""
        return f"{self.TMDB_IMAGE_BASE_URL}{poster_path}" if poster_path else None

    def _parse_results(
        self,
        data: dict,
        path: str,
        forced_kind: Optional[MediaKind] = None,
    ) -> list[CatalogResult]:
        """
        Transforme le tableau 'results' en CatalogResult.

        Decodage permissif : champs inconnus ignores, chaines absentes
        remplacees par "". Les elements sans id entier ou d'un type autre
        que film/serie sont ecartes.

        Args:
            data: Corps JSON decode
            path: Endpoint appele (pour les messages d'erreur)
            forced_kind: Type impose a tous les resultats (listes populaires)
        """
        items = data.get("results")
        if not isinstance(items, list):
            raise CatalogDecodeError(f"TMDB {path} : champ 'results' absent")

        results = []
        for item in items:
            if not isinstance(item, dict):
                continue
            item_id = item.get("id")
            if not isinstance(item_id, int) or isinstance(item_id, bool):
                logger.debug(f"TMDB {path} : element sans id ignore")
                continue

            kind = forced_kind or MediaKind.from_tmdb(item.get("media_type"))
            if kind is None:
                continue

            if kind is MediaKind.SHOW:
                title = item.get("name") or ""
                release_date = item.get("first_air_date") or ""
            else:
                title = item.get("title") or ""
                release_date = item.get("release_date") or ""

            popularity = item.get("popularity")
            results.append(
                CatalogResult(
                    id=item_id,
                    title=title,
                    kind=kind,
                    release_date=release_date,
                    overview=item.get("overview") or "",
                    poster_url=self._poster_url(item.get("poster_path")),
                    popularity=float(popularity) if isinstance(popularity, (int, float)) else 0.0,
                )
            )
        return results

    async def search(self, query: str) -> list[CatalogResult]:
        """
        Recherche des films et series par texte libre.

        Args:
            query: Texte de recherche

        Returns:
            Liste de CatalogResult dans l'ordre de pertinence TMDB
        """
        path = "/search/multi"
        data = await self._get_json(path, {"query": query, "include_adult": "false"})
        return self._parse_results(data, path)

    async def popular_movies(self) -> list[CatalogResult]:
        """Films populaires ; TMDB n'y renvoie pas toujours media_type."""
        path = "/movie/popular"
        data = await self._get_json(path)
        return self._parse_results(data, path, forced_kind=MediaKind.MOVIE)

    async def popular_shows(self) -> list[CatalogResult]:
        """Series populaires ; TMDB n'y renvoie pas toujours media_type."""
        path = "/tv/popular"
        data = await self._get_json(path)
        return self._parse_results(data, path, forced_kind=MediaKind.SHOW)

    async def get_poster_url(self, tmdb_id: int, kind: MediaKind) -> Optional[str]:
        """
        Recupere l'URL du poster d'un film ou d'une serie.

        Args:
            tmdb_id: ID TMDB du media
            kind: Type du media (determine l'endpoint /movie ou /tv)

        Returns:
            URL du poster, ou None si le media n'existe pas ou n'a pas de poster
        """
        path = f"/tv/{tmdb_id}" if kind is MediaKind.SHOW else f"/movie/{tmdb_id}"
        try:
            data = await self._get_json(path)
        except CatalogNetworkError as e:
            if e.status_code == 404:
                return None
            raise
        return self._poster_url(data.get("poster_path"))

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a l'arret du bot pour liberer les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
