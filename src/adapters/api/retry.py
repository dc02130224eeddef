"""
Relance des requetes TMDB avec backoff exponentiel.

TMDB repond 429 quand le quota de requetes est depasse, et une connexion
peut echouer ponctuellement. Ces deux cas sont relances quelques fois
avec un delai croissant et du jitter ; les autres erreurs HTTP remontent
immediatement.

Usage:
    response = await get_with_retry(client, "/search/multi", params={"query": "Dune"})
"""

from typing import Any, Optional

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

# Nombre de tentatives par requete (premier essai compris)
DEFAULT_ATTEMPTS = 3
# Delai maximum entre deux tentatives, en secondes
DEFAULT_MAX_WAIT = 10


class RateLimitError(Exception):
    """
    Levee quand TMDB retourne 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre selon le header Retry-After, ou None
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Quota TMDB depasse, reessayer dans {retry_after}s")


def _log_retry(retry_state) -> None:
    """Trace chaque nouvelle tentative."""
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        f"Appel TMDB echoue ({error!r}), tentative {retry_state.attempt_number + 1}"
    )


def with_retry(max_attempts: int = DEFAULT_ATTEMPTS, max_wait: int = DEFAULT_MAX_WAIT):
    """
    Decorateur de relance pour les coroutines d'appel TMDB.

    Relance sur RateLimitError et sur les erreurs de transport httpx
    (connexion refusee, coupure reseau).

    Args:
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre les tentatives en secondes

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type((RateLimitError, httpx.TransportError)),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


async def get_with_retry(
    client: httpx.AsyncClient,
    url: str,
    params: Optional[dict[str, Any]] = None,
    max_attempts: int = DEFAULT_ATTEMPTS,
) -> httpx.Response:
    """
    Execute un GET avec relance automatique.

    Args:
        client: Client httpx async configure pour TMDB
        url: Chemin relatif a la base_url du client
        params: Parametres de requete
        max_attempts: Nombre maximum de tentatives

    Returns:
        httpx.Response avec un statut 2xx

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.TransportError: Si le reseau reste indisponible
        httpx.HTTPStatusError: Pour les autres statuts en erreur
    """

    @with_retry(max_attempts=max_attempts)
    async def _do_get() -> httpx.Response:
        response = await client.get(url, params=params)
        if response.status_code == 429:
            retry_after_header = response.headers.get("Retry-After")
            retry_after = (
                int(retry_after_header)
                if retry_after_header and retry_after_header.isdigit()
                else None
            )
            raise RateLimitError(retry_after)
        response.raise_for_status()
        return response

    return await _do_get()
