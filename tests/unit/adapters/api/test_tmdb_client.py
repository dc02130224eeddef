"""
Tests pour TMDBClient - implementation du catalogue sur l'API TMDB.

Utilise respx pour simuler les appels httpx et verifie :
- La recherche multi-type retourne des CatalogResult (personnes ignorees)
- Les listes populaires imposent le type (film / serie)
- Le decodage permissif des champs absents
- La conversion des erreurs en CatalogNetworkError / CatalogDecodeError
- La recuperation du poster d'un media
"""

import httpx
import pytest
import respx

from src.adapters.api.tmdb_client import TMDBClient
from src.core.exceptions import CatalogDecodeError, CatalogNetworkError
from src.core.ports.api_clients import CatalogResult, ICatalogClient
from src.core.value_objects import MediaKind
from tests.fixtures.tmdb_responses import (
    TMDB_EMPTY_RESPONSE,
    TMDB_MULTI_SEARCH_RESPONSE,
    TMDB_POPULAR_MOVIES_RESPONSE,
    TMDB_POPULAR_TV_RESPONSE,
    TMDB_TV_DETAILS_RESPONSE,
)

BASE_URL = "https://api.themoviedb.org/3"
API_KEY = "0123456789abcdef0123456789abcdef"


@pytest.fixture
def tmdb_client() -> TMDBClient:
    """TMDBClient sans relance pour que les erreurs remontent immediatement."""
    return TMDBClient(api_key=API_KEY, max_attempts=1)


class TestTMDBClientInterface:
    """TMDBClient implemente ICatalogClient."""

    def test_implements_interface(self, tmdb_client: TMDBClient):
        assert isinstance(tmdb_client, ICatalogClient)


class TestTMDBSearch:
    """Tests pour TMDBClient.search()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_returns_movies_and_shows(self, tmdb_client: TMDBClient):
        """search() retourne films et series, dans l'ordre, sans les personnes."""
        respx.get(f"{BASE_URL}/search/multi").mock(
            return_value=httpx.Response(200, json=TMDB_MULTI_SEARCH_RESPONSE)
        )

        results = await tmdb_client.search("Breaking Bad")

        assert len(results) == 2
        assert all(isinstance(r, CatalogResult) for r in results)

        show, movie = results
        assert show.id == 1396
        assert show.kind is MediaKind.SHOW
        assert show.title == "Breaking Bad"
        assert show.release_date == "2008-01-20"
        assert show.poster_url == (
            "https://image.tmdb.org/t/p/w500/ztkUQFLlC19CCMYHW9o1zWhJRNq.jpg"
        )
        assert show.popularity == 310.2

        assert movie.id == 559969
        assert movie.kind is MediaKind.MOVIE
        assert movie.title == "El Camino : Un film Breaking Bad"
        assert movie.release_date == "2019-10-11"
        assert movie.poster_url is None
        assert movie.overview == ""

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_sends_query_key_and_language(self, tmdb_client: TMDBClient):
        """La requete porte la recherche, la cle v3 et la langue."""
        route = respx.get(f"{BASE_URL}/search/multi").mock(
            return_value=httpx.Response(200, json=TMDB_EMPTY_RESPONSE)
        )

        await tmdb_client.search("Le Fabuleux Destin d'Amélie Poulain")

        params = route.calls.last.request.url.params
        assert params["query"] == "Le Fabuleux Destin d'Amélie Poulain"
        assert params["api_key"] == API_KEY
        assert params["language"] == "fr-FR"
        assert params["include_adult"] == "false"

    @pytest.mark.asyncio
    @respx.mock
    async def test_v4_token_is_sent_as_bearer(self):
        """Un Read Access Token v4 passe en header Authorization."""
        token = "eyJhbGciOiJIUzI1NiJ9." + "x" * 60
        client = TMDBClient(api_key=token, max_attempts=1)
        route = respx.get(f"{BASE_URL}/search/multi").mock(
            return_value=httpx.Response(200, json=TMDB_EMPTY_RESPONSE)
        )

        await client.search("Dune")

        request = route.calls.last.request
        assert request.headers["Authorization"] == f"Bearer {token}"
        assert "api_key" not in request.url.params

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_returns_empty_list_on_no_results(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE_URL}/search/multi").mock(
            return_value=httpx.Response(200, json=TMDB_EMPTY_RESPONSE)
        )

        assert await tmdb_client.search("zzzzzzzz") == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_decodes_permissively(self, tmdb_client: TMDBClient):
        """Champs absents -> valeurs vides, elements sans id ignores."""
        payload = {
            "results": [
                {"media_type": "movie", "title": "Sans identifiant"},
                {"id": 12, "media_type": "movie", "unknown_field": {"nested": True}},
                "pas un objet",
            ]
        }
        respx.get(f"{BASE_URL}/search/multi").mock(
            return_value=httpx.Response(200, json=payload)
        )

        results = await tmdb_client.search("x")

        assert results == [CatalogResult(id=12, title="", kind=MediaKind.MOVIE)]


class TestTMDBPopular:
    """Tests pour popular_movies() et popular_shows()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_popular_movies_are_stamped_movie(self, tmdb_client: TMDBClient):
        """Les elements sans media_type sont des films."""
        respx.get(f"{BASE_URL}/movie/popular").mock(
            return_value=httpx.Response(200, json=TMDB_POPULAR_MOVIES_RESPONSE)
        )

        results = await tmdb_client.popular_movies()

        assert [r.title for r in results] == ["Inception", "Interstellar"]
        assert all(r.kind is MediaKind.MOVIE for r in results)
        assert results[1].popularity == 150.0

    @pytest.mark.asyncio
    @respx.mock
    async def test_popular_shows_override_payload_kind(self, tmdb_client: TMDBClient):
        """Le type vient de l'endpoint, pas du media_type renvoye."""
        respx.get(f"{BASE_URL}/tv/popular").mock(
            return_value=httpx.Response(200, json=TMDB_POPULAR_TV_RESPONSE)
        )

        results = await tmdb_client.popular_shows()

        assert len(results) == 1
        assert results[0].kind is MediaKind.SHOW
        assert results[0].title == "Game of Thrones"
        assert results[0].release_date == "2011-04-17"


class TestTMDBErrors:
    """Conversion des erreurs HTTP et de decodage."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_raises_network_error(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE_URL}/search/multi").mock(return_value=httpx.Response(500))

        with pytest.raises(CatalogNetworkError) as exc_info:
            await tmdb_client.search("Dune")
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_error_raises_network_error(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE_URL}/movie/popular").mock(
            side_effect=httpx.ConnectError("connexion refusee")
        )

        with pytest.raises(CatalogNetworkError) as exc_info:
            await tmdb_client.popular_movies()
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_rate_limit_exhausted_raises_network_error(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE_URL}/tv/popular").mock(
            return_value=httpx.Response(429, headers={"Retry-After": "1"})
        )

        with pytest.raises(CatalogNetworkError) as exc_info:
            await tmdb_client.popular_shows()
        assert exc_info.value.status_code == 429

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_json_body_raises_decode_error(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE_URL}/search/multi").mock(
            return_value=httpx.Response(200, text="<html>maintenance</html>")
        )

        with pytest.raises(CatalogDecodeError):
            await tmdb_client.search("Dune")

    @pytest.mark.asyncio
    @respx.mock
    async def test_missing_results_raises_decode_error(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE_URL}/search/multi").mock(
            return_value=httpx.Response(200, json={"status_message": "oops"})
        )

        with pytest.raises(CatalogDecodeError):
            await tmdb_client.search("Dune")

    @pytest.mark.asyncio
    @respx.mock
    async def test_rate_limit_is_retried(self):
        """Un 429 suivi d'un succes est transparent pour l'appelant."""
        client = TMDBClient(api_key=API_KEY, max_attempts=2)
        respx.get(f"{BASE_URL}/movie/popular").mock(
            side_effect=[
                httpx.Response(429),
                httpx.Response(200, json=TMDB_POPULAR_MOVIES_RESPONSE),
            ]
        )

        results = await client.popular_movies()

        assert len(results) == 2


class TestTMDBPoster:
    """Tests pour get_poster_url()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_show_poster_uses_tv_endpoint(self, tmdb_client: TMDBClient):
        route = respx.get(f"{BASE_URL}/tv/1396").mock(
            return_value=httpx.Response(200, json=TMDB_TV_DETAILS_RESPONSE)
        )

        url = await tmdb_client.get_poster_url(1396, MediaKind.SHOW)

        assert route.called
        assert url == "https://image.tmdb.org/t/p/w500/ztkUQFLlC19CCMYHW9o1zWhJRNq.jpg"

    @pytest.mark.asyncio
    @respx.mock
    async def test_movie_without_poster_returns_none(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE_URL}/movie/27205").mock(
            return_value=httpx.Response(200, json={"id": 27205, "poster_path": None})
        )

        assert await tmdb_client.get_poster_url(27205, MediaKind.MOVIE) is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_unknown_media_returns_none(self, tmdb_client: TMDBClient):
        respx.get(f"{BASE_URL}/tv/999999").mock(return_value=httpx.Response(404))

        assert await tmdb_client.get_poster_url(999999, MediaKind.SHOW) is None


class TestTMDBClose:
    """Tests pour close()."""

    @pytest.mark.asyncio
    async def test_close_releases_http_client(self, tmdb_client: TMDBClient):
        http_client = tmdb_client._get_client()

        await tmdb_client.close()

        assert http_client.is_closed
        assert tmdb_client._client is None
