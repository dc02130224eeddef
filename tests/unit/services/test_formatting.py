"""
Tests pour la mise en forme des reponses.
"""

from datetime import datetime, timezone

from src.core.entities import WatchedEntry
from src.core.ports.api_clients import CatalogResult
from src.core.value_objects import MediaKind
from src.services import formatting


class TestEscaping:
    def test_markdown_characters_are_escaped(self):
        assert formatting.md("Hello_World *2*") == "Hello\\_World \\*2\\*"

    def test_none_becomes_empty(self):
        assert formatting.md(None) == ""

    def test_escaped_title_in_confirmation(self):
        assert formatting.movie_added("Mr_Robot") == (
            "*Mr\\_Robot* (film) ajouté à votre liste de visionnage !"
        )


class TestTruncate:
    def test_short_text_is_kept(self):
        assert formatting.truncate("court") == "court"

    def test_exactly_at_limit_is_kept(self):
        assert formatting.truncate("a" * 100) == "a" * 100

    def test_long_text_gets_ellipsis(self):
        assert formatting.truncate("a" * 150) == "a" * 100 + "..."


class TestWatchedList:
    """Tests pour format_watched_list()."""

    def test_empty(self):
        assert formatting.format_watched_list([]) == "Votre liste de visionnage est vide"

    def test_lines_are_numbered(self):
        entries = [
            WatchedEntry(
                title="Breaking Bad",
                media_type=MediaKind.SHOW,
                tmdb_id=1396,
                user_id=1,
                current_episode=7,
                watched_at=datetime(2024, 5, 2, 21, 30, tzinfo=timezone.utc),
            ),
            WatchedEntry(
                title="Inception",
                media_type=MediaKind.MOVIE,
                tmdb_id=27205,
                user_id=1,
                watched_at=datetime(2024, 4, 1, tzinfo=timezone.utc),
            ),
        ]

        text = formatting.format_watched_list(entries)

        assert text.splitlines() == [
            "Votre liste de visionnage :",
            "1. *Breaking Bad* (série, épisode 7) - vu le 2024-05-02",
            "2. *Inception* (film) - vu le 2024-04-01",
        ]


class TestCatalogResult:
    """Tests pour format_catalog_result()."""

    def test_full_result(self, inception: CatalogResult):
        text = formatting.format_catalog_result(1, inception)

        assert text.startswith("1. *Inception* (film, 2010-07-15) - Dom Cobb")

    def test_missing_date_and_long_overview(self):
        result = CatalogResult(
            id=1, title="Dark", kind=MediaKind.SHOW, overview="x" * 120
        )

        text = formatting.format_catalog_result(3, result)

        assert text == "3. *Dark* (série, date inconnue) - " + "x" * 100 + "..."
