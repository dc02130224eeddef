"""
Fixtures pytest partagees pour les tests WatchBot.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Base SQLite en memoire et repository reel
- Mocks des ports (catalogue, envoi des reponses)
- Handlers et dispatcher cables sur ces dependances
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from src.config import Settings
from src.core.ports.api_clients import CatalogResult, ICatalogClient
from src.core.ports.messaging import IReplySender
from src.core.value_objects import MediaKind
from src.infrastructure.persistence.database import init_db
from src.infrastructure.persistence.repositories import SQLModelWatchedRepository
from src.services.conversation import InMemoryConversationStore
from src.services.dispatcher import CommandDispatcher
from src.services.handlers import CommandHandlers


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec base et logs dans tmp_path."""
    return Settings(
        telegram_token="123456:TEST-TOKEN",
        tmdb_api_key="0123456789abcdef0123456789abcdef",
        database_url=f"sqlite:///{tmp_path}/test.db",
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def engine() -> Engine:
    """
    Engine SQLite en memoire avec le schema cree.

    StaticPool garde une connexion unique : chaque Session voit les memes donnees.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    return engine


@pytest.fixture
def watched_repository(engine: Engine) -> SQLModelWatchedRepository:
    """Repository reel sur la base en memoire."""
    return SQLModelWatchedRepository(engine)


@pytest.fixture
def conversation_store() -> InMemoryConversationStore:
    return InMemoryConversationStore()


@pytest.fixture
def mock_catalog() -> AsyncMock:
    """
    Mock de ICatalogClient.

    Aucun resultat par defaut ; configurer les retours dans chaque test.
    """
    catalog = AsyncMock(spec=ICatalogClient)
    catalog.search.return_value = []
    catalog.popular_movies.return_value = []
    catalog.popular_shows.return_value = []
    catalog.get_poster_url.return_value = None
    return catalog


@pytest.fixture
def mock_sender() -> AsyncMock:
    """Mock de IReplySender qui enregistre les messages envoyes."""
    return AsyncMock(spec=IReplySender)


@pytest.fixture
def handlers(
    mock_catalog: AsyncMock,
    watched_repository: SQLModelWatchedRepository,
    conversation_store: InMemoryConversationStore,
    mock_sender: AsyncMock,
) -> CommandHandlers:
    return CommandHandlers(
        catalog=mock_catalog,
        repository=watched_repository,
        conversations=conversation_store,
        sender=mock_sender,
    )


@pytest.fixture
def dispatcher(
    handlers: CommandHandlers, conversation_store: InMemoryConversationStore
) -> CommandDispatcher:
    return CommandDispatcher(handlers=handlers, conversations=conversation_store)


@pytest.fixture
def inception() -> CatalogResult:
    """Resultat catalogue de type film."""
    return CatalogResult(
        id=27205,
        title="Inception",
        kind=MediaKind.MOVIE,
        release_date="2010-07-15",
        overview="Dom Cobb est un voleur expérimenté dans l'art périlleux de l'extraction.",
        poster_url="https://image.tmdb.org/t/p/w500/inception.jpg",
        popularity=98.5,
    )


@pytest.fixture
def breaking_bad() -> CatalogResult:
    """Resultat catalogue de type serie."""
    return CatalogResult(
        id=1396,
        title="Breaking Bad",
        kind=MediaKind.SHOW,
        release_date="2008-01-20",
        overview="Un professeur de chimie atteint d'un cancer se lance dans la fabrication de méthamphétamine.",
        poster_url="https://image.tmdb.org/t/p/w500/breaking_bad.jpg",
        popularity=310.2,
    )
