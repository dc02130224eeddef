"""
Container d'injection de dependances via dependency-injector.

Construit une seule fois au demarrage toutes les dependances du bot
(configuration, base, client TMDB, etat des conversations, envoi Telegram)
et les injecte explicitement dans les handlers et le dispatcher.
"""

from dependency_injector import containers, providers
from telegram import Bot

from .adapters.api.tmdb_client import TMDBClient
from .adapters.telegram.bot import build_application
from .adapters.telegram.sender import TelegramReplySender
from .config import load_settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import SQLModelWatchedRepository
from .services.conversation import InMemoryConversationStore
from .services.dispatcher import CommandDispatcher
from .services.handlers import CommandHandlers


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree le schema une fois
        application = container.application()
        application.run_polling()

    Dans les tests, surcharger la configuration :
        container.config.override(providers.Object(settings))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(load_settings)

    # Base de donnees - engine unique et initialisation du schema
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )
    database = providers.Resource(init_db, engine=engine)

    # Repository - Singleton, ouvre une session par operation
    watched_repository = providers.Singleton(
        SQLModelWatchedRepository,
        engine=engine,
    )

    # Client catalogue - Singleton, client HTTP partage
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        language=config.provided.tmdb_language,
        timeout=config.provided.tmdb_timeout,
    )

    # Etat des conversations - un seul dictionnaire pour tout le processus
    conversation_store = providers.Singleton(InMemoryConversationStore)

    # Transport Telegram
    telegram_bot = providers.Singleton(
        Bot,
        token=config.provided.telegram_token,
    )
    reply_sender = providers.Singleton(
        TelegramReplySender,
        bot=telegram_bot,
    )

    # Commandes
    command_handlers = providers.Singleton(
        CommandHandlers,
        catalog=tmdb_client,
        repository=watched_repository,
        conversations=conversation_store,
        sender=reply_sender,
    )
    dispatcher = providers.Singleton(
        CommandDispatcher,
        handlers=command_handlers,
        conversations=conversation_store,
    )

    application = providers.Singleton(
        build_application,
        bot=telegram_bot,
        dispatcher=dispatcher,
        catalog=tmdb_client,
    )
