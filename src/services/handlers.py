"""
Traitement des commandes du bot.

Chaque commande (/start, /add, /list, /search, /top, /update) et la reponse
au numero d'episode ont leur coroutine. Les erreurs recuperables (catalogue
indisponible, ecriture en echec, saisie invalide) sont converties en message
pour l'utilisateur et tracees ; aucune ne remonte au dispatcher.
"""

from typing import Optional

from loguru import logger

from src.core.entities import WatchedEntry
from src.core.exceptions import (
    CatalogError,
    EntryNotFoundError,
    EpisodeValidationError,
    StoreWriteError,
    WatchStoreError,
    WrongKindError,
)
from src.core.ports.api_clients import CatalogResult, ICatalogClient
from src.core.ports.conversations import ConversationState, IConversationStore
from src.core.ports.messaging import IReplySender
from src.core.ports.repositories import IWatchedRepository
from src.core.value_objects import MediaKind
from src.services import formatting
from src.services.episodes import parse_episode_number
from src.services.ranking import TOP_LIMIT, rank_by_popularity

# Nombre de resultats affiches par /search
SEARCH_LIMIT = 5


class CommandHandlers:
    """
    Handlers des commandes utilisateur.

    Toutes les dependances sont injectees (voir src/container.py).

    Example:
        handlers = CommandHandlers(
            catalog=tmdb_client,
            repository=watched_repo,
            conversations=InMemoryConversationStore(),
            sender=reply_sender,
        )
        await handlers.add(chat_id, "Inception")
    """

    def __init__(
        self,
        catalog: ICatalogClient,
        repository: IWatchedRepository,
        conversations: IConversationStore,
        sender: IReplySender,
    ) -> None:
        self._catalog = catalog
        self._repository = repository
        self._conversations = conversations
        self._sender = sender

    async def _reply(self, chat_id: int, text: str, poster_url: Optional[str] = None) -> None:
        """Envoie une photo legendee si un poster existe, sinon du texte."""
        if poster_url:
            await self._sender.send_photo(chat_id, poster_url, text)
        else:
            await self._sender.send_text(chat_id, text)

    async def _search_catalog(self, query: str) -> list[CatalogResult]:
        """Recherche dans le catalogue ; une erreur vaut 'aucun resultat'."""
        try:
            return await self._catalog.search(query)
        except CatalogError as e:
            logger.warning(f"Recherche catalogue en echec pour '{query}': {e}")
            return []

    async def start(self, chat_id: int, argument: str = "") -> None:
        """Affiche l'aide."""
        await self._sender.send_text(chat_id, formatting.HELP_TEXT)

    async def unknown(self, chat_id: int, text: str = "") -> None:
        """Rappelle les commandes disponibles."""
        await self._sender.send_text(chat_id, formatting.UNKNOWN_COMMAND)

    async def add(self, chat_id: int, query: str) -> None:
        """
        Ajoute le premier resultat du catalogue a la liste de l'utilisateur.

        Un film est enregistre immediatement. Pour une serie, l'etat de
        conversation est cree et le numero d'episode est demande.
        """
        query = query.strip()
        if not query:
            await self._sender.send_text(chat_id, formatting.ADD_USAGE)
            return

        results = await self._search_catalog(query)
        if not results:
            await self._sender.send_text(chat_id, formatting.not_found(query))
            return

        result = results[0]
        if result.kind is MediaKind.SHOW:
            self._conversations.set(
                chat_id,
                ConversationState(
                    tmdb_id=result.id,
                    title=result.title,
                    media_type=result.kind,
                ),
            )
            logger.debug(f"Utilisateur {chat_id} : episode attendu pour '{result.title}'")
            await self._sender.send_text(chat_id, formatting.show_prompt(result.title))
            return

        entry = WatchedEntry(
            title=result.title,
            media_type=MediaKind.MOVIE,
            tmdb_id=result.id,
            user_id=chat_id,
        )
        try:
            self._repository.record(entry)
        except StoreWriteError as e:
            logger.error(f"Enregistrement du film '{result.title}' en echec : {e}")
            await self._sender.send_text(chat_id, formatting.SAVE_ERROR)
            return

        await self._reply(chat_id, formatting.movie_added(result.title), result.poster_url)

    async def answer_episode(self, chat_id: int, text: str, state: ConversationState) -> None:
        """
        Termine l'ajout d'une serie avec le numero d'episode saisi.

        Une saisie invalide laisse l'etat intact et repose la question.
        Le poster est recupere au mieux : son echec ne bloque pas la confirmation.
        """
        try:
            episode = parse_episode_number(text)
        except EpisodeValidationError as e:
            logger.debug(f"Utilisateur {chat_id} : {e}")
            await self._sender.send_text(chat_id, formatting.EPISODE_PROMPT)
            return

        entry = WatchedEntry(
            title=state.title,
            media_type=state.media_type,
            tmdb_id=state.tmdb_id,
            user_id=chat_id,
            current_episode=episode,
        )
        try:
            self._repository.record(entry)
        except StoreWriteError as e:
            logger.error(f"Enregistrement de la serie '{state.title}' en echec : {e}")
            await self._sender.send_text(chat_id, formatting.SAVE_ERROR)
            return

        self._conversations.clear(chat_id)

        poster_url = None
        try:
            poster_url = await self._catalog.get_poster_url(state.tmdb_id, state.media_type)
        except CatalogError as e:
            logger.warning(f"Poster indisponible pour '{state.title}': {e}")

        await self._reply(chat_id, formatting.show_added(state.title, episode), poster_url)

    async def list_watched(self, chat_id: int, argument: str = "") -> None:
        """Affiche la liste de visionnage, les ajouts les plus recents d'abord."""
        try:
            entries = self._repository.list_by_user(chat_id)
        except WatchStoreError as e:
            logger.error(f"Lecture de la liste de {chat_id} en echec : {e}")
            await self._sender.send_text(chat_id, formatting.LIST_ERROR)
            return

        await self._sender.send_text(chat_id, formatting.format_watched_list(entries))

    async def search(self, chat_id: int, query: str) -> None:
        """Affiche les premiers resultats du catalogue, avec poster si disponible."""
        query = query.strip()
        if not query:
            await self._sender.send_text(chat_id, formatting.SEARCH_USAGE)
            return

        results = await self._search_catalog(query)
        if not results:
            await self._sender.send_text(chat_id, formatting.not_found(query))
            return

        for index, result in enumerate(results[:SEARCH_LIMIT], start=1):
            await self._reply(
                chat_id, formatting.format_catalog_result(index, result), result.poster_url
            )

    async def top(self, chat_id: int, argument: str = "") -> None:
        """Affiche le top des films et series populaires, fusionnes par popularite."""
        try:
            movies = await self._catalog.popular_movies()
        except CatalogError as e:
            logger.warning(f"Films populaires indisponibles : {e}")
            await self._sender.send_text(chat_id, formatting.TOP_MOVIES_ERROR)
            return

        try:
            shows = await self._catalog.popular_shows()
        except CatalogError as e:
            logger.warning(f"Series populaires indisponibles : {e}")
            await self._sender.send_text(chat_id, formatting.TOP_SHOWS_ERROR)
            return

        ranked = rank_by_popularity([*movies, *shows], limit=TOP_LIMIT)
        if not ranked:
            await self._sender.send_text(chat_id, formatting.TOP_EMPTY)
            return

        for index, result in enumerate(ranked, start=1):
            await self._reply(
                chat_id, formatting.format_catalog_result(index, result), result.poster_url
            )

    async def update(self, chat_id: int, argument: str) -> None:
        """
        Met a jour l'episode courant d'une serie : /update <titre> <episode>.

        Le dernier mot est le numero d'episode, le reste forme le titre.
        """
        parts = argument.split()
        if len(parts) < 2:
            await self._sender.send_text(chat_id, formatting.UPDATE_USAGE)
            return

        try:
            episode = parse_episode_number(parts[-1])
        except EpisodeValidationError:
            await self._sender.send_text(chat_id, formatting.INVALID_EPISODE)
            return

        title = " ".join(parts[:-1])
        try:
            entry = self._repository.update_episode(chat_id, title, episode)
        except EntryNotFoundError:
            await self._sender.send_text(chat_id, formatting.NOT_IN_LIST)
            return
        except WrongKindError:
            await self._sender.send_text(chat_id, formatting.NOT_A_SHOW)
            return
        except StoreWriteError as e:
            logger.error(f"Mise a jour de '{title}' en echec : {e}")
            await self._sender.send_text(chat_id, formatting.UPDATE_ERROR)
            return

        await self._sender.send_text(chat_id, formatting.episode_updated(entry.title, episode))
