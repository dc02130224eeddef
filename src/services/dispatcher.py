"""
Aiguillage des messages entrants vers les handlers de commande.

Machine a deux etats par utilisateur :
- NORMAL : le texte est interprete comme une commande
- AWAITING_EPISODE : le texte est la reponse a la question de l'episode

L'etat d'attente est consulte avant toute reconnaissance de commande.
"""

from collections.abc import Awaitable, Callable

from loguru import logger

from src.core.ports.conversations import IConversationStore
from src.services.handlers import CommandHandlers

CommandHandler = Callable[[int, str], Awaitable[None]]


def parse_command(text: str) -> tuple[str, str]:
    """
    Separe la commande de son argument.

    Le premier mot est la commande, en minuscules et sans le suffixe
    @NomDuBot ajoute par Telegram dans les groupes. Le reste est l'argument.

    Returns:
        (commande, argument) ; commande vide si le texte ne commence pas par '/'

    Example:
        >>> parse_command("/add@WatchBot  Breaking Bad ")
        ('/add', 'Breaking Bad')
    """
    text = (text or "").strip()
    if not text.startswith("/"):
        return "", text

    parts = text.split(maxsplit=1)
    command = parts[0].split("@", 1)[0].lower()
    argument = parts[1].strip() if len(parts) > 1 else ""
    return command, argument


class CommandDispatcher:
    """
    Point d'entree unique des messages texte.

    Example:
        dispatcher = CommandDispatcher(handlers=handlers, conversations=store)
        await dispatcher.dispatch(chat_id, "/add Inception")
    """

    def __init__(self, handlers: CommandHandlers, conversations: IConversationStore) -> None:
        self._handlers = handlers
        self._conversations = conversations
        self._routes: dict[str, CommandHandler] = {
            "/start": handlers.start,
            "/help": handlers.start,
            "/add": handlers.add,
            "/list": handlers.list_watched,
            "/search": handlers.search,
            "/top": handlers.top,
            "/update": handlers.update,
        }

    @property
    def commands(self) -> list[str]:
        """Commandes reconnues, dans l'ordre d'enregistrement."""
        return list(self._routes)

    async def dispatch(self, chat_id: int, text: str) -> None:
        """
        Traite un message entrant jusqu'au bout avant de rendre la main.

        Args:
            chat_id: Identifiant du chat (sert d'identifiant utilisateur)
            text: Texte brut du message
        """
        state = self._conversations.get(chat_id)
        if state is not None and state.awaiting_episode:
            await self._handlers.answer_episode(chat_id, text, state)
            return

        command, argument = parse_command(text)
        handler = self._routes.get(command)
        if handler is None:
            logger.debug(f"Commande inconnue de {chat_id} : {text!r}")
            await self._handlers.unknown(chat_id, text)
            return

        logger.debug(f"{command} recu de {chat_id}")
        await handler(chat_id, argument)
