"""
Envoi des reponses via l'API Telegram.

Implemente IReplySender avec python-telegram-bot. Les echecs d'envoi
sont traces et ne remontent jamais au dispatcher.
"""

from loguru import logger
from telegram import Bot
from telegram.constants import MessageLimit, ParseMode
from telegram.error import BadRequest, TelegramError

from src.core.ports.messaging import IReplySender


def split_message(text: str, limit: int = MessageLimit.MAX_TEXT_LENGTH) -> list[str]:
    """
    Decoupe un texte trop long pour Telegram en morceaux.

    La coupure se fait entre deux lignes ; une ligne plus longue que
    la limite est coupee brutalement.
    """
    if len(text) <= limit:
        return [text]

    chunks: list[str] = []
    current = ""
    for line in text.split("\n"):
        while len(line) > limit:
            if current:
                chunks.append(current)
                current = ""
            chunks.append(line[:limit])
            line = line[limit:]
        candidate = f"{current}\n{line}" if current else line
        if len(candidate) > limit:
            chunks.append(current)
            current = line
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


class TelegramReplySender(IReplySender):
    """
    Envoi de messages Markdown et de photos legendees.

    Une photo refusee par Telegram (URL invalide, image trop lourde)
    est remplacee par sa legende en texte.
    """

    def __init__(self, bot: Bot) -> None:
        """
        Args:
            bot: Instance Bot partagee avec l'Application Telegram
        """
        self._bot = bot

    async def send_text(self, chat_id: int, text: str) -> None:
        for chunk in split_message(text):
            try:
                await self._bot.send_message(
                    chat_id=chat_id, text=chunk, parse_mode=ParseMode.MARKDOWN
                )
            except TelegramError as e:
                logger.error(f"Envoi du message a {chat_id} en echec : {e}")
                return

    async def send_photo(self, chat_id: int, photo_url: str, caption: str) -> None:
        try:
            await self._bot.send_photo(
                chat_id=chat_id,
                photo=photo_url,
                caption=caption,
                parse_mode=ParseMode.MARKDOWN,
            )
        except BadRequest as e:
            logger.warning(f"Photo {photo_url} refusee ({e}), envoi de la legende seule")
            await self.send_text(chat_id, caption)
        except TelegramError as e:
            logger.error(f"Envoi de la photo a {chat_id} en echec : {e}")
