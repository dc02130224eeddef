"""
Branchement du dispatcher sur l'Application python-telegram-bot.

Les mises a jour sont recues par long polling et traitees une par une
(concurrent_updates desactive) : l'etat des conversations et la base
n'ont donc pas besoin de verrou.
"""

from typing import Optional

from loguru import logger
from telegram import Bot, BotCommand, Update
from telegram.error import TelegramError
from telegram.ext import Application, ApplicationBuilder, ContextTypes, MessageHandler, filters

from src.adapters.api.tmdb_client import TMDBClient
from src.services.dispatcher import CommandDispatcher

# Commandes affichees dans le menu Telegram
BOT_COMMANDS = [
    BotCommand("start", "Aide et liste des commandes"),
    BotCommand("add", "Ajouter un film ou une série vu"),
    BotCommand("list", "Afficher votre liste de visionnage"),
    BotCommand("search", "Rechercher un film ou une série"),
    BotCommand("top", "Top 20 des films et séries de la semaine"),
    BotCommand("update", "Mettre à jour l'épisode d'une série"),
]


def build_application(
    bot: Bot,
    dispatcher: CommandDispatcher,
    catalog: Optional[TMDBClient] = None,
) -> Application:
    """
    Construit l'Application Telegram.

    Args:
        bot: Bot partage avec le TelegramReplySender
        dispatcher: Aiguillage des messages texte
        catalog: Client TMDB a fermer a l'arret (optionnel)

    Returns:
        Application prete pour run_polling()
    """

    async def on_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        message = update.message
        if message is None or message.text is None:
            return
        await dispatcher.dispatch(message.chat_id, message.text)

    async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        logger.opt(exception=context.error).error(
            f"Erreur non geree pendant le traitement de {update}"
        )

    async def post_init(application: Application) -> None:
        try:
            await application.bot.set_my_commands(BOT_COMMANDS)
        except TelegramError as e:
            logger.warning(f"Enregistrement du menu des commandes impossible : {e}")
        logger.info(f"Bot connecte : @{application.bot.username}")

    async def post_shutdown(application: Application) -> None:
        if catalog is not None:
            await catalog.close()
        logger.info("Bot arrete")

    application = (
        ApplicationBuilder()
        .bot(bot)
        .concurrent_updates(False)
        .post_init(post_init)
        .post_shutdown(post_shutdown)
        .build()
    )
    application.add_handler(MessageHandler(filters.TEXT, on_message))
    application.add_error_handler(on_error)
    return application
