"""
Adaptateur du transport de chat Telegram.

- bot.py : Application python-telegram-bot (polling, handlers, menu)
- sender.py : TelegramReplySender, implementation de IReplySender
"""

from src.adapters.telegram.bot import BOT_COMMANDS, build_application
from src.adapters.telegram.sender import TelegramReplySender, split_message

__all__ = [
    "BOT_COMMANDS",
    "build_application",
    "TelegramReplySender",
    "split_message",
]
