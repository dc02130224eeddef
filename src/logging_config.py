"""
Configuration du logging de WatchBot via loguru.

- Console : texte coloré, niveau réglable, pour suivre le bot en direct
- Fichier : JSON avec rotation, tout depuis DEBUG (appels TMDB compris)

python-telegram-bot et httpx écrivent via le module logging standard :
leurs messages sont redirigés vers loguru. Les URL de requêtes httpx
contiennent le token du bot et la clé TMDB, elles ne sont donc
journalisées qu'à partir de WARNING.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

# Bibliothèques dont les messages INFO exposeraient des secrets ou du bruit
QUIET_LOGGERS = ("httpx", "httpcore", "telegram.ext.Updater")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Transmet les enregistrements du module logging à loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Remonte la pile jusqu'à l'appelant réel, hors du module logging
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def intercept_stdlib_logging() -> None:
    """Redirige le logging standard vers loguru et calme les bibliothèques bavardes."""
    logging.basicConfig(handlers=[InterceptHandler()], level=logging.INFO, force=True)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/watchbot.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging du bot.

    Args :
        log_level : Niveau minimum affiché sur la console
        log_file : Fichier JSON (le répertoire parent est créé)
        rotation_size : Taille avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conservés
    """
    logger.remove()
    logger.add(sys.stderr, level=log_level.upper(), format=CONSOLE_FORMAT, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    intercept_stdlib_logging()
    logger.debug(f"Logging configuré : {log_file} (rotation {rotation_size})")
