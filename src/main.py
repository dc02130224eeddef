"""
Point d'entrée CLI de WatchBot.

Initialise le container DI, configure le logging et lance le bot Telegram.
"""

from typing import Annotated

import typer
from loguru import logger

from .config import Settings
from .container import Container
from .core.exceptions import StartupConfigError, StorageInitError
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="watchbot",
    help="Bot Telegram de suivi des films et séries vus",
)
container = Container()


def _mask(secret: str) -> str:
    """Masque un secret en ne gardant que ses 4 derniers caractères."""
    return f"****{secret[-4:]}" if len(secret) > 4 else "****"


def get_config() -> Settings:
    """Récupère les paramètres depuis le container DI, quitte si invalides."""
    try:
        return container.config()
    except StartupConfigError as e:
        logger.critical(str(e))
        typer.echo(f"Erreur de configuration : {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def run(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", "-l", help="Surcharge le niveau de log console"),
    ] = None,
) -> None:
    """Lance le bot (long polling) jusqu'à interruption."""
    settings = get_config()
    configure_logging(
        log_level=log_level or settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    # Initialise la base de données (crée la table si nécessaire)
    try:
        container.database.init()
    except StorageInitError as e:
        logger.critical(str(e))
        raise typer.Exit(code=1) from e

    logger.info("Démarrage de WatchBot", version=__version__)
    application = container.application()
    application.run_polling()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle (secrets masqués)."""
    config = get_config()
    typer.echo(f"Token Telegram : {_mask(config.telegram_token)}")
    typer.echo(f"Clé TMDB : {_mask(config.tmdb_api_key)}")
    typer.echo(f"Langue TMDB : {config.tmdb_language}")
    timeout = f"{config.tmdb_timeout}s" if config.tmdb_timeout else "aucun"
    typer.echo(f"Timeout TMDB : {timeout}")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"WatchBot v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
