"""
Configuration de la base de donnees SQLite pour WatchBot.

Ce module fournit :
- Creation de l'engine a partir de l'URL configuree
- Initialisation idempotente du schema (table + migration de colonne)

La base de donnees est configuree via WATCHBOT_DATABASE_URL (defaut: sqlite:///watched.db).
"""

from pathlib import Path

from loguru import logger
from sqlalchemy import Engine, text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlmodel import SQLModel, create_engine

from src.core.exceptions import StorageInitError


def create_db_engine(database_url: str) -> Engine:
    """
    Cree l'engine SQLAlchemy pour l'URL donnee.

    Cree le repertoire parent si l'URL designe un fichier SQLite.
    """
    if database_url.startswith("sqlite:///") and not database_url.startswith(
        "sqlite:///:memory:"
    ):
        db_path = Path(database_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def init_db(engine: Engine) -> None:
    """
    Initialise la base de donnees en creant la table si necessaire.

    Cette fonction importe les modeles pour enregistrer leurs metadonnees
    dans SQLModel.metadata, cree les tables absentes puis applique
    les migrations de colonnes.

    Doit etre appelee une fois au demarrage de l'application.

    Raises:
        StorageInitError: Si le schema ne peut pas etre cree
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from src.infrastructure.persistence import models  # noqa: F401

    try:
        SQLModel.metadata.create_all(engine)
        _run_migrations(engine)
    except SQLAlchemyError as e:
        raise StorageInitError(f"Impossible d'initialiser la base : {e}") from e

    logger.debug(f"Base de donnees prete : {engine.url}")


def _run_migrations(engine: Engine) -> None:
    """
    Ajoute les colonnes manquantes dans les tables existantes.

    SQLModel.metadata.create_all() ne modifie pas une table deja creee :
    une base issue d'une ancienne version peut ne pas avoir current_episode.
    """
    with engine.connect() as conn:
        result = conn.execute(text("PRAGMA table_info(watched)"))
        columns = [row[1] for row in result.fetchall()]
        if "current_episode" in columns:
            return

        try:
            conn.execute(
                text("ALTER TABLE watched ADD COLUMN current_episode INTEGER DEFAULT 0")
            )
            conn.commit()
        except OperationalError as e:
            if "duplicate column name" not in str(e).lower():
                raise
            conn.rollback()
            return

    logger.info("Migration : colonne current_episode ajoutee a watched")
