"""
Implementation SQLModel du repository des entrees vues.

Implemente l'interface IWatchedRepository pour la persistance de
l'historique de visionnage dans la base de donnees SQLite via SQLModel.
"""

from typing import Optional

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from src.core.entities import WatchedEntry
from src.core.exceptions import (
    EntryNotFoundError,
    StoreWriteError,
    WatchStoreError,
    WrongKindError,
)
from src.core.ports.repositories import IWatchedRepository
from src.core.value_objects import MediaKind
from src.infrastructure.persistence.models import WatchedModel


class SQLModelWatchedRepository(IWatchedRepository):
    """
    Repository SQLModel pour l'historique de visionnage.

    Implemente IWatchedRepository avec conversion bidirectionnelle
    entre l'entite WatchedEntry (domaine) et WatchedModel (persistance).
    Chaque operation ouvre sa propre session : le repository vit aussi
    longtemps que le bot.
    """

    def __init__(self, engine: Engine) -> None:
        """
        Initialise le repository avec l'engine de la base.

        Args :
            engine : Engine SQLAlchemy deja initialise (schema cree)
        """
        self._engine = engine

    def _to_entity(self, model: WatchedModel) -> WatchedEntry:
        """Convertit un modele DB en entite domaine."""
        return WatchedEntry(
            id=model.id,
            title=model.title,
            media_type=MediaKind(model.media_type),
            tmdb_id=model.tmdb_id,
            user_id=model.user_id,
            watched_at=model.watched_at,
            current_episode=model.current_episode or 0,
        )

    def _to_model(self, entity: WatchedEntry) -> WatchedModel:
        """Convertit une entite domaine en modele DB."""
        return WatchedModel(
            title=entity.title,
            media_type=entity.media_type.value,
            tmdb_id=entity.tmdb_id,
            user_id=entity.user_id,
            watched_at=entity.watched_at,
            current_episode=entity.current_episode if entity.is_show else 0,
        )

    @staticmethod
    def _user_statement(user_id: int):
        """Entrees d'un utilisateur, les plus recentes d'abord (id en departage)."""
        return (
            select(WatchedModel)
            .where(WatchedModel.user_id == user_id)
            .order_by(col(WatchedModel.watched_at).desc(), col(WatchedModel.id).desc())
        )

    def record(self, entry: WatchedEntry) -> WatchedEntry:
        """Ajoute une entree vue (les doublons sont autorises)."""
        model = self._to_model(entry)
        try:
            with Session(self._engine) as session:
                session.add(model)
                session.commit()
                session.refresh(model)
                saved = self._to_entity(model)
        except SQLAlchemyError as e:
            raise StoreWriteError(f"Insertion impossible pour '{entry.title}': {e}") from e

        logger.info(
            f"Entree enregistree : {saved.title} ({saved.media_type.value}) "
            f"pour l'utilisateur {saved.user_id}"
        )
        return saved

    def list_by_user(self, user_id: int) -> list[WatchedEntry]:
        """Liste les entrees d'un utilisateur, les plus recentes d'abord."""
        try:
            with Session(self._engine) as session:
                models = session.exec(self._user_statement(user_id)).all()
                return [self._to_entity(model) for model in models]
        except SQLAlchemyError as e:
            raise WatchStoreError(f"Lecture impossible pour l'utilisateur {user_id}: {e}") from e

    def _find_latest_by_title(
        self, session: Session, user_id: int, title: str
    ) -> Optional[WatchedModel]:
        """
        Retrouve l'entree la plus recente de l'utilisateur pour ce titre.

        La comparaison ignore la casse (casefold Python, car LOWER() de SQLite
        ne traite que l'ASCII).
        """
        wanted = title.strip().casefold()
        for model in session.exec(self._user_statement(user_id)):
            if model.title.casefold() == wanted:
                return model
        return None

    def update_episode(self, user_id: int, title: str, episode: int) -> WatchedEntry:
        """Met a jour l'episode courant de la serie la plus recemment ajoutee."""
        try:
            with Session(self._engine) as session:
                model = self._find_latest_by_title(session, user_id, title)
                if model is None:
                    raise EntryNotFoundError(user_id, title)
                if model.media_type != MediaKind.SHOW.value:
                    raise WrongKindError(model.title)

                model.current_episode = episode
                session.add(model)
                session.commit()
                session.refresh(model)
                updated = self._to_entity(model)
        except SQLAlchemyError as e:
            raise StoreWriteError(f"Mise a jour impossible pour '{title}': {e}") from e

        logger.info(
            f"Episode mis a jour : {updated.title} -> {episode} "
            f"pour l'utilisateur {user_id}"
        )
        return updated
