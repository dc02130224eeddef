"""
Modeles SQLModel pour la base de donnees WatchBot.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- watched: Films et series vus, une ligne par ajout
"""

from __future__ import annotations

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.core.entities.watched import utc_now


class WatchedModel(SQLModel, table=True):
    """
    Modele representant une entree vue dans la base de donnees.

    media_type vaut "movie" ou "show". current_episode n'a de sens
    que pour les series et reste a 0 pour les films.
    watched_at est toujours enregistre avec son fuseau (UTC).
    """

    __tablename__ = "watched"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    media_type: str
    tmdb_id: int
    user_id: int = Field(index=True)
    watched_at: datetime = Field(default_factory=utc_now)
    current_episode: int = Field(default=0, sa_column_kwargs={"server_default": "0"})
