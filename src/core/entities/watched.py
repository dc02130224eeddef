"""
Entite entree vue.

Represente le fait qu'un utilisateur a vu un film ou une serie.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from src.core.value_objects import MediaKind


def utc_now() -> datetime:
    """Horodatage courant en UTC (datetime avec fuseau)."""
    return datetime.now(timezone.utc)


@dataclass
class WatchedEntry:
    """
    Une entree de l'historique de visionnage d'un utilisateur.

    Attributs :
        id : Identifiant attribue par le stockage (None avant insertion)
        title : Titre tel que retourne par le catalogue
        media_type : Film ou serie
        tmdb_id : ID du media dans le catalogue TMDB (non contraint)
        user_id : Identifiant du chat Telegram proprietaire
        watched_at : Date d'enregistrement, en UTC
        current_episode : Dernier episode vu (toujours 0 pour un film)
    """

    title: str
    media_type: MediaKind
    tmdb_id: int
    user_id: int
    id: Optional[int] = None
    watched_at: datetime = field(default_factory=utc_now)
    current_episode: int = 0

    def __post_init__(self) -> None:
        # Le stockage exige un fuseau : une date naive est lue comme UTC
        if self.watched_at.tzinfo is None:
            self.watched_at = self.watched_at.replace(tzinfo=timezone.utc)
        if self.media_type is MediaKind.MOVIE:
            self.current_episode = 0

    @property
    def is_show(self) -> bool:
        """Vrai si l'entree est une serie."""
        return self.media_type is MediaKind.SHOW
