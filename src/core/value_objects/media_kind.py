"""
Objet valeur pour le type de media suivi par le bot.

Le catalogue TMDB etiquette les resultats avec "movie", "tv" ou "person".
Le bot ne connait que deux types : film et serie.
"""

from enum import Enum
from typing import Optional


class MediaKind(Enum):
    """Type d'une entree vue ou d'un resultat de catalogue.

    Valeurs:
        MOVIE: Film
        SHOW: Serie TV (avec numero d'episode courant)
    """

    MOVIE = "movie"
    SHOW = "show"

    @classmethod
    def from_tmdb(cls, media_type: Optional[str]) -> Optional["MediaKind"]:
        """
        Convertit l'etiquette media_type de TMDB en MediaKind.

        Args:
            media_type: Valeur brute du champ media_type ("movie", "tv", ...)

        Returns:
            Le MediaKind correspondant, ou None pour les autres types (personnes)
        """
        if media_type == "movie":
            return cls.MOVIE
        if media_type == "tv":
            return cls.SHOW
        return None

    @property
    def label(self) -> str:
        """Libelle francais affiche dans les reponses du bot."""
        return "série" if self is MediaKind.SHOW else "film"
