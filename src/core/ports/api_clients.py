"""
Interfaces ports pour le client catalogue.

Interface abstraite (port) definissant le contrat du catalogue de metadonnees
externe (TMDB). L'implementation concrete (adaptateur) vit dans
src/adapters/api/tmdb_client.py.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from src.core.value_objects import MediaKind


@dataclass(frozen=True)
class CatalogResult:
    """
    Resultat de recherche ou de classement depuis le catalogue.

    Jamais persiste : recupere a chaque requete.

    Attributs :
        id : ID TMDB du media
        title : Titre du film ou nom de la serie
        kind : Film ou serie
        release_date : Date de sortie (film) ou de premiere diffusion (serie), "" si inconnue
        overview : Resume, "" si absent
        poster_url : URL complete du poster, ou None
        popularity : Score de popularite TMDB
    """

    id: int
    title: str
    kind: MediaKind
    release_date: str = ""
    overview: str = ""
    poster_url: Optional[str] = None
    popularity: float = 0.0


class ICatalogClient(ABC):
    """
    Interface du catalogue de films et series.

    Toutes les methodes levent CatalogNetworkError ou CatalogDecodeError
    en cas d'echec.
    """

    @abstractmethod
    async def search(self, query: str) -> list[CatalogResult]:
        """
        Recherche multi-type (films et series) par texte libre.

        Args :
            query : Texte de recherche

        Retourne :
            Resultats dans l'ordre du catalogue (vide si aucun)
        """
        ...

    @abstractmethod
    async def popular_movies(self) -> list[CatalogResult]:
        """Films populaires du moment, tous de type MOVIE."""
        ...

    @abstractmethod
    async def popular_shows(self) -> list[CatalogResult]:
        """Series populaires du moment, toutes de type SHOW."""
        ...

    @abstractmethod
    async def get_poster_url(self, tmdb_id: int, kind: MediaKind) -> Optional[str]:
        """
        Recupere l'URL du poster d'un media precis.

        Retourne :
            URL complete du poster, ou None si le media n'a pas de poster ou n'existe pas
        """
        ...
