"""
Interfaces ports pour les repositories.

Interface abstraite (port) definissant le contrat de persistance
des entrees vues. L'implementation SQLModel vit dans
src/infrastructure/persistence/repositories/.
"""

from abc import ABC, abstractmethod

from src.core.entities import WatchedEntry


class IWatchedRepository(ABC):
    """
    Interface de stockage de l'historique de visionnage.

    Definit les operations pour persister et relire les entites WatchedEntry.
    """

    @abstractmethod
    def record(self, entry: WatchedEntry) -> WatchedEntry:
        """
        Ajoute une entree (sans deduplication).

        Retourne :
            L'entree avec son id attribue

        Leve :
            StoreWriteError : si l'insertion echoue
        """
        ...

    @abstractmethod
    def list_by_user(self, user_id: int) -> list[WatchedEntry]:
        """Liste les entrees d'un utilisateur, les plus recentes d'abord."""
        ...

    @abstractmethod
    def update_episode(self, user_id: int, title: str, episode: int) -> WatchedEntry:
        """
        Met a jour l'episode courant d'une serie de l'utilisateur.

        Si plusieurs entrees portent ce titre, la plus recente est modifiee.

        Leve :
            EntryNotFoundError : aucune entree ne correspond
            WrongKindError : l'entree trouvee n'est pas une serie
            StoreWriteError : si la mise a jour echoue
        """
        ...
