"""
Interfaces ports pour le suivi des conversations.

Un utilisateur qui ajoute une serie doit ensuite indiquer son dernier
episode vu : l'etat intermediaire est conserve derriere cette interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from src.core.value_objects import MediaKind


@dataclass(frozen=True)
class ConversationState:
    """
    Etat en attente d'un utilisateur.

    Attributs :
        awaiting_episode : Vrai tant que le numero d'episode n'a pas ete saisi
        tmdb_id : ID TMDB du media en cours d'ajout
        title : Titre du media en cours d'ajout
        media_type : Type du media en cours d'ajout
    """

    tmdb_id: int
    title: str
    media_type: MediaKind = MediaKind.SHOW
    awaiting_episode: bool = True


class IConversationStore(ABC):
    """Stockage des etats de conversation, au plus un par utilisateur."""

    @abstractmethod
    def get(self, user_id: int) -> Optional[ConversationState]:
        """Retourne l'etat en cours de l'utilisateur, ou None."""
        ...

    @abstractmethod
    def set(self, user_id: int, state: ConversationState) -> None:
        """Enregistre l'etat de l'utilisateur (ecrase l'etat precedent)."""
        ...

    @abstractmethod
    def clear(self, user_id: int) -> None:
        """Supprime l'etat de l'utilisateur s'il existe."""
        ...
