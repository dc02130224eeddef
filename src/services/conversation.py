"""
Suivi en memoire des conversations en plusieurs etapes.

Seul l'ajout d'une serie en a besoin : le bot demande ensuite le numero
du dernier episode vu. L'etat vit le temps du processus, sans expiration.
"""

from typing import Optional

from src.core.ports.conversations import ConversationState, IConversationStore


class InMemoryConversationStore(IConversationStore):
    """
    Implementation de IConversationStore par dictionnaire.

    Les messages sont traites un par un par l'application Telegram :
    aucun verrou n'est necessaire tant que ce mode sequentiel est conserve.
    """

    def __init__(self) -> None:
        self._states: dict[int, ConversationState] = {}

    def get(self, user_id: int) -> Optional[ConversationState]:
        return self._states.get(user_id)

    def set(self, user_id: int, state: ConversationState) -> None:
        self._states[user_id] = state

    def clear(self, user_id: int) -> None:
        self._states.pop(user_id, None)

    def __len__(self) -> int:
        return len(self._states)
