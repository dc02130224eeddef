"""
Interfaces ports pour l'envoi des reponses.

Le transport de chat accepte deux formes de message sortant :
du texte Markdown et une photo avec legende.
"""

from abc import ABC, abstractmethod


class IReplySender(ABC):
    """Envoi des reponses vers le transport de chat."""

    @abstractmethod
    async def send_text(self, chat_id: int, text: str) -> None:
        """Envoie un message texte au format Markdown."""
        ...

    @abstractmethod
    async def send_photo(self, chat_id: int, photo_url: str, caption: str) -> None:
        """Envoie une photo (par URL) avec une legende Markdown."""
        ...
