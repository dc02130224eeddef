"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Port repository : Contrat de persistance
- IWatchedRepository : Historique de visionnage

Port client API : Contrat du catalogue externe
- ICatalogClient : Recherche et classements TMDB
- CatalogResult : Résultat depuis le catalogue

Port conversation : Etat des échanges en plusieurs étapes
- IConversationStore, ConversationState

Port messagerie : Envoi des réponses
- IReplySender
"""

from src.core.ports.api_clients import CatalogResult, ICatalogClient
from src.core.ports.conversations import ConversationState, IConversationStore
from src.core.ports.messaging import IReplySender
from src.core.ports.repositories import IWatchedRepository

__all__ = [
    # Repositories
    "IWatchedRepository",
    # Clients API
    "ICatalogClient",
    "CatalogResult",
    # Conversations
    "IConversationStore",
    "ConversationState",
    # Messagerie
    "IReplySender",
]
