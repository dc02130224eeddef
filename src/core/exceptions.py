"""
Taxonomie des erreurs de WatchBot.

Erreurs fatales au demarrage :
- StartupConfigError : configuration absente ou invalide
- StorageInitError : impossible de creer le schema de la base

Erreurs recuperees pendant le traitement d'un message :
- CatalogNetworkError / CatalogDecodeError : echec d'appel au catalogue TMDB
- StoreWriteError : echec d'ecriture en base
- EpisodeValidationError : numero d'episode invalide saisi par l'utilisateur
- EntryNotFoundError / WrongKindError : echecs de /update
"""

from typing import Optional


class WatchBotError(Exception):
    """Erreur de base de l'application."""


class StartupConfigError(WatchBotError):
    """Configuration manquante ou illisible au demarrage."""


class StorageInitError(WatchBotError):
    """Echec de creation ou de migration du schema de la base."""


class CatalogError(WatchBotError):
    """Erreur de base du client catalogue."""


class CatalogNetworkError(CatalogError):
    """
    Echec reseau ou statut HTTP en erreur lors d'un appel au catalogue.

    Attributes:
        status_code: Code HTTP retourne, ou None pour une erreur de transport
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class CatalogDecodeError(CatalogError):
    """Reponse du catalogue non decodable (JSON invalide ou sans 'results')."""


class WatchStoreError(WatchBotError):
    """Erreur de base du stockage des entrees vues."""


class StoreWriteError(WatchStoreError):
    """Echec d'ecriture (insertion ou mise a jour) en base."""


class EntryNotFoundError(WatchStoreError):
    """Aucune entree ne correspond a l'utilisateur et au titre demandes."""

    def __init__(self, user_id: int, title: str) -> None:
        self.user_id = user_id
        self.title = title
        super().__init__(f"Aucune entree '{title}' pour l'utilisateur {user_id}")


class WrongKindError(WatchStoreError):
    """L'entree trouvee n'est pas une serie."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"'{title}' n'est pas une serie")


class EpisodeValidationError(WatchBotError):
    """Numero d'episode non entier ou negatif."""

    def __init__(self, raw_value: str) -> None:
        self.raw_value = raw_value
        super().__init__(f"Numero d'episode invalide : {raw_value!r}")
