"""
Implementations SQLModel des repositories.

Ce module contient l'implementation concrete de l'interface repository
definie dans src/core/ports/repositories.py, utilisant SQLModel pour
la persistance SQLite.

Le repository :
- Herite de l'interface ABC du domaine
- Recoit l'engine SQLAlchemy via injection de dependances
- Convertit entre entite de domaine (dataclass) et modele DB (SQLModel)
"""

from src.infrastructure.persistence.repositories.watched_repository import (
    SQLModelWatchedRepository,
)

__all__ = [
    "SQLModelWatchedRepository",
]
