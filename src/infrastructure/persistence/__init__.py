"""
Module de persistance SQLite pour WatchBot.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine, initialisation du schema
- models.py : Modele SQLModel de la table watched
- repositories/ : Implementation du port IWatchedRepository

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from src.infrastructure.persistence import create_db_engine, init_db

    engine = create_db_engine("sqlite:///watched.db")
    init_db(engine)  # Cree la table si necessaire
"""

from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.models import WatchedModel

__all__ = [
    "create_db_engine",
    "init_db",
    "WatchedModel",
]
