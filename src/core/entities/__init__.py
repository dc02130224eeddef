"""
Entites metier du domaine.

Exports:
- WatchedEntry: Film ou serie vu par un utilisateur
"""

from src.core.entities.watched import WatchedEntry

__all__ = [
    "WatchedEntry",
]
