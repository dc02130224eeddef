"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- MediaKind : Type de media (MOVIE, SHOW)
"""

from src.core.value_objects.media_kind import MediaKind

__all__ = [
    "MediaKind",
]
