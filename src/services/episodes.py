"""
Validation des numeros d'episode saisis par l'utilisateur.
"""

import re

from src.core.exceptions import EpisodeValidationError

_EPISODE_PATTERN = re.compile(r"^\+?[0-9]+$")

# Plus grand entier stockable dans une colonne INTEGER SQLite (64 bits signe)
MAX_EPISODE = 2**63 - 1


def parse_episode_number(raw_value: str) -> int:
    """
    Convertit la saisie utilisateur en numero d'episode.

    Accepte un entier entre 0 et MAX_EPISODE, espaces autour toleres.

    Raises:
        EpisodeValidationError: Si la saisie n'est pas un entier dans cet intervalle
    """
    value = (raw_value or "").strip()
    if not _EPISODE_PATTERN.match(value):
        raise EpisodeValidationError(raw_value)
    try:
        episode = int(value)
    except ValueError as e:
        # Au-dela de la limite de conversion des chaines en entiers
        raise EpisodeValidationError(raw_value) from e
    if episode > MAX_EPISODE:
        raise EpisodeValidationError(raw_value)
    return episode
