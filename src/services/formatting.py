"""
Mise en forme des reponses du bot.

Toutes les reponses sont envoyees en Markdown (version 1 de Telegram) :
les titres et resumes venant du catalogue ou de l'utilisateur sont
echappes avant insertion.
"""

from collections.abc import Sequence

from telegram.helpers import escape_markdown

from src.core.entities import WatchedEntry
from src.core.ports.api_clients import CatalogResult

# Longueur maximale du resume affiche pour un resultat
OVERVIEW_LIMIT = 100

HELP_TEXT = (
    "Bienvenue dans WatchBot !\n"
    "Commandes :\n"
    "/add - Ajouter un film ou une série vu\n"
    "/list - Afficher votre liste de visionnage\n"
    "/search - Rechercher un film ou une série\n"
    "/top - Top 20 des films et séries de la semaine\n"
    "/update - Mettre à jour l'épisode d'une série"
)
UNKNOWN_COMMAND = "Commande inconnue. Utilisez /add, /list, /search, /top ou /update"

ADD_USAGE = "Indiquez le titre d'un film ou d'une série : /add <titre>"
SEARCH_USAGE = "Indiquez votre recherche : /search <titre>"
UPDATE_USAGE = (
    "Indiquez le titre de la série et le numéro d'épisode : /update <titre> <épisode>"
)

EPISODE_PROMPT = (
    "Veuillez indiquer un numéro d'épisode valide (nombre entier, par exemple 5) :"
)
INVALID_EPISODE = "Indiquez un numéro d'épisode valide (nombre entier, par exemple 5)"

SAVE_ERROR = "Erreur lors de l'enregistrement dans la base de données"
UPDATE_ERROR = "Erreur lors de la mise à jour du numéro d'épisode"
LIST_ERROR = "Erreur lors de la récupération de votre liste"
EMPTY_LIST = "Votre liste de visionnage est vide"
NOT_IN_LIST = "Série introuvable dans votre liste de visionnage"
NOT_A_SHOW = "Ce n'est pas une série. Utilisez /update uniquement pour les séries"

TOP_MOVIES_ERROR = "Erreur lors de la récupération des films populaires"
TOP_SHOWS_ERROR = "Erreur lors de la récupération des séries populaires"
TOP_EMPTY = "Aucun film ni série populaire trouvé"


def md(text: str) -> str:
    """Echappe les caracteres speciaux Markdown d'un texte libre."""
    return escape_markdown(text or "", version=1)


def truncate(text: str, limit: int = OVERVIEW_LIMIT) -> str:
    """Coupe un texte a `limit` caracteres en ajoutant '...'."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def not_found(query: str) -> str:
    return f"Aucun résultat pour : {md(query)}"


def show_prompt(title: str) -> str:
    """Question posee apres le choix d'une serie dans /add."""
    return (
        f"Vous ajoutez la série *{md(title)}*. "
        "Indiquez le numéro du dernier épisode vu (par exemple 5) :"
    )


def movie_added(title: str) -> str:
    return f"*{md(title)}* (film) ajouté à votre liste de visionnage !"


def show_added(title: str, episode: int) -> str:
    return f"*{md(title)}* (série, épisode {episode}) ajouté à votre liste de visionnage !"


def episode_updated(title: str, episode: int) -> str:
    return f"Mis à jour : *{md(title)}* (série, épisode {episode})"


def format_watched_line(index: int, entry: WatchedEntry) -> str:
    """Une ligne de /list, numerotee a partir de 1."""
    watched_on = entry.watched_at.strftime("%Y-%m-%d")
    if entry.is_show:
        return (
            f"{index}. *{md(entry.title)}* (série, épisode {entry.current_episode})"
            f" - vu le {watched_on}"
        )
    return f"{index}. *{md(entry.title)}* (film) - vu le {watched_on}"


def format_watched_list(entries: Sequence[WatchedEntry]) -> str:
    """
    Construit la reponse de /list.

    Une liste vide donne le message fixe EMPTY_LIST.
    """
    if not entries:
        return EMPTY_LIST
    lines = ["Votre liste de visionnage :"]
    lines.extend(
        format_watched_line(index, entry) for index, entry in enumerate(entries, start=1)
    )
    return "\n".join(lines)


def format_catalog_result(index: int, result: CatalogResult) -> str:
    """Legende d'un resultat de /search ou /top."""
    date = result.release_date or "date inconnue"
    overview = md(truncate(result.overview))
    return f"{index}. *{md(result.title)}* ({result.kind.label}, {date}) - {overview}"
