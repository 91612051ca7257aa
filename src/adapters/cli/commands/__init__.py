"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.add_commands import (
    add_book,
    add_movie,
    add_season,
    add_series,
)
from src.adapters.cli.commands.catalog_commands import (
    list_media,
    remove,
    search_media,
    show,
    stats,
)
from src.adapters.cli.commands.review_commands import (
    review,
)

__all__ = [
    # catalogue
    "list_media",
    "search_media",
    "show",
    "remove",
    "stats",
    # ajout
    "add_book",
    "add_movie",
    "add_series",
    "add_season",
    # evaluation
    "review",
]
