"""Commande CLI review : ajoute une evaluation a un livre, un film ou une saison."""

from typing import Annotated, Optional

import typer

from src.adapters.cli.helpers import cli_errors, console, ensure_saved, with_container
from src.core.entities.media import MediaKind


def review(
    kind: Annotated[MediaKind, typer.Argument(help="Type de media (book, movie, series)")],
    item_id: Annotated[int, typer.Argument(help="Identifiant du media")],
    rating: Annotated[int, typer.Argument(help="Note entiere de 0 a 5")],
    comment: Annotated[str, typer.Option("--comment", "-c", help="Commentaire libre")] = "",
    season: Annotated[
        Optional[int],
        typer.Option("--season", "-s", help="Numero de saison (obligatoire pour une serie)"),
    ] = None,
) -> None:
    """Ajoute une evaluation (les series s'evaluent par saison)."""
    _review(kind, item_id, rating, comment, season)


@with_container()
def _review(
    container,
    kind: MediaKind,
    item_id: int,
    rating: int,
    comment: str,
    season: Optional[int],
) -> None:
    library = container.library_service()

    with cli_errors():
        library.add_review(kind, item_id, rating, comment, season_number=season)
        item = library.find(kind, item_id)
    ensure_saved(library.store_for(kind))

    target = f"'{item.title}'" if season is None else f"'{item.title}' saison {season}"
    console.print(
        f"[green]Evaluation {rating}/5 ajoutee a {target}.[/green] "
        f"Nouvelle moyenne: {item.average_rating():.1f}/5"
    )
