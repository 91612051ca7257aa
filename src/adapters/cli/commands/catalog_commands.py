"""Commandes CLI de consultation du catalogue : list, search, show, remove, stats."""

from typing import Annotated, Optional

import typer

from src.adapters.cli.display import (
    render_media_detail,
    render_media_table,
    render_stats_table,
)
from src.adapters.cli.helpers import cli_errors, console, ensure_saved, with_container
from src.core.entities.media import MediaKind
from src.services.query import SortOption


def list_media(
    kind: Annotated[MediaKind, typer.Argument(help="Type de media (book, movie, series)")],
    genre: Annotated[
        Optional[str],
        typer.Option("--genre", "-g", help="Filtrer par genre (sous-chaine)"),
    ] = None,
    year: Annotated[
        Optional[int],
        typer.Option("--year", "-y", help="Filtrer par annee de sortie exacte"),
    ] = None,
    sort: Annotated[
        int,
        typer.Option(
            "--sort",
            "-s",
            min=0,
            max=2,
            help="Tri : 0 = ordre d'ajout, 1 = meilleures notes, 2 = moins bonnes notes",
        ),
    ] = 0,
) -> None:
    """Liste un catalogue, avec filtres et tri par note."""
    _list_media(kind, genre, year, sort)


@with_container()
def _list_media(
    container,
    kind: MediaKind,
    genre: Optional[str],
    year: Optional[int],
    sort: int,
) -> None:
    library = container.library_service()

    with cli_errors():
        result = library.store_for(kind).listing(genre=genre, year=year, sort=sort)

    for note in result.notes:
        console.print(f"[yellow]{note}[/yellow]")

    if result.is_empty:
        if not result.filtered:
            console.print(f"[dim]Catalogue {kind.label.lower()} vide.[/dim]")
        return

    title = f"{kind.label}s"
    if result.sort is not SortOption.NONE:
        title += f" - {result.sort.label}"
    console.print(render_media_table(result.items, title=title))


def search_media(
    criteria: Annotated[str, typer.Argument(help="Texte recherche (titre, auteur, genre, annee...)")],
    kind: Annotated[
        Optional[MediaKind],
        typer.Option("--kind", "-k", help="Limiter la recherche a un type de media"),
    ] = None,
) -> None:
    """Recherche un texte dans les catalogues."""
    _search_media(criteria, kind)


@with_container()
def _search_media(container, criteria: str, kind: Optional[MediaKind]) -> None:
    library = container.library_service()

    if kind is None:
        results = library.search_all_media(criteria)
    else:
        results = library.store_for(kind).search(criteria)

    if not results:
        console.print(f"[yellow]Aucun resultat pour '{criteria}'.[/yellow]")
        return

    console.print(render_media_table(results, title=f"Resultats pour '{criteria}'"))


def show(
    kind: Annotated[MediaKind, typer.Argument(help="Type de media (book, movie, series)")],
    item_id: Annotated[int, typer.Argument(help="Identifiant du media")],
) -> None:
    """Affiche la fiche detaillee d'un media."""
    _show(kind, item_id)


@with_container()
def _show(container, kind: MediaKind, item_id: int) -> None:
    library = container.library_service()
    config = container.config()

    with cli_errors():
        item = library.find(kind, item_id)

    console.print(render_media_detail(item, history_limit=config.review_history_limit))


def remove(
    kind: Annotated[MediaKind, typer.Argument(help="Type de media (book, movie, series)")],
    item_id: Annotated[int, typer.Argument(help="Identifiant du media")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Ne pas demander de confirmation"),
    ] = False,
) -> None:
    """Supprime un media du catalogue."""
    _remove(kind, item_id, yes)


@with_container()
def _remove(container, kind: MediaKind, item_id: int, yes: bool) -> None:
    library = container.library_service()

    with cli_errors():
        item = library.find(kind, item_id)
        if not yes and not typer.confirm(f"Supprimer '{item.title}' ({kind.label}) ?"):
            console.print("[dim]Suppression annulee.[/dim]")
            return
        library.store_for(kind).remove(item_id)
    ensure_saved(library.store_for(kind))

    console.print(f"[green]{kind.label} '{item.title}' supprime (id={item_id}).[/green]")


def stats() -> None:
    """Affiche les statistiques des catalogues."""
    _stats()


@with_container()
def _stats(container) -> None:
    library = container.library_service()
    console.print(render_stats_table(library.stats()))
