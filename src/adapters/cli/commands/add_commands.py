"""
Commandes CLI d'ajout : add-book, add-movie, add-series, add-season.

Les valeurs multiples (genres, distribution, plateformes) se saisissent
separees par des virgules. L'identifiant est attribue par le catalogue.
"""

from typing import Annotated, Optional

import typer

from src.adapters.cli.helpers import (
    cli_errors,
    console,
    ensure_saved,
    parse_date_option,
    parse_list,
    with_container,
)
from src.core.entities.media import Book, Movie, Season, Series


def add_book(
    title: Annotated[str, typer.Argument(help="Titre du livre")],
    year: Annotated[int, typer.Option("--year", "-y", help="Annee de publication")],
    author: Annotated[str, typer.Option("--author", "-a", help="Auteur")] = "",
    original_title: Annotated[
        str, typer.Option("--original-title", help="Titre original (defaut: titre)")
    ] = "",
    genres: Annotated[
        Optional[str], typer.Option("--genres", "-g", help="Genres separes par des virgules")
    ] = None,
    publisher: Annotated[str, typer.Option("--publisher", help="Editeur")] = "",
    isbn: Annotated[str, typer.Option("--isbn", help="ISBN")] = "",
    has_copy: Annotated[
        bool, typer.Option("--has-copy/--no-copy", help="Possede un exemplaire")
    ] = False,
    read: Annotated[bool, typer.Option("--read/--unread", help="Deja lu")] = False,
    read_date: Annotated[
        Optional[str], typer.Option("--read-date", help="Date de lecture (AAAA-MM-JJ)")
    ] = None,
) -> None:
    """Ajoute un livre au catalogue."""
    _add_book(
        title=title,
        original_title=original_title,
        release_year=year,
        author=author,
        genres=genres,
        publisher=publisher,
        isbn=isbn,
        has_copy=has_copy,
        read_status=read,
        read_date=read_date,
    )


@with_container()
def _add_book(container, genres: Optional[str], read_date: Optional[str], **fields) -> None:
    store = container.library_service().books
    with cli_errors():
        book = Book(genres=parse_list(genres), read_date=parse_date_option(read_date), **fields)
        store.add(book)
    ensure_saved(store)
    console.print(f"[green]Livre '{book.title}' ajoute (id={book.id}).[/green]")


def add_movie(
    title: Annotated[str, typer.Argument(help="Titre du film")],
    year: Annotated[int, typer.Option("--year", "-y", help="Annee de sortie")],
    director: Annotated[str, typer.Option("--director", "-d", help="Realisateur")] = "",
    original_title: Annotated[
        str, typer.Option("--original-title", help="Titre original (defaut: titre)")
    ] = "",
    genres: Annotated[
        Optional[str], typer.Option("--genres", "-g", help="Genres separes par des virgules")
    ] = None,
    duration: Annotated[
        int, typer.Option("--duration", help="Duree en minutes (0 = inconnue)")
    ] = 0,
    synopsis: Annotated[str, typer.Option("--synopsis", help="Resume")] = "",
    cast: Annotated[
        Optional[str], typer.Option("--cast", help="Acteurs separes par des virgules")
    ] = None,
    where_to_watch: Annotated[
        Optional[str], typer.Option("--where", help="Plateformes separees par des virgules")
    ] = None,
    watched: Annotated[bool, typer.Option("--watched/--unwatched", help="Deja vu")] = False,
    watch_date: Annotated[
        Optional[str], typer.Option("--watch-date", help="Date de visionnage (AAAA-MM-JJ)")
    ] = None,
) -> None:
    """Ajoute un film au catalogue."""
    _add_movie(
        title=title,
        original_title=original_title,
        release_year=year,
        director=director,
        genres=genres,
        duration=duration,
        synopsis=synopsis,
        cast=cast,
        where_to_watch=where_to_watch,
        watched_status=watched,
        watch_date=watch_date,
    )


@with_container()
def _add_movie(
    container,
    genres: Optional[str],
    cast: Optional[str],
    where_to_watch: Optional[str],
    watch_date: Optional[str],
    **fields,
) -> None:
    store = container.library_service().movies
    with cli_errors():
        movie = Movie(
            genres=parse_list(genres),
            cast=parse_list(cast),
            where_to_watch=parse_list(where_to_watch),
            watch_date=parse_date_option(watch_date),
            **fields,
        )
        store.add(movie)
    ensure_saved(store)
    console.print(f"[green]Film '{movie.title}' ajoute (id={movie.id}).[/green]")


def add_series(
    title: Annotated[str, typer.Argument(help="Titre de la serie")],
    year: Annotated[int, typer.Option("--year", "-y", help="Annee de debut")],
    creator: Annotated[str, typer.Option("--creator", "-c", help="Createur")] = "",
    original_title: Annotated[
        str, typer.Option("--original-title", help="Titre original (defaut: titre)")
    ] = "",
    genres: Annotated[
        Optional[str], typer.Option("--genres", "-g", help="Genres separes par des virgules")
    ] = None,
    end_year: Annotated[
        int, typer.Option("--end-year", help="Annee de fin (0 = en cours)")
    ] = 0,
    cast: Annotated[
        Optional[str], typer.Option("--cast", help="Acteurs separes par des virgules")
    ] = None,
    where_to_watch: Annotated[
        Optional[str], typer.Option("--where", help="Plateformes separees par des virgules")
    ] = None,
    watched: Annotated[bool, typer.Option("--watched/--unwatched", help="Deja vue")] = False,
    seasons: Annotated[
        int, typer.Option("--seasons", help="Nombre de saisons a creer (numerotees a partir de 1)")
    ] = 0,
) -> None:
    """Ajoute une serie au catalogue."""
    _add_series(
        title=title,
        original_title=original_title,
        release_year=year,
        creator=creator,
        genres=genres,
        end_year=end_year,
        cast=cast,
        where_to_watch=where_to_watch,
        watched_status=watched,
        season_count=seasons,
    )


@with_container()
def _add_series(
    container,
    genres: Optional[str],
    cast: Optional[str],
    where_to_watch: Optional[str],
    season_count: int,
    **fields,
) -> None:
    store = container.library_service().series
    with cli_errors():
        series = Series(
            genres=parse_list(genres),
            cast=parse_list(cast),
            where_to_watch=parse_list(where_to_watch),
            **fields,
        )
        for number in range(1, season_count + 1):
            series.add_season(Season(season_number=number))
        store.add(series)
    ensure_saved(store)
    console.print(
        f"[green]Serie '{series.title}' ajoutee (id={series.id}, "
        f"{len(series.seasons)} saison(s)).[/green]"
    )


def add_season(
    series_id: Annotated[int, typer.Argument(help="Identifiant de la serie")],
    number: Annotated[int, typer.Argument(help="Numero de la saison")],
    episodes: Annotated[int, typer.Option("--episodes", "-e", help="Nombre d'episodes")] = 0,
    year: Annotated[int, typer.Option("--year", "-y", help="Annee de diffusion (0 = inconnue)")] = 0,
    cast: Annotated[
        Optional[str], typer.Option("--cast", help="Acteurs separes par des virgules")
    ] = None,
) -> None:
    """Ajoute une saison a une serie existante."""
    _add_season(series_id, number, episodes, year, cast)


@with_container()
def _add_season(
    container,
    series_id: int,
    number: int,
    episodes: int,
    year: int,
    cast: Optional[str],
) -> None:
    store = container.library_service().series
    season = Season(season_number=number, episodes=episodes, release_year=year, cast=parse_list(cast))
    with cli_errors():
        series = store.add_season(series_id, season)
    ensure_saved(store)
    console.print(
        f"[green]Saison {number} ajoutee a '{series.title}' "
        f"({len(series.seasons)} saison(s)).[/green]"
    )
