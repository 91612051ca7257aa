"""
Rendu Rich des medias du catalogue.

Fonctions de construction des tableaux et panneaux affiches par la CLI :
listing, fiche detaillee d'un media, saisons d'une serie, historique des
evaluations et statistiques. Aucune logique metier ici : tout provient
des accesseurs des entites.
"""

from datetime import date
from typing import Iterable, Optional

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from src.core.entities.media import Book, CatalogItem, Movie, Series
from src.core.entities.review import ReviewInfo
from src.services.library import KindStats

_CREATOR_LABELS = {Book: "Auteur", Movie: "Realisateur", Series: "Createur"}


def format_date(value: Optional[date]) -> str:
    """Date au format JJ/MM/AAAA, N/A si absente."""
    if value is None:
        return "N/A"
    return value.strftime("%d/%m/%Y")


def format_list(values: Iterable[str]) -> str:
    joined = ", ".join(values)
    return joined or "N/A"


def format_rating(item: CatalogItem) -> str:
    """Moyenne sur 5 avec une decimale, tiret si non evalue."""
    if not item.has_reviews:
        return "-"
    return f"{item.average_rating():.1f}/5"


def _status(item: CatalogItem) -> str:
    if isinstance(item, Book):
        return "[green]Lu[/green]" if item.is_consumed else "[dim]Non lu[/dim]"
    return "[green]Vu[/green]" if item.is_consumed else "[dim]Non vu[/dim]"


def render_media_table(items: list[CatalogItem], title: str = "Catalogue") -> Table:
    """Tableau de listing, une ligne par media."""
    table = Table(title=f"{title} ({len(items)})", show_header=True, header_style="bold cyan")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="right")
    table.add_column("Auteur / Realisateur / Createur")
    table.add_column("Genres")
    table.add_column("Statut")
    table.add_column("Note", justify="right")

    for item in items:
        table.add_row(
            str(item.id),
            item.kind.label,
            item.title,
            str(item.release_year),
            item.creator_name or "-",
            format_list(item.genres),
            _status(item),
            format_rating(item),
        )
    return table


def render_review_history(review_info: ReviewInfo, limit: int) -> Text:
    """
    Historique des evaluations, plus recentes d'abord, tronque a limit.
    """
    if not review_info.has_reviews:
        return Text("Aucune evaluation enregistree.", style="dim")

    lines = [
        f"Moyenne: {review_info.average_rating():.1f}/5 "
        f"({review_info.review_count()} evaluation(s))"
    ]
    for review in review_info.recent(limit):
        when = review.created_at.strftime("%d/%m/%Y") if review.created_at else "N/A"
        comment = f' "{review.comment}"' if review.comment else ""
        lines.append(f"  - [{review.rating}/5] ({when}){comment}")

    hidden = review_info.review_count() - limit
    if hidden > 0:
        lines.append(f"  ... et {hidden} autre(s) evaluation(s)")
    return Text("\n".join(lines))


def render_seasons_table(series: Series) -> Table:
    table = Table(title="Saisons", show_header=True, header_style="bold cyan")
    table.add_column("Saison", justify="right")
    table.add_column("Annee", justify="right")
    table.add_column("Episodes", justify="right")
    table.add_column("Evaluations", justify="right")
    table.add_column("Moyenne", justify="right")

    for season in series.seasons:
        table.add_row(
            str(season.season_number),
            str(season.release_year or "-"),
            str(season.episodes),
            str(season.review_info.review_count()),
            f"{season.average_rating():.1f}/5" if season.has_reviews else "-",
        )
    return table


def render_media_detail(item: CatalogItem, history_limit: int = 5) -> Panel:
    """Fiche detaillee d'un media (champs specifiques au type compris)."""
    lines = [f"[bold]{item.title}[/bold] ({item.release_year})"]
    if item.original_title and item.original_title.lower() != item.title.lower():
        lines.append(f"Titre original : {item.original_title}")
    lines.append(f"Genres : {format_list(item.genres)}")
    lines.append(f"{_CREATOR_LABELS[type(item)]} : {item.creator_name or 'N/A'}")

    if isinstance(item, Book):
        lines.append(f"Editeur : {item.publisher or 'N/A'}")
        lines.append(f"ISBN : {item.isbn or 'N/A'}")
        lines.append(f"Exemplaire possede : {'oui' if item.has_copy else 'non'}")
        lines.append(f"Statut : {_status(item)}")
        if item.read_status:
            lines.append(f"Lu le : {format_date(item.read_date)}")
    elif isinstance(item, Movie):
        lines.append(f"Duree : {item.duration} min")
        lines.append(f"Synopsis : {item.synopsis or 'N/A'}")
        lines.append(f"Distribution : {format_list(item.cast)}")
        lines.append(f"Ou regarder : {format_list(item.where_to_watch)}")
        lines.append(f"Statut : {_status(item)}")
        if item.watched_status:
            lines.append(f"Vu le : {format_date(item.watch_date)}")
    elif isinstance(item, Series):
        end = "en cours" if item.is_ongoing else str(item.end_year)
        lines.append(f"Diffusion : {item.release_year} - {end}")
        lines.append(f"Distribution : {format_list(item.cast)}")
        lines.append(f"Ou regarder : {format_list(item.where_to_watch)}")
        lines.append(f"Statut : {_status(item)}")
        lines.append(
            f"Note : {format_rating(item)} "
            f"({item.rated_seasons_count()}/{len(item.seasons)} saison(s) evaluee(s))"
        )

    body: list = [Text.from_markup("\n".join(lines))]
    if isinstance(item, Series):
        if item.seasons:
            body.append(render_seasons_table(item))
    else:
        body.append(Text("\nEvaluations", style="bold"))
        body.append(render_review_history(item.review_info, history_limit))

    return Panel(
        Group(*body),
        title=f"[bold cyan]{item.kind.label} #{item.id}[/bold cyan]",
        border_style="cyan",
    )


def render_stats_table(stats: list[KindStats]) -> Table:
    table = Table(title="Statistiques du catalogue", show_header=True, header_style="bold cyan")
    table.add_column("Type", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Lus / vus", justify="right", style="green")
    table.add_column("Evalues", justify="right")
    table.add_column("Moyenne", justify="right")

    for entry in stats:
        table.add_row(
            entry.kind.label,
            str(entry.total),
            str(entry.consumed),
            str(entry.rated),
            f"{entry.average:.2f}" if entry.rated else "-",
        )
    return table
