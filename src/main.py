"""
Point d'entrée CLI de Carnet.

Configure le logging et fournit les commandes CLI de gestion du catalogue
(livres, films et séries).
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import (
    add_book,
    add_movie,
    add_season,
    add_series,
    list_media,
    remove,
    review,
    search_media,
    show,
    stats,
)
from .config import Settings
from .container import Container
from .logging_config import configure_from_settings

__version__ = "0.1.0"

app = typer.Typer(
    name="carnet",
    help="Catalogue personnel de livres, films et séries",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Logs détaillés (DEBUG)"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Carnet - Catalogue personnel de livres, films et séries."""
    level_override = "ERROR" if quiet else "DEBUG" if verbose else None
    configure_from_settings(get_config(), level_override)
    logger.debug(f"Démarrage de Carnet v{__version__}")


# Monter les commandes
app.command(name="list")(list_media)
app.command(name="search")(search_media)
app.command()(show)
app.command()(review)
app.command()(remove)
app.command()(stats)
app.command(name="add-book")(add_book)
app.command(name="add-movie")(add_movie)
app.command(name="add-series")(add_series)
app.command(name="add-season")(add_season)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis un container DI neuf."""
    return Container().config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Données : {config.data_dir}")
    typer.echo(f"Années acceptées : {config.min_year} - {config.max_year}")
    typer.echo(f"Années acceptées (livres) : {config.min_book_year} - {config.max_year}")
    typer.echo(f"Durée maximale : {config.max_duration} min")
    typer.echo(f"Historique affiché : {config.review_history_limit} évaluation(s)")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Carnet v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
