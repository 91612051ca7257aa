"""
Utilitaires partages pour les commandes CLI de Carnet.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container en premier argument
- cli_errors : context manager convertissant les erreurs metier en sortie code 1
- ensure_saved : sortie code 1 si le catalogue n'a pas pu etre ecrit
- parse_list : conversion d'une saisie "a, b, c" en liste
- parse_date_option : conversion d'une date saisie (AAAA-MM-JJ ou JJ/MM/AAAA)
"""

from contextlib import contextmanager
from datetime import date, datetime
from functools import wraps
from typing import Iterator, Optional

import typer
from rich.console import Console

from src.container import Container
from src.core.exceptions import CarnetError, NotFoundError, ValidationError

console = Console()

# Formats de date acceptes en saisie (ISO puis format francais)
_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Usage:
        @with_container()
        def my_command(container, ...):
            library = container.library_service()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


@contextmanager
def cli_errors() -> Iterator[None]:
    """
    Affiche les erreurs metier en rouge et termine la commande avec le code 1.

    Le catalogue n'est jamais modifie par une operation refusee.
    """
    try:
        yield
    except ValidationError as exc:
        console.print(f"[red]Saisie invalide:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except NotFoundError as exc:
        console.print(f"[red]Introuvable:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except CarnetError as exc:
        console.print(f"[red]Erreur:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def ensure_saved(store) -> None:
    """Termine la commande avec le code 1 si la derniere ecriture du catalogue a echoue."""
    if not store.last_save_ok:
        console.print(
            f"[red]Echec d'ecriture:[/red] {store.path} n'a pas ete mis a jour (voir les logs)"
        )
        raise typer.Exit(code=1)


def parse_list(text: Optional[str]) -> list[str]:
    """
    Decoupe une saisie separee par des virgules.

    Les elements vides sont ignores, les espaces de bord retires.
    Ex: "Drame, Crime,," -> ["Drame", "Crime"]
    """
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def parse_date_option(text: Optional[str]) -> Optional[date]:
    """
    Convertit une date saisie (AAAA-MM-JJ ou JJ/MM/AAAA).

    Raises:
        ValidationError: si le format n'est pas reconnu.
    """
    if text is None or not text.strip():
        return None
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text.strip(), fmt).date()
        except ValueError:
            continue
    raise ValidationError(f"Date invalide: '{text}' (formats acceptes: AAAA-MM-JJ, JJ/MM/AAAA)")
