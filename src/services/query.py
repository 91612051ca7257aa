"""
Moteur de requetes du catalogue : recherche, filtres et tri par note.

Fonctions pures operant sur des listes de CatalogItem : elles retournent
toujours une nouvelle liste et ne modifient jamais la liste d'entree.

Responsabilites:
- Recherche plein texte insensible a la casse
- Pipeline de filtres genre puis annee, chaque etape facultative
- Tri meilleurs/pires evalues, les medias non evalues ou non consommes
  n'etant jamais classes comme meilleurs ni comme pires par accident
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Optional, TypeVar, Union

from loguru import logger

from src.core.entities.media import CatalogItem
from src.core.exceptions import ValidationError

T = TypeVar("T", bound=CatalogItem)


class SortOption(IntEnum):
    """Options de tri des listings."""

    NONE = 0  # ordre d'insertion du catalogue
    BEST_FIRST = 1
    WORST_FIRST = 2

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]


_SORT_LABELS = {
    SortOption.NONE: "Sans tri (ordre d'ajout)",
    SortOption.BEST_FIRST: "Meilleures notes d'abord",
    SortOption.WORST_FIRST: "Moins bonnes notes d'abord",
}


@dataclass
class FilterOutcome:
    """Resultat du pipeline de filtres, avec les etapes vides signalees."""

    items: list = field(default_factory=list)
    notes: list[str] = field(default_factory=list)
    filtered: bool = False


@dataclass
class ListingResult:
    """Resultat d'un listing complet (filtres puis tri)."""

    items: list = field(default_factory=list)
    notes: list[str] = field(default_factory=list)
    filtered: bool = False
    sort: SortOption = SortOption.NONE

    @property
    def is_empty(self) -> bool:
        return not self.items


def search(items: Iterable[T], criteria: Optional[str]) -> list[T]:
    """
    Recherche insensible a la casse sur les champs textuels d'un media.

    Les champs testes sont ceux de search_terms() : titre, titre original,
    auteur/realisateur/createur, ISBN (livres), genres et annee.

    Args:
        items: Medias a parcourir
        criteria: Texte recherche ; vide ou None retourne une copie de items

    Returns:
        Nouvelle liste des medias correspondants, dans l'ordre d'origine
    """
    if criteria is None or not criteria.strip():
        return list(items)

    needle = criteria.strip().lower()
    return [
        item
        for item in items
        if any(needle in (term or "").lower() for term in item.search_terms())
    ]


def filter_by_genre(items: Iterable[T], genre: str) -> list[T]:
    """Garde les medias dont un genre contient le texte (insensible a la casse)."""
    needle = genre.strip().lower()
    return [item for item in items if any(needle in g.lower() for g in item.genres)]


def filter_by_year(items: Iterable[T], year: int) -> list[T]:
    """Garde les medias dont l'annee de sortie est exactement year."""
    return [item for item in items if item.release_year == year]


def apply_filters(
    items: Iterable[T],
    genre: Optional[str] = None,
    year: Optional[int] = None,
) -> FilterOutcome:
    """
    Applique le filtre genre puis le filtre annee.

    Chaque etape est ignoree si son critere est absent (genre vide, annee
    None ou <= 0). Une etape qui vide la liste est signalee dans notes,
    mais le resultat continue vers l'etape suivante.
    """
    outcome = FilterOutcome(items=list(items))

    if genre is not None and genre.strip():
        outcome.items = filter_by_genre(outcome.items, genre)
        outcome.filtered = True
        if not outcome.items:
            note = f"Aucun media trouve pour le genre '{genre.strip()}'"
            logger.info(note)
            outcome.notes.append(note)

    if year is not None and year > 0:
        outcome.items = filter_by_year(outcome.items, year)
        outcome.filtered = True
        if not outcome.items:
            note = f"Aucun media trouve pour l'annee {year}"
            logger.info(note)
            outcome.notes.append(note)

    return outcome


def _is_ranked(item: CatalogItem) -> bool:
    """Un media n'est classe que s'il est consomme et evalue."""
    return item.is_consumed and item.has_reviews


def best_first_key(item: CatalogItem) -> float:
    return item.average_rating() if _is_ranked(item) else -1.0


def worst_first_key(item: CatalogItem) -> tuple[bool, float]:
    # Les non classes passent en tete, a l'oppose du tri BEST_FIRST
    if not _is_ranked(item):
        return (False, 0.0)
    return (True, item.average_rating())


def parse_sort_option(option: Union[SortOption, int]) -> SortOption:
    """Convertit un entier (0, 1, 2) en SortOption."""
    try:
        return SortOption(option)
    except ValueError:
        raise ValidationError(f"Option de tri invalide: {option!r}") from None


def sort_by_rating(items: Iterable[T], option: Union[SortOption, int] = SortOption.NONE) -> list[T]:
    """
    Trie les medias selon la note moyenne (tri stable).

    - NONE : ordre d'origine
    - BEST_FIRST : moyenne decroissante, non classes en fin de liste
    - WORST_FIRST : non classes en tete, puis moyenne croissante

    Raises:
        ValidationError: si l'option est inconnue.
    """
    sort_option = parse_sort_option(option)
    result = list(items)
    if sort_option is SortOption.BEST_FIRST:
        result.sort(key=best_first_key, reverse=True)
    elif sort_option is SortOption.WORST_FIRST:
        result.sort(key=worst_first_key)
    return result


def list_catalog(
    items: Iterable[T],
    genre: Optional[str] = None,
    year: Optional[int] = None,
    sort: Union[SortOption, int] = SortOption.NONE,
) -> ListingResult:
    """Listing complet : pipeline de filtres puis tri par note."""
    sort_option = parse_sort_option(sort)
    outcome = apply_filters(items, genre=genre, year=year)
    return ListingResult(
        items=sort_by_rating(outcome.items, sort_option),
        notes=outcome.notes,
        filtered=outcome.filtered,
        sort=sort_option,
    )
