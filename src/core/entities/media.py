"""
Entites du catalogue : livres, films et series (avec saisons).

Les trois types forment une variante etiquetee (MediaKind) et partagent
la capacite CatalogItem utilisee par la recherche et le tri. Il n'y a
pas de hierarchie de classes : chaque entite porte ses propres champs.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import ClassVar, Optional, Protocol, Union

from src.core.entities.fields import CopiedList
from src.core.entities.review import Review, ReviewInfo


class MediaKind(Enum):
    """Type de media du catalogue, utilise comme etiquette de variante."""

    BOOK = "book"
    MOVIE = "movie"
    SERIES = "series"

    @property
    def label(self) -> str:
        """Libelle lisible du type."""
        return _KIND_LABELS[self]

    @property
    def file_name(self) -> str:
        """Nom du fichier JSON du catalogue de ce type."""
        return _KIND_FILES[self]


_KIND_LABELS = {
    MediaKind.BOOK: "Livre",
    MediaKind.MOVIE: "Film",
    MediaKind.SERIES: "Serie",
}

_KIND_FILES = {
    MediaKind.BOOK: "books.json",
    MediaKind.MOVIE: "movies.json",
    MediaKind.SERIES: "series.json",
}


class CatalogItem(Protocol):
    """
    Capacite commune a tous les medias du catalogue.

    La recherche, les filtres et le tri ne dependent que de cette interface.
    """

    kind: ClassVar[MediaKind]
    id: Optional[int]
    title: str
    original_title: str
    release_year: int

    @property
    def genres(self) -> list[str]: ...

    @property
    def creator_name(self) -> str: ...

    @property
    def is_consumed(self) -> bool: ...

    @property
    def has_reviews(self) -> bool: ...

    def average_rating(self) -> float: ...

    def search_terms(self) -> list[str]: ...


def _default_original_title(title: str, original_title: Optional[str]) -> str:
    """Le titre original reprend le titre quand il est vide."""
    if original_title is None or not original_title.strip():
        return title
    return original_title


@dataclass
class Book:
    """
    Livre du catalogue.

    Attributs :
        id : Identifiant attribue par le catalogue (None avant l'ajout)
        title : Titre
        original_title : Titre original (reprend title si vide)
        genres : Genres ordonnes, doublons autorises
        release_year : Annee de publication
        author : Auteur
        publisher : Editeur
        isbn : ISBN
        has_copy : Possede un exemplaire
        read_status : Lu ou non
        read_date : Date de lecture
        review_info : Historique des evaluations
    """

    kind: ClassVar[MediaKind] = MediaKind.BOOK

    id: Optional[int] = None
    title: str = ""
    original_title: str = ""
    genres: list[str] = CopiedList()
    release_year: int = 0
    author: str = ""
    publisher: str = ""
    isbn: str = ""
    has_copy: bool = False
    read_status: bool = False
    read_date: Optional[date] = None
    review_info: ReviewInfo = field(default_factory=ReviewInfo)

    def __post_init__(self) -> None:
        self.original_title = _default_original_title(self.title, self.original_title)

    @property
    def creator_name(self) -> str:
        return self.author

    @property
    def is_consumed(self) -> bool:
        return self.read_status

    @property
    def has_reviews(self) -> bool:
        return self.review_info.has_reviews

    def add_review(self, rating: int, comment: Optional[str] = "") -> Review:
        return self.review_info.add_review(rating, comment)

    def average_rating(self) -> float:
        return self.review_info.average_rating()

    def search_terms(self) -> list[str]:
        return [
            self.title,
            self.original_title,
            self.author,
            self.isbn,
            *self.genres,
            str(self.release_year),
        ]


@dataclass
class Movie:
    """
    Film du catalogue.

    Attributs :
        id : Identifiant attribue par le catalogue (None avant l'ajout)
        duration : Duree en minutes
        director : Realisateur
        synopsis : Resume
        cast : Distribution principale
        where_to_watch : Plateformes de diffusion
        watched_status : Vu ou non
        watch_date : Date de visionnage
    """

    kind: ClassVar[MediaKind] = MediaKind.MOVIE

    id: Optional[int] = None
    title: str = ""
    original_title: str = ""
    genres: list[str] = CopiedList()
    release_year: int = 0
    duration: int = 0
    director: str = ""
    synopsis: str = ""
    cast: list[str] = CopiedList()
    where_to_watch: list[str] = CopiedList()
    watched_status: bool = False
    watch_date: Optional[date] = None
    review_info: ReviewInfo = field(default_factory=ReviewInfo)

    def __post_init__(self) -> None:
        self.original_title = _default_original_title(self.title, self.original_title)

    @property
    def creator_name(self) -> str:
        return self.director

    @property
    def is_consumed(self) -> bool:
        return self.watched_status

    @property
    def has_reviews(self) -> bool:
        return self.review_info.has_reviews

    def add_review(self, rating: int, comment: Optional[str] = "") -> Review:
        return self.review_info.add_review(rating, comment)

    def average_rating(self) -> float:
        return self.review_info.average_rating()

    def search_terms(self) -> list[str]:
        return [
            self.title,
            self.original_title,
            self.director,
            *self.genres,
            str(self.release_year),
        ]


@dataclass
class Season:
    """
    Saison d'une serie, avec son propre historique d'evaluations.

    Une saison appartient a une seule serie et n'a pas d'existence propre
    dans le catalogue.
    """

    season_number: int = 1
    episodes: int = 0
    release_year: int = 0
    cast: list[str] = CopiedList()
    review_info: ReviewInfo = field(default_factory=ReviewInfo)

    @property
    def has_reviews(self) -> bool:
        return self.review_info.has_reviews

    def add_review(self, rating: int, comment: Optional[str] = "") -> Review:
        return self.review_info.add_review(rating, comment)

    def average_rating(self) -> float:
        return self.review_info.average_rating()


@dataclass
class Series:
    """
    Serie du catalogue.

    La note d'une serie provient exclusivement de ses saisons : seules les
    saisons ayant au moins une evaluation entrent dans la moyenne.

    Attributs :
        creator : Createur de la serie
        end_year : Annee de fin (0 = en cours)
        seasons : Saisons ordonnees (liste copiee, saisons partagees)
    """

    kind: ClassVar[MediaKind] = MediaKind.SERIES

    id: Optional[int] = None
    title: str = ""
    original_title: str = ""
    genres: list[str] = CopiedList()
    release_year: int = 0
    creator: str = ""
    end_year: int = 0
    watched_status: bool = False
    where_to_watch: list[str] = CopiedList()
    cast: list[str] = CopiedList()
    seasons: list[Season] = CopiedList()

    def __post_init__(self) -> None:
        self.original_title = _default_original_title(self.title, self.original_title)

    @property
    def creator_name(self) -> str:
        return self.creator

    @property
    def is_consumed(self) -> bool:
        return self.watched_status

    @property
    def is_ongoing(self) -> bool:
        return self.end_year == 0

    @property
    def has_reviews(self) -> bool:
        return self.rated_seasons_count() > 0

    def add_season(self, season: Optional[Season]) -> None:
        """Ajoute une saison en fin de liste (None est ignore)."""
        if season is None:
            return
        self._seasons.append(season)

    def replace_season(self, index: int, season: Season) -> None:
        """Remplace la saison a la position donnee."""
        self._seasons[index] = season

    def remove_season(self, season: Season) -> bool:
        """Retire une saison (par identite). Retourne True si retiree."""
        for index, current in enumerate(self._seasons):
            if current is season:
                del self._seasons[index]
                return True
        return False

    def rated_seasons_count(self) -> int:
        return sum(1 for season in self._seasons if season.has_reviews)

    def average_rating(self) -> float:
        """Moyenne des moyennes des saisons evaluees, 0.0 si aucune."""
        averages = [season.average_rating() for season in self._seasons if season.has_reviews]
        if not averages:
            return 0.0
        return sum(averages) / len(averages)

    def total_episodes(self) -> int:
        return sum(season.episodes for season in self._seasons)

    def search_terms(self) -> list[str]:
        return [
            self.title,
            self.original_title,
            self.creator,
            *self.genres,
            str(self.release_year),
        ]


Media = Union[Book, Movie, Series]

MEDIA_TYPES: dict[MediaKind, type] = {
    MediaKind.BOOK: Book,
    MediaKind.MOVIE: Movie,
    MediaKind.SERIES: Series,
}
