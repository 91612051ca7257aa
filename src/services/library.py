"""
Service de bibliotheque unifiant les trois catalogues.

Le LibraryService expose aux surfaces (CLI, interfaces graphiques) une
vue transverse des livres, films et series : listing global, recherche
globale, acces par type et evaluation d'un media.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from src.core.entities.media import CatalogItem, MediaKind, Series
from src.core.entities.review import Review
from src.core.exceptions import ValidationError
from src.infrastructure.persistence.json_store import JsonCatalogStore
from src.infrastructure.persistence.repositories import (
    BookRepository,
    MovieRepository,
    SeriesRepository,
)


@dataclass(frozen=True)
class KindStats:
    """Statistiques d'un catalogue."""

    kind: MediaKind
    total: int
    consumed: int
    rated: int
    average: float


class LibraryService:
    """
    Facade sur les catalogues de livres, films et series.

    Example:
        library = LibraryService(book_repo, movie_repo, series_repo)
        results = library.search_all_media("nolan")
        library.add_review(MediaKind.MOVIE, 3, rating=5, comment="Culte")
    """

    def __init__(
        self,
        book_repository: BookRepository,
        movie_repository: MovieRepository,
        series_repository: SeriesRepository,
    ) -> None:
        self._stores: dict[MediaKind, JsonCatalogStore] = {
            MediaKind.BOOK: book_repository,
            MediaKind.MOVIE: movie_repository,
            MediaKind.SERIES: series_repository,
        }

    @property
    def books(self) -> BookRepository:
        return self._stores[MediaKind.BOOK]

    @property
    def movies(self) -> MovieRepository:
        return self._stores[MediaKind.MOVIE]

    @property
    def series(self) -> SeriesRepository:
        return self._stores[MediaKind.SERIES]

    def store_for(self, kind: MediaKind) -> JsonCatalogStore:
        return self._stores[kind]

    def get_all_media(self) -> list[CatalogItem]:
        """Livres, puis films, puis series, chacun dans son ordre d'ajout."""
        media: list[CatalogItem] = []
        for store in self._stores.values():
            media.extend(store.get_all())
        return media

    def search_all_media(self, criteria: Optional[str]) -> list[CatalogItem]:
        """Recherche sur les trois catalogues ; critere vide = tout."""
        if criteria is None or not criteria.strip():
            return self.get_all_media()
        results: list[CatalogItem] = []
        for store in self._stores.values():
            results.extend(store.search(criteria))
        logger.debug(f"Recherche '{criteria}': {len(results)} resultat(s)")
        return results

    def find(self, kind: MediaKind, item_id: int) -> CatalogItem:
        """
        Recupere un media par type et ID.

        Raises:
            NotFoundError: si le media n'existe pas.
        """
        return self._stores[kind].require(item_id)

    def add_review(
        self,
        kind: MediaKind,
        item_id: int,
        rating: int,
        comment: Optional[str] = "",
        season_number: Optional[int] = None,
    ) -> Review:
        """
        Ajoute une evaluation a un media puis persiste son catalogue.

        Une serie s'evalue par saison : season_number est alors obligatoire.

        Raises:
            ValidationError: note invalide, saison manquante ou media
                stocke invalide (aucune evaluation n'est alors ajoutee).
            NotFoundError: media ou saison introuvable.
        """
        store = self._stores[kind]
        item = store.require(item_id)
        store.check(item)

        if isinstance(item, Series):
            if season_number is None:
                raise ValidationError("Une serie s'evalue par saison (numero de saison requis)")
            season = self.series.find_season(item, season_number)
            review = season.add_review(rating, comment)
        else:
            review = item.add_review(rating, comment)

        store.update(item)
        return review

    def stats(self) -> list[KindStats]:
        """Statistiques par type de media."""
        result = []
        for kind, store in self._stores.items():
            items = store.get_all()
            rated = [item for item in items if item.has_reviews]
            average = (
                sum(item.average_rating() for item in rated) / len(rated) if rated else 0.0
            )
            result.append(
                KindStats(
                    kind=kind,
                    total=len(items),
                    consumed=sum(1 for item in items if item.is_consumed),
                    rated=len(rated),
                    average=average,
                )
            )
        return result
