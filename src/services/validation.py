"""
Validation des champs des medias avant toute mutation du catalogue.

Le MediaValidator centralise les regles de saisie (titre obligatoire,
bornes d'annees, duree) dans un service reutilisable par le CLI et
toute autre surface. Les bornes proviennent de la configuration.
"""

from typing import Optional

from src.core.entities.media import Book, Movie, Season, Series
from src.core.exceptions import ValidationError

# Bornes par defaut (premier film connu : 1888 ; un livre peut etre ancien)
DEFAULT_MIN_YEAR = 1888
DEFAULT_MIN_BOOK_YEAR = 0
DEFAULT_MAX_DURATION = 900


class MediaValidator:
    """
    Service de validation des entites du catalogue.

    Example:
        validator = MediaValidator(min_year=1888, max_year=2031, min_book_year=0)
        validator.validate(book)  # leve ValidationError si invalide
    """

    def __init__(
        self,
        min_year: int = DEFAULT_MIN_YEAR,
        max_year: Optional[int] = None,
        max_duration: int = DEFAULT_MAX_DURATION,
        min_book_year: int = DEFAULT_MIN_BOOK_YEAR,
    ) -> None:
        """
        Initialise le validateur.

        Args:
            min_year: Annee minimale acceptee (incluse)
            max_year: Annee maximale acceptee (incluse), sans limite si None
            max_duration: Duree maximale d'un film en minutes
            min_book_year: Annee minimale d'un livre (incluse)
        """
        if max_year is not None and max_year < min_year:
            raise ValueError("max_year doit etre superieur ou egal a min_year")
        self._min_year = min_year
        self._max_year = max_year
        self._max_duration = max_duration
        self._min_book_year = min_book_year

    @property
    def min_year(self) -> int:
        return self._min_year

    @property
    def min_book_year(self) -> int:
        return self._min_book_year

    @property
    def max_year(self) -> Optional[int]:
        return self._max_year

    def validate(self, item: object) -> None:
        """
        Valide un media selon son type.

        Raises:
            ValidationError: au premier champ invalide rencontre.
        """
        if isinstance(item, Book):
            self.check_required(item.title, "title")
            self.check_year(item.release_year, minimum=self._min_book_year)
        elif isinstance(item, Movie):
            self._validate_common(item.title, item.release_year)
            self.check_duration(item.duration)
        elif isinstance(item, Series):
            self._validate_common(item.title, item.release_year)
            self._validate_series(item)
        else:
            raise ValidationError(f"Type de media non supporte: {type(item).__name__}")

    def check_required(self, value: Optional[str], field_name: str) -> str:
        """Verifie qu'un champ texte obligatoire n'est pas vide."""
        if value is None or not str(value).strip():
            raise ValidationError(f"Le champ '{field_name}' est obligatoire")
        return value

    def check_year(
        self,
        year: object,
        field_name: str = "release_year",
        minimum: Optional[int] = None,
    ) -> int:
        """
        Verifie qu'une annee est un entier dans les bornes configurees.

        minimum remplace la borne basse generale (livres).
        """
        lower = self._min_year if minimum is None else minimum
        if isinstance(year, bool) or not isinstance(year, int):
            raise ValidationError(f"'{field_name}' doit etre un entier, recu {year!r}")
        if year < lower or (self._max_year is not None and year > self._max_year):
            upper = self._max_year if self._max_year is not None else "..."
            raise ValidationError(
                f"'{field_name}' hors limites ({lower}-{upper}): {year}"
            )
        return year

    def check_duration(self, duration: object) -> int:
        """Verifie une duree en minutes (0 = non renseignee)."""
        if isinstance(duration, bool) or not isinstance(duration, int):
            raise ValidationError(f"La duree doit etre un entier, recu {duration!r}")
        if not 0 <= duration <= self._max_duration:
            raise ValidationError(
                f"La duree doit etre comprise entre 0 et {self._max_duration} minutes: {duration}"
            )
        return duration

    def _validate_common(self, title: str, release_year: int) -> None:
        self.check_required(title, "title")
        self.check_year(release_year)

    def _validate_series(self, series: Series) -> None:
        if series.end_year != 0:
            self.check_year(series.end_year, "end_year")
            if series.end_year < series.release_year:
                raise ValidationError(
                    f"L'annee de fin ({series.end_year}) precede l'annee de debut "
                    f"({series.release_year})"
                )
        for season in series.seasons:
            self._validate_season(season)

    def _validate_season(self, season: Season) -> None:
        if season.season_number < 1:
            raise ValidationError(f"Numero de saison invalide: {season.season_number}")
        if season.episodes < 0:
            raise ValidationError(f"Nombre d'episodes invalide: {season.episodes}")
        # Annee de saison facultative (0 = non renseignee)
        if season.release_year != 0:
            self.check_year(season.release_year, "season.release_year")
