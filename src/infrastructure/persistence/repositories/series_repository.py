"""
Catalogue JSON des series.

Specialise JsonCatalogStore pour les entites Series : fichier
<data_dir>/series.json et codecs series_to_raw / series_from_raw.
"""

from pathlib import Path
from typing import Optional

from src.core.entities.media import MediaKind, Season, Series
from src.core.exceptions import NotFoundError, ValidationError
from src.infrastructure.persistence.codecs import series_from_raw, series_to_raw
from src.infrastructure.persistence.json_store import JsonCatalogStore
from src.services.validation import MediaValidator


class SeriesRepository(JsonCatalogStore[Series]):
    """
    Catalogue des series, persiste dans un fichier JSON.

    Les saisons n'ont pas de catalogue propre : elles sont ajoutees,
    retirees et evaluees a travers leur serie, puis la serie est persistee.
    """

    def __init__(
        self,
        data_dir: Path,
        validator: Optional[MediaValidator] = None,
        autoload: bool = True,
    ) -> None:
        super().__init__(
            kind=MediaKind.SERIES,
            path=Path(data_dir) / MediaKind.SERIES.file_name,
            encoder=series_to_raw,
            decoder=series_from_raw,
            validator=validator,
            autoload=autoload,
        )

    def add_season(self, series_id: int, season: Season) -> Series:
        """
        Ajoute une saison a la serie et persiste.

        Une saison invalide est retiree avant de propager l'erreur.
        """
        series = self.require(series_id)
        series.add_season(season)
        try:
            return self.update(series)
        except ValidationError:
            series.remove_season(season)
            raise

    def remove_season(self, series_id: int, season_number: int) -> Series:
        """
        Retire la saison portant ce numero et persiste.

        Raises:
            NotFoundError: si la serie ou la saison n'existe pas.
            ValidationError: si la serie reste invalide (saisons restaurees).
        """
        series = self.require(series_id)
        previous = series.seasons
        series.remove_season(self.find_season(series, season_number))
        try:
            return self.update(series)
        except ValidationError:
            series.seasons = previous
            raise

    def add_season_review(
        self,
        series_id: int,
        season_number: int,
        rating: int,
        comment: Optional[str] = "",
    ) -> Series:
        """Evalue une saison ; la note de la serie est recalculee a la volee."""
        series = self.require(series_id)
        self.check(series)
        self.find_season(series, season_number).add_review(rating, comment)
        return self.update(series)

    @staticmethod
    def find_season(series: Series, season_number: int) -> Season:
        """
        Retourne la premiere saison portant ce numero.

        Raises:
            NotFoundError: si la serie n'a pas cette saison.
        """
        for season in series.seasons:
            if season.season_number == season_number:
                return season
        raise NotFoundError("Saison", f"{series.id}/{season_number}")
