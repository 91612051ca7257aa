"""
Catalogue JSON des films.

Specialise JsonCatalogStore pour les entites Movie : fichier
<data_dir>/movies.json et codecs movie_to_raw / movie_from_raw.
"""

from pathlib import Path
from typing import Optional

from src.core.entities.media import Movie, MediaKind
from src.infrastructure.persistence.codecs import movie_from_raw, movie_to_raw
from src.infrastructure.persistence.json_store import JsonCatalogStore
from src.services.validation import MediaValidator


class MovieRepository(JsonCatalogStore[Movie]):
    """Catalogue des films, persiste dans un fichier JSON."""

    def __init__(
        self,
        data_dir: Path,
        validator: Optional[MediaValidator] = None,
        autoload: bool = True,
    ) -> None:
        super().__init__(
            kind=MediaKind.MOVIE,
            path=Path(data_dir) / MediaKind.MOVIE.file_name,
            encoder=movie_to_raw,
            decoder=movie_from_raw,
            validator=validator,
            autoload=autoload,
        )
