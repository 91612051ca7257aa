"""
Catalogue JSON des livres.

Specialise JsonCatalogStore pour les entites Book : fichier
<data_dir>/books.json et codecs book_to_raw / book_from_raw.
"""

from pathlib import Path
from typing import Optional

from src.core.entities.media import Book, MediaKind
from src.infrastructure.persistence.codecs import book_from_raw, book_to_raw
from src.infrastructure.persistence.json_store import JsonCatalogStore
from src.services.validation import MediaValidator


class BookRepository(JsonCatalogStore[Book]):
    """Catalogue des livres, persiste dans un fichier JSON."""

    def __init__(
        self,
        data_dir: Path,
        validator: Optional[MediaValidator] = None,
        autoload: bool = True,
    ) -> None:
        super().__init__(
            kind=MediaKind.BOOK,
            path=Path(data_dir) / MediaKind.BOOK.file_name,
            encoder=book_to_raw,
            decoder=book_from_raw,
            validator=validator,
            autoload=autoload,
        )
