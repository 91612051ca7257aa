"""
Implementations JSON des repositories.

Ce module contient les implementations concretes de l'interface
ICatalogRepository definie dans src/core/ports/repositories.py, utilisant
un fichier JSON par type de media.

Chaque repository :
- Specialise JsonCatalogStore pour un type de media
- Recoit le repertoire de donnees et le validateur via injection de dependances
- Convertit entre entites de domaine (dataclass) et dictionnaires JSON (codecs)
"""

from src.infrastructure.persistence.repositories.book_repository import BookRepository
from src.infrastructure.persistence.repositories.movie_repository import MovieRepository
from src.infrastructure.persistence.repositories.series_repository import SeriesRepository

__all__ = [
    "BookRepository",
    "MovieRepository",
    "SeriesRepository",
]
