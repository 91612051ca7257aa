"""
Module de persistance JSON pour Carnet.

Ce module fournit l'infrastructure de stockage des catalogues. Il contient :

- id_allocator.py : Compteur d'identifiants monotone, repris au chargement
- codecs.py : Conversion bidirectionnelle entites <-> dictionnaires JSON
- json_store.py : Catalogue en memoire avec ecriture immediate du fichier
- repositories/ : Un catalogue par type de media (livres, films, series)

Les dictionnaires JSON sont distincts des entites de domaine (dataclass dans
core/entities/). La conversion entre les deux se fait dans codecs.py.

Usage:
    from src.infrastructure.persistence.repositories import BookRepository

    books = BookRepository(data_dir=Path("data"))
    book = books.add(Book(title="1984", release_year=1949))
"""

from src.infrastructure.persistence.id_allocator import IdAllocator
from src.infrastructure.persistence.json_store import JsonCatalogStore

__all__ = [
    "IdAllocator",
    "JsonCatalogStore",
]
