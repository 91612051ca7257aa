"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.
They encapsulate business rules and behavior.

Exports:
- Book, Movie, Series: catalog variants tagged by MediaKind
- Season: a sub-unit of a Series with its own review history
- Review, ReviewInfo: append-only review history and its statistics
- CatalogItem: capability shared by every catalog variant
"""

from src.core.entities.media import (
    MEDIA_TYPES,
    Book,
    CatalogItem,
    Media,
    MediaKind,
    Movie,
    Season,
    Series,
)
from src.core.entities.review import MAX_RATING, MIN_RATING, Review, ReviewInfo, check_rating

__all__ = [
    "MEDIA_TYPES",
    "Book",
    "CatalogItem",
    "Media",
    "MediaKind",
    "Movie",
    "Season",
    "Series",
    "Review",
    "ReviewInfo",
    "check_rating",
    "MIN_RATING",
    "MAX_RATING",
]
