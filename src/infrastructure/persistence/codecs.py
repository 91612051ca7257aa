"""
Conversion bidirectionnelle entre entites du domaine et dictionnaires JSON.

Format des fichiers :
- cles en snake_case, identiques aux noms des champs des entites
- dates au format ISO-8601 (YYYY-MM-DD), horodatages ISO-8601 complets
- les cles inconnues sont ignorees a la lecture (compatibilite ascendante)

Toute donnee illisible leve PersistenceError ; le catalogue decide alors
de repartir d'une liste vide.
"""

from datetime import date, datetime
from typing import Any, Callable, Optional

from src.core.entities.media import Book, Movie, Season, Series
from src.core.entities.review import Review, ReviewInfo
from src.core.exceptions import PersistenceError, ValidationError

Raw = dict[str, Any]


# ============================================================================
# Helpers de lecture typee
# ============================================================================


def _require_int(raw: Raw, key: str) -> int:
    value = raw.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise PersistenceError(f"Champ '{key}' manquant ou non entier: {value!r}")
    return value


def _int(raw: Raw, key: str, default: int = 0) -> int:
    value = raw.get(key, default)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise PersistenceError(f"Champ '{key}' non entier: {value!r}")
    return value


def _str(raw: Raw, key: str, default: str = "") -> str:
    value = raw.get(key, default)
    if value is None:
        return default
    if not isinstance(value, str):
        raise PersistenceError(f"Champ '{key}' non texte: {value!r}")
    return value


def _bool(raw: Raw, key: str) -> bool:
    value = raw.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise PersistenceError(f"Champ '{key}' non booleen: {value!r}")
    return value


def _str_list(raw: Raw, key: str) -> list[str]:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise PersistenceError(f"Champ '{key}' doit etre une liste de textes: {value!r}")
    return list(value)


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise PersistenceError(f"Date invalide: {value!r}") from exc


def _date_to_str(value: Optional[date]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()


def _parse_datetime(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise PersistenceError(f"Horodatage invalide: {value!r}") from exc


# ============================================================================
# Evaluations
# ============================================================================


def review_from_raw(raw: Raw) -> Review:
    """Convertit un dictionnaire JSON en Review."""
    if not isinstance(raw, dict):
        raise PersistenceError(f"Evaluation invalide: {raw!r}")
    try:
        return Review(
            rating=raw.get("rating"),
            comment=_str(raw, "comment"),
            created_at=_parse_datetime(raw.get("created_at")),
        )
    except ValidationError as exc:
        raise PersistenceError(f"Evaluation invalide: {exc}") from exc


def review_to_raw(review: Review) -> Raw:
    return {
        "rating": review.rating,
        "comment": review.comment,
        "created_at": review.created_at.isoformat() if review.created_at else None,
    }


def review_info_from_raw(raw: Optional[list]) -> ReviewInfo:
    """Reconstruit l'historique en conservant l'ordre d'insertion."""
    if raw is None:
        return ReviewInfo()
    if not isinstance(raw, list):
        raise PersistenceError(f"Historique d'evaluations invalide: {raw!r}")
    return ReviewInfo(review_from_raw(item) for item in raw)


def review_info_to_raw(review_info: ReviewInfo) -> list[Raw]:
    return [review_to_raw(review) for review in review_info.reviews]


# ============================================================================
# Medias
# ============================================================================


def book_from_raw(raw: Raw) -> Book:
    """Convertit un dictionnaire JSON en Book."""
    return Book(
        id=_require_int(raw, "id"),
        title=_str(raw, "title"),
        original_title=_str(raw, "original_title"),
        genres=_str_list(raw, "genres"),
        release_year=_int(raw, "release_year"),
        author=_str(raw, "author"),
        publisher=_str(raw, "publisher"),
        isbn=_str(raw, "isbn"),
        has_copy=_bool(raw, "has_copy"),
        read_status=_bool(raw, "read_status"),
        read_date=_parse_date(raw.get("read_date")),
        review_info=review_info_from_raw(raw.get("reviews")),
    )


def book_to_raw(book: Book) -> Raw:
    """Convertit un Book en dictionnaire JSON."""
    return {
        "id": book.id,
        "title": book.title,
        "original_title": book.original_title,
        "genres": book.genres,
        "release_year": book.release_year,
        "author": book.author,
        "publisher": book.publisher,
        "isbn": book.isbn,
        "has_copy": book.has_copy,
        "read_status": book.read_status,
        "read_date": _date_to_str(book.read_date),
        "reviews": review_info_to_raw(book.review_info),
    }


def movie_from_raw(raw: Raw) -> Movie:
    """Convertit un dictionnaire JSON en Movie."""
    return Movie(
        id=_require_int(raw, "id"),
        title=_str(raw, "title"),
        original_title=_str(raw, "original_title"),
        genres=_str_list(raw, "genres"),
        release_year=_int(raw, "release_year"),
        duration=_int(raw, "duration"),
        director=_str(raw, "director"),
        synopsis=_str(raw, "synopsis"),
        cast=_str_list(raw, "cast"),
        where_to_watch=_str_list(raw, "where_to_watch"),
        watched_status=_bool(raw, "watched_status"),
        watch_date=_parse_date(raw.get("watch_date")),
        review_info=review_info_from_raw(raw.get("reviews")),
    )


def movie_to_raw(movie: Movie) -> Raw:
    """Convertit un Movie en dictionnaire JSON."""
    return {
        "id": movie.id,
        "title": movie.title,
        "original_title": movie.original_title,
        "genres": movie.genres,
        "release_year": movie.release_year,
        "duration": movie.duration,
        "director": movie.director,
        "synopsis": movie.synopsis,
        "cast": movie.cast,
        "where_to_watch": movie.where_to_watch,
        "watched_status": movie.watched_status,
        "watch_date": _date_to_str(movie.watch_date),
        "reviews": review_info_to_raw(movie.review_info),
    }


def season_from_raw(raw: Raw) -> Season:
    if not isinstance(raw, dict):
        raise PersistenceError(f"Saison invalide: {raw!r}")
    return Season(
        season_number=_int(raw, "season_number", default=1),
        episodes=_int(raw, "episodes"),
        release_year=_int(raw, "release_year"),
        cast=_str_list(raw, "cast"),
        review_info=review_info_from_raw(raw.get("reviews")),
    )


def season_to_raw(season: Season) -> Raw:
    return {
        "season_number": season.season_number,
        "episodes": season.episodes,
        "release_year": season.release_year,
        "cast": season.cast,
        "reviews": review_info_to_raw(season.review_info),
    }


def series_from_raw(raw: Raw) -> Series:
    """Convertit un dictionnaire JSON en Series (saisons comprises)."""
    seasons_raw = raw.get("seasons") or []
    if not isinstance(seasons_raw, list):
        raise PersistenceError(f"Liste de saisons invalide: {seasons_raw!r}")
    return Series(
        id=_require_int(raw, "id"),
        title=_str(raw, "title"),
        original_title=_str(raw, "original_title"),
        genres=_str_list(raw, "genres"),
        release_year=_int(raw, "release_year"),
        creator=_str(raw, "creator"),
        end_year=_int(raw, "end_year"),
        watched_status=_bool(raw, "watched_status"),
        where_to_watch=_str_list(raw, "where_to_watch"),
        cast=_str_list(raw, "cast"),
        seasons=[season_from_raw(season) for season in seasons_raw],
    )


def series_to_raw(series: Series) -> Raw:
    """Convertit une Series en dictionnaire JSON."""
    return {
        "id": series.id,
        "title": series.title,
        "original_title": series.original_title,
        "genres": series.genres,
        "release_year": series.release_year,
        "creator": series.creator,
        "end_year": series.end_year,
        "watched_status": series.watched_status,
        "where_to_watch": series.where_to_watch,
        "cast": series.cast,
        "seasons": [season_to_raw(season) for season in series.seasons],
    }


def guarded(decoder: Callable[[Raw], Any]) -> Callable[[Any], Any]:
    """
    Enveloppe un decodeur pour que toute erreur devienne PersistenceError.

    Un element qui n'est pas un objet JSON est lui aussi refuse.
    """

    def decode(raw: Any) -> Any:
        if not isinstance(raw, dict):
            raise PersistenceError(f"Element de catalogue invalide: {raw!r}")
        try:
            return decoder(raw)
        except PersistenceError:
            raise
        except (TypeError, ValueError, ValidationError) as exc:
            raise PersistenceError(f"Element de catalogue invalide: {exc}") from exc

    return decode
