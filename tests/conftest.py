"""
Fixtures pytest partagees pour les tests Carnet.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Entites d'exemple (livre, film, serie)
- Repositories JSON isoles dans un repertoire temporaire
"""

from pathlib import Path

import pytest

from src.config import Settings
from src.core.entities.media import Book, Movie, Season, Series
from src.infrastructure.persistence.repositories import (
    BookRepository,
    MovieRepository,
    SeriesRepository,
)
from src.services.library import LibraryService
from src.services.validation import MediaValidator


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler les catalogues et les logs
    de chaque test.
    """
    return Settings(
        data_dir=tmp_path / "data",
        log_file=tmp_path / "logs" / "carnet.log",
        log_level="DEBUG",
    )


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Repertoire de donnees temporaire (non cree : le store le cree a la sauvegarde)."""
    return tmp_path / "data"


@pytest.fixture
def validator() -> MediaValidator:
    return MediaValidator(min_year=1888, max_year=2030, max_duration=900)


@pytest.fixture
def book_repo(data_dir: Path, validator: MediaValidator) -> BookRepository:
    return BookRepository(data_dir, validator=validator)


@pytest.fixture
def movie_repo(data_dir: Path, validator: MediaValidator) -> MovieRepository:
    return MovieRepository(data_dir, validator=validator)


@pytest.fixture
def series_repo(data_dir: Path, validator: MediaValidator) -> SeriesRepository:
    return SeriesRepository(data_dir, validator=validator)


@pytest.fixture
def library(book_repo, movie_repo, series_repo) -> LibraryService:
    return LibraryService(book_repo, movie_repo, series_repo)


@pytest.fixture
def sample_book() -> Book:
    """Livre d'exemple sans identifiant."""
    return Book(
        title="1984",
        genres=["Dystopie", "Science-fiction"],
        release_year=1949,
        author="George Orwell",
        publisher="Secker & Warburg",
        isbn="978-0451524935",
        has_copy=True,
    )


@pytest.fixture
def sample_movie() -> Movie:
    """Film d'exemple sans identifiant."""
    return Movie(
        title="Le Parrain",
        original_title="The Godfather",
        genres=["Drame", "Crime"],
        release_year=1972,
        duration=175,
        director="Francis Ford Coppola",
        cast=["Marlon Brando", "Al Pacino"],
        where_to_watch=["Netflix"],
    )


@pytest.fixture
def sample_series() -> Series:
    """Serie d'exemple avec deux saisons, sans identifiant."""
    series = Series(
        title="Breaking Bad",
        genres=["Drame", "Thriller"],
        release_year=2008,
        creator="Vince Gilligan",
        end_year=2013,
    )
    series.add_season(Season(season_number=1, episodes=7, release_year=2008))
    series.add_season(Season(season_number=2, episodes=13, release_year=2009))
    return series
