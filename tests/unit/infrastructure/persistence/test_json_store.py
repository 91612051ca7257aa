"""
Tests pour JsonCatalogStore et les repositories par type de media.

Utilise des fichiers reels dans tmp_path : chargement tolerant, ecriture
immediate a chaque mutation, reprise des identifiants.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from src.core.entities.media import Book, MediaKind, Movie, Season
from src.core.exceptions import NotFoundError, ValidationError
from src.infrastructure.persistence.repositories import (
    BookRepository,
    MovieRepository,
    SeriesRepository,
)


def _read(path: Path) -> list:
    return json.loads(path.read_text(encoding="utf-8"))


class TestLoad:
    """Chargement tolerant : tout probleme donne un catalogue vide."""

    def test_missing_file_gives_empty_catalog(self, data_dir):
        repo = BookRepository(data_dir)
        assert repo.get_all() == []
        assert repo.next_id == 1
        assert not repo.path.exists()

    def test_empty_file(self, data_dir):
        data_dir.mkdir()
        (data_dir / "books.json").write_text("  \n", encoding="utf-8")
        assert BookRepository(data_dir).get_all() == []

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            '{"id": 1}',
            '[{"id": 1, "title": "A"}, 42]',
            '[{"id": 1, "title": "A", "reviews": [{"rating": 12}]}]',
        ],
    )
    def test_corrupt_file_gives_empty_catalog(self, data_dir, content):
        """Un seul element illisible et tout le fichier est ignore."""
        data_dir.mkdir()
        (data_dir / "books.json").write_text(content, encoding="utf-8")
        repo = BookRepository(data_dir)
        assert repo.get_all() == []
        assert repo.next_id == 1

    def test_duplicate_ids_rejected(self, data_dir):
        data_dir.mkdir()
        (data_dir / "movies.json").write_text(
            '[{"id": 1, "title": "A"}, {"id": 1, "title": "B"}]', encoding="utf-8"
        )
        assert MovieRepository(data_dir).get_all() == []

    def test_ids_resume_after_max(self, data_dir):
        data_dir.mkdir()
        (data_dir / "books.json").write_text(
            '[{"id": 3, "title": "A"}, {"id": 9, "title": "B"}, {"id": 5, "title": "C"}]',
            encoding="utf-8",
        )
        repo = BookRepository(data_dir)
        assert [b.id for b in repo.get_all()] == [3, 9, 5]
        assert repo.add(Book(title="D", release_year=2000)).id == 10

    def test_autoload_disabled(self, data_dir):
        repo = BookRepository(data_dir, autoload=False)
        repo.add(Book(title="A", release_year=2000))
        other = BookRepository(data_dir, autoload=False)
        assert other.get_all() == []
        other.load()
        assert len(other) == 1


class TestMutations:
    """Chaque mutation reecrit immediatement le fichier."""

    def test_add_assigns_ids_and_persists(self, book_repo, sample_book):
        first = book_repo.add(sample_book)
        second = book_repo.add(Book(title="Dune", release_year=1965))

        assert (first.id, second.id) == (1, 2)
        raw = _read(book_repo.path)
        assert [entry["title"] for entry in raw] == ["1984", "Dune"]

    def test_file_is_indented_utf8(self, book_repo):
        book_repo.add(Book(title="L'Étranger", release_year=1942, author="Albert Camus"))
        text = book_repo.path.read_text(encoding="utf-8")
        assert "L'Étranger" in text
        assert '\n  {' in text

    def test_reload_restores_state(self, data_dir, book_repo, sample_book):
        book_repo.add(sample_book)
        sample_book.add_review(5, "Relu")
        book_repo.update(sample_book)

        reloaded = BookRepository(data_dir)
        book = reloaded.get_by_id(1)
        assert book == sample_book
        assert book.review_info.last_rating() == 5

    def test_add_rejects_taken_id(self, book_repo):
        book_repo.add(Book(title="A", release_year=2000))
        with pytest.raises(ValidationError):
            book_repo.add(Book(id=1, title="B", release_year=2000))
        assert len(book_repo) == 1

    def test_add_keeps_explicit_id_and_advances_counter(self, book_repo):
        book_repo.add(Book(id=20, title="A", release_year=2000))
        assert book_repo.add(Book(title="B", release_year=2000)).id == 21

    def test_add_invalid_leaves_catalog_untouched(self, book_repo):
        with pytest.raises(ValidationError):
            book_repo.add(Book(title="", release_year=2000))
        assert book_repo.get_all() == []
        assert not book_repo.path.exists()
        assert book_repo.next_id == 1

    def test_add_book_before_first_film(self, book_repo):
        """Les livres ne sont pas soumis a la borne basse des films."""
        book = book_repo.add(Book(title="Don Quichotte", release_year=1605))
        assert _read(book_repo.path)[0]["release_year"] == 1605
        assert book.id == 1

    def test_ids_never_reused_after_removal(self, book_repo):
        book_repo.add(Book(title="A", release_year=2000))
        book_repo.add(Book(title="B", release_year=2000))
        book_repo.remove(2)
        assert book_repo.add(Book(title="C", release_year=2000)).id == 3

    def test_update_unknown_id(self, book_repo):
        with pytest.raises(NotFoundError) as excinfo:
            book_repo.update(Book(id=99, title="X", release_year=2000))
        assert excinfo.value.item_id == 99

    def test_update_invalid_is_rejected(self, book_repo, sample_book):
        book_repo.add(sample_book)
        changed = Book(id=sample_book.id, title="1984", release_year=2100)
        with pytest.raises(ValidationError):
            book_repo.update(changed)
        assert book_repo.get_by_id(1).release_year == 1949

    def test_remove_by_item_or_id(self, movie_repo, sample_movie):
        movie = movie_repo.add(sample_movie)
        movie_repo.remove(movie)
        assert movie_repo.get_all() == []
        assert _read(movie_repo.path) == []
        with pytest.raises(NotFoundError):
            movie_repo.remove(movie.id)

    def test_save_failure_is_reported_not_raised(self, book_repo, sample_book):
        """Un echec d'ecriture retourne False et conserve l'etat en memoire."""
        with patch("src.infrastructure.persistence.json_store.os.replace", side_effect=OSError("disk full")):
            book_repo.add(sample_book)
            assert book_repo.save() is False
            assert book_repo.last_save_ok is False
        assert len(book_repo) == 1
        assert not book_repo.path.exists()
        assert not book_repo.path.with_name("books.json.tmp").exists()

        assert book_repo.save() is True
        assert book_repo.last_save_ok is True


class TestReads:
    def test_get_all_returns_copy(self, book_repo, sample_book):
        book_repo.add(sample_book)
        book_repo.get_all().clear()
        assert len(book_repo) == 1

    def test_get_by_id_and_require(self, book_repo, sample_book):
        book_repo.add(sample_book)
        assert book_repo.get_by_id(1) is sample_book
        assert book_repo.get_by_id(2) is None
        with pytest.raises(NotFoundError):
            book_repo.require(2)

    def test_find_by_title(self, movie_repo, sample_movie):
        movie_repo.add(sample_movie)
        assert movie_repo.find_by_title("le parrain") is sample_movie
        assert movie_repo.find_by_title("THE GODFATHER") is sample_movie
        assert movie_repo.find_by_title("Parrain") is None
        assert movie_repo.find_by_title("  ") is None

    def test_blank_search_equals_get_all(self, book_repo, sample_book):
        book_repo.add(sample_book)
        book_repo.add(Book(title="Dune", release_year=1965))
        assert book_repo.search("") == book_repo.get_all()

    def test_search_and_listing(self, movie_repo, sample_movie):
        movie_repo.add(sample_movie)
        movie_repo.add(Movie(title="Alien", genres=["SF"], release_year=1979))
        assert [m.title for m in movie_repo.search("coppola")] == ["Le Parrain"]
        result = movie_repo.listing(genre="sf")
        assert [m.title for m in result.items] == ["Alien"]


class TestSeriesRepository:
    def test_add_season_persists(self, data_dir, series_repo, sample_series):
        series_repo.add(sample_series)
        series_repo.add_season(sample_series.id, Season(season_number=3, episodes=13))

        reloaded = SeriesRepository(data_dir)
        assert [s.season_number for s in reloaded.require(1).seasons] == [1, 2, 3]

    def test_add_invalid_season_rolled_back(self, series_repo, sample_series):
        series_repo.add(sample_series)
        with pytest.raises(ValidationError):
            series_repo.add_season(sample_series.id, Season(season_number=0))
        assert len(series_repo.require(1).seasons) == 2

    def test_remove_season(self, series_repo, sample_series):
        series_repo.add(sample_series)
        series_repo.remove_season(1, 1)
        assert [s.season_number for s in series_repo.require(1).seasons] == [2]
        with pytest.raises(NotFoundError):
            series_repo.remove_season(1, 7)

    def test_season_review(self, data_dir, series_repo, sample_series):
        series_repo.add(sample_series)
        series_repo.add_season_review(1, 2, 4, "Tendu")

        reloaded = SeriesRepository(data_dir).require(1)
        assert reloaded.rated_seasons_count() == 1
        assert reloaded.average_rating() == 4.0

    def test_kind_and_file(self, series_repo):
        assert series_repo.kind is MediaKind.SERIES
        assert series_repo.path.name == "series.json"

    def test_review_on_invalid_series_not_applied(self, data_dir, series_repo):
        data_dir.mkdir()
        (data_dir / "series.json").write_text(
            '[{"id": 1, "title": "Sans annee", "seasons": [{"season_number": 1}]}]',
            encoding="utf-8",
        )
        series_repo.load()

        with pytest.raises(ValidationError):
            series_repo.add_season_review(1, 1, 5)
        assert not series_repo.require(1).seasons[0].has_reviews

    def test_remove_season_restored_when_series_invalid(self, series_repo, sample_series):
        series_repo.add(sample_series)
        sample_series.end_year = 1990
        with pytest.raises(ValidationError):
            series_repo.remove_season(1, 1)
        assert [s.season_number for s in series_repo.require(1).seasons] == [1, 2]
