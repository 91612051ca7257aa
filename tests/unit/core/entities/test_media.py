"""
Tests pour les entites media (Book, Movie, Series, Season).

Verifie les valeurs par defaut, la copie des listes, la capacite
commune CatalogItem et l'agregation des notes d'une serie.
"""

import pytest

from src.core.entities.media import (
    MEDIA_TYPES,
    Book,
    MediaKind,
    Movie,
    Season,
    Series,
)
from src.core.exceptions import ValidationError


class TestMediaKind:
    """Tests pour l'etiquette de variante MediaKind."""

    def test_file_names(self):
        """Chaque type a son propre fichier JSON."""
        assert MediaKind.BOOK.file_name == "books.json"
        assert MediaKind.MOVIE.file_name == "movies.json"
        assert MediaKind.SERIES.file_name == "series.json"

    def test_entities_carry_their_kind(self):
        """Chaque entite expose son type et MEDIA_TYPES les associe."""
        assert Book.kind is MediaKind.BOOK
        assert Movie().kind is MediaKind.MOVIE
        assert MEDIA_TYPES[MediaKind.SERIES] is Series


class TestBookEntity:
    """Tests pour l'entite Book."""

    def test_defaults(self):
        """Un livre neuf n'a ni id, ni genres, ni evaluation."""
        book = Book(title="Dune")
        assert book.id is None
        assert book.genres == []
        assert book.read_date is None
        assert not book.has_reviews
        assert book.average_rating() == 0.0

    def test_original_title_defaults_to_title(self):
        """Le titre original reprend le titre quand il est vide."""
        assert Book(title="Dune").original_title == "Dune"
        assert Book(title="Dune", original_title="   ").original_title == "Dune"
        assert Book(title="Dune", original_title="Dune (VO)").original_title == "Dune (VO)"

    def test_genres_copied_on_read(self):
        """Modifier la liste retournee ne modifie pas le livre."""
        book = Book(title="Dune", genres=["SF"])
        genres = book.genres
        genres.append("Aventure")
        assert book.genres == ["SF"]

    def test_genres_copied_on_write(self):
        """Modifier la liste fournie apres affectation ne modifie pas le livre."""
        source = ["SF"]
        book = Book(title="Dune", genres=source)
        source.append("Aventure")
        assert book.genres == ["SF"]

    def test_none_list_stores_empty(self):
        """Affecter None a un champ liste stocke une liste vide."""
        book = Book(title="Dune", genres=["SF"])
        book.genres = None
        assert book.genres == []

    def test_duplicate_genres_allowed(self):
        book = Book(title="Dune", genres=["SF", "SF"])
        assert book.genres == ["SF", "SF"]

    def test_instances_do_not_share_lists(self):
        """Deux livres ne partagent jamais la meme liste par defaut."""
        first = Book(title="A")
        second = Book(title="B")
        first.genres = ["SF"]
        assert second.genres == []

    def test_add_review_updates_average(self):
        book = Book(title="Dune")
        book.add_review(4, "Tres bon")
        book.add_review(2)
        assert book.has_reviews
        assert book.review_info.review_count() == 2
        assert book.average_rating() == 3.0

    def test_add_invalid_review_rejected(self):
        """Une note hors de [0, 5] est refusee et l'historique reste intact."""
        book = Book(title="Dune")
        with pytest.raises(ValidationError):
            book.add_review(6)
        assert not book.has_reviews

    def test_catalog_capability(self, sample_book):
        """Le livre expose createur, consommation et termes de recherche."""
        assert sample_book.creator_name == "George Orwell"
        assert not sample_book.is_consumed
        sample_book.read_status = True
        assert sample_book.is_consumed
        terms = sample_book.search_terms()
        assert "978-0451524935" in terms
        assert "1949" in terms
        assert "Dystopie" in terms


class TestMovieEntity:
    """Tests pour l'entite Movie."""

    def test_cast_and_platforms_copied(self, sample_movie):
        cast = sample_movie.cast
        cast.clear()
        platforms = sample_movie.where_to_watch
        platforms.append("Canal+")
        assert sample_movie.cast == ["Marlon Brando", "Al Pacino"]
        assert sample_movie.where_to_watch == ["Netflix"]

    def test_creator_is_director(self, sample_movie):
        assert sample_movie.creator_name == "Francis Ford Coppola"

    def test_consumed_follows_watched_status(self, sample_movie):
        assert not sample_movie.is_consumed
        sample_movie.watched_status = True
        assert sample_movie.is_consumed

    def test_search_terms_exclude_isbn_like_fields(self, sample_movie):
        """Les termes d'un film couvrent titre original, realisateur et genres."""
        terms = sample_movie.search_terms()
        assert "The Godfather" in terms
        assert "Francis Ford Coppola" in terms
        assert "Crime" in terms
        assert "1972" in terms


class TestSeasonEntity:
    """Tests pour l'entite Season."""

    def test_defaults(self):
        season = Season()
        assert season.season_number == 1
        assert season.episodes == 0
        assert season.cast == []
        assert season.average_rating() == 0.0

    def test_own_reviews(self):
        season = Season(season_number=2)
        season.add_review(5)
        season.add_review(4)
        assert season.has_reviews
        assert season.average_rating() == 4.5


class TestSeriesEntity:
    """Tests pour l'entite Series."""

    def test_add_season_ignores_none(self):
        series = Series(title="Dark")
        series.add_season(None)
        assert series.seasons == []

    def test_seasons_returns_new_list_of_same_seasons(self, sample_series):
        """Reordonner la liste retournee ne change pas la serie, mais les saisons sont partagees."""
        seasons = sample_series.seasons
        seasons.reverse()
        assert [s.season_number for s in sample_series.seasons] == [1, 2]

        seasons[0].add_review(5)
        assert sample_series.seasons[1].has_reviews

    def test_seasons_assignment(self, sample_series):
        sample_series.seasons = [Season(season_number=3)]
        assert [s.season_number for s in sample_series.seasons] == [3]
        sample_series.seasons = None
        assert sample_series.seasons == []

    def test_replace_season(self, sample_series):
        replacement = Season(season_number=1, episodes=8)
        sample_series.replace_season(0, replacement)
        assert sample_series.seasons[0] is replacement

    def test_remove_season_by_identity(self, sample_series):
        first = sample_series.seasons[0]
        assert sample_series.remove_season(first) is True
        assert sample_series.remove_season(Season(season_number=1)) is False
        assert len(sample_series.seasons) == 1

    def test_average_without_reviews(self, sample_series):
        assert not sample_series.has_reviews
        assert sample_series.rated_seasons_count() == 0
        assert sample_series.average_rating() == 0.0

    def test_average_ignores_unrated_seasons(self, sample_series):
        """Seules les saisons evaluees entrent dans la moyenne de la serie."""
        first, second = sample_series.seasons
        first.add_review(4)
        first.add_review(2)
        assert sample_series.rated_seasons_count() == 1
        assert sample_series.average_rating() == 3.0

        second.add_review(5)
        assert sample_series.rated_seasons_count() == 2
        assert sample_series.average_rating() == 4.0

    def test_total_episodes_and_ongoing(self, sample_series):
        assert sample_series.total_episodes() == 20
        assert not sample_series.is_ongoing
        assert Series(title="One Piece").is_ongoing

    def test_creator_name(self, sample_series):
        assert sample_series.creator_name == "Vince Gilligan"
