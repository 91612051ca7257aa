"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et toute autre surface.
Inclut les catalogues JSON et les services metier.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.repositories import (
    BookRepository,
    MovieRepository,
    SeriesRepository,
)
from .services.library import LibraryService
from .services.validation import MediaValidator


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Un seul catalogue par type de media et par processus : les repositories
    sont des Singletons, charges a la premiere demande.

    Utilisation :
        container = Container()
        library = container.library_service()
        books = container.book_repository()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Validateur des saisies - bornes issues de la configuration
    validator = providers.Singleton(
        MediaValidator,
        min_year=config.provided.min_year,
        max_year=config.provided.max_year,
        max_duration=config.provided.max_duration,
        min_book_year=config.provided.min_book_year,
    )

    # Repositories - Singleton : un seul acteur en memoire par catalogue
    book_repository = providers.Singleton(
        BookRepository,
        data_dir=config.provided.data_dir,
        validator=validator,
    )
    movie_repository = providers.Singleton(
        MovieRepository,
        data_dir=config.provided.data_dir,
        validator=validator,
    )
    series_repository = providers.Singleton(
        SeriesRepository,
        data_dir=config.provided.data_dir,
        validator=validator,
    )

    # Service de bibliotheque (vue transverse des trois catalogues)
    library_service = providers.Singleton(
        LibraryService,
        book_repository=book_repository,
        movie_repository=movie_repository,
        series_repository=series_repository,
    )
