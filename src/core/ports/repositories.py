"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des
catalogues. L'implémentation fournie (adaptateur) écrit un fichier JSON par
type de média ; d'autres mécanismes (mémoire pour les tests, etc.) peuvent
implémenter le même contrat.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from src.core.entities.media import MediaKind

T = TypeVar("T")


class ICatalogRepository(ABC, Generic[T]):
    """
    Interface de stockage d'un catalogue (un type de média).

    Chaque mutation (add, update, remove) est immédiatement persistée :
    pas de regroupement, pas de transaction.
    """

    kind: MediaKind

    @abstractmethod
    def load(self) -> None:
        """Charge le catalogue depuis son support ; vide en cas d'échec."""
        ...

    @abstractmethod
    def save(self) -> bool:
        """Persiste le catalogue complet. Retourne False en cas d'échec."""
        ...

    @abstractmethod
    def add(self, item: T) -> T:
        """Ajoute un élément, lui attribue un ID et persiste."""
        ...

    @abstractmethod
    def update(self, item: T) -> T:
        """Remplace l'élément de même ID et persiste."""
        ...

    @abstractmethod
    def remove(self, item: T) -> None:
        """Supprime l'élément de même ID et persiste."""
        ...

    @abstractmethod
    def get_all(self) -> list[T]:
        """Retourne une copie de la liste en mémoire."""
        ...

    @abstractmethod
    def get_by_id(self, item_id: int) -> Optional[T]:
        """Récupère un élément par son ID."""
        ...

    @abstractmethod
    def search(self, criteria: Optional[str]) -> list[T]:
        """Recherche plein texte, insensible à la casse."""
        ...

    @abstractmethod
    def find_by_title(self, title: Optional[str]) -> Optional[T]:
        """Recherche exacte par titre puis par titre original."""
        ...
