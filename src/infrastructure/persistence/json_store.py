"""
Catalogue en memoire persiste dans un fichier JSON.

Implemente ICatalogRepository : la liste en memoire fait foi, et chaque
mutation (add, update, remove) reecrit immediatement le fichier complet.
L'ecriture passe par un fichier temporaire renomme sur la cible afin
qu'un arret brutal ne laisse jamais un catalogue a moitie ecrit.
"""

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from loguru import logger

from src.core.entities.media import CatalogItem, MediaKind
from src.core.exceptions import NotFoundError, PersistenceError, ValidationError
from src.core.ports.repositories import ICatalogRepository
from src.infrastructure.persistence.codecs import guarded
from src.infrastructure.persistence.id_allocator import IdAllocator
from src.services import query
from src.services.query import ListingResult, SortOption
from src.services.validation import MediaValidator

T = TypeVar("T", bound=CatalogItem)


class JsonCatalogStore(ICatalogRepository[T], Generic[T]):
    """
    Catalogue d'un type de media, adosse a un fichier JSON.

    Le fichier contient un tableau JSON d'objets. Un fichier absent, vide
    ou illisible donne un catalogue vide (signale dans les logs, jamais
    fatal). Le compteur d'identifiants reprend a max(ids) + 1.

    Example:
        store = JsonCatalogStore(
            kind=MediaKind.BOOK,
            path=Path("data/books.json"),
            encoder=book_to_raw,
            decoder=book_from_raw,
        )
        book = store.add(Book(title="1984", release_year=1949))
    """

    def __init__(
        self,
        kind: MediaKind,
        path: Path,
        encoder: Callable[[T], dict[str, Any]],
        decoder: Callable[[dict[str, Any]], T],
        validator: Optional[MediaValidator] = None,
        autoload: bool = True,
    ) -> None:
        """
        Initialise le catalogue.

        Args:
            kind: Type de media stocke
            path: Chemin du fichier JSON
            encoder: Conversion entite -> dictionnaire JSON
            decoder: Conversion dictionnaire JSON -> entite
            validator: Validateur applique avant add/update (aucun si None)
            autoload: Charge le fichier des la construction
        """
        self.kind = kind
        self._path = Path(path)
        self._encoder = encoder
        self._decoder = guarded(decoder)
        self._validator = validator
        self._allocator = IdAllocator()
        self._items: list[T] = []
        self._last_save_ok = True
        if autoload:
            self.load()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def last_save_ok(self) -> bool:
        """False si la derniere ecriture a echoue (memoire et fichier divergent)."""
        return self._last_save_ok

    @property
    def next_id(self) -> int:
        """Identifiant qui sera attribue au prochain ajout."""
        return self._allocator.peek()

    def __len__(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Chargement / sauvegarde
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Charge le fichier ; toute erreur donne un catalogue vide."""
        try:
            self._items = self._read_file()
        except PersistenceError as exc:
            logger.warning(
                f"Catalogue {self.kind.value} illisible ({self._path}), demarrage a vide: {exc}"
            )
            self._items = []
        self._allocator.reseed(item.id for item in self._items)
        logger.debug(
            f"Catalogue {self.kind.value} charge: {len(self._items)} element(s), "
            f"prochain id {self._allocator.peek()}"
        )

    def _read_file(self) -> list[T]:
        if not self._path.exists():
            logger.info(f"Fichier {self._path} absent, il sera cree a la premiere sauvegarde")
            return []

        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"Lecture impossible: {exc}") from exc

        if not text.strip():
            logger.info(f"Fichier {self._path} vide, catalogue vide")
            return []

        try:
            raw_items = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"JSON invalide: {exc}") from exc

        if not isinstance(raw_items, list):
            raise PersistenceError("Le fichier doit contenir un tableau JSON")

        items = [self._decoder(raw) for raw in raw_items]
        seen: set[int] = set()
        for item in items:
            if item.id in seen:
                raise PersistenceError(f"Identifiant en double: {item.id}")
            seen.add(item.id)
        return items

    def save(self) -> bool:
        """
        Reecrit le fichier complet (JSON indente, UTF-8).

        Le repertoire parent est cree si besoin. En cas d'echec, l'erreur
        est journalisee, l'etat en memoire reste inchange, False est
        retourne et last_save_ok le reste jusqu'a la prochaine reussite.
        """
        payload = [self._encoder(item) for item in self._items]
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
                f.write("\n")
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as exc:
            logger.error(f"Echec de sauvegarde du catalogue {self.kind.value} ({self._path}): {exc}")
            with suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            self._last_save_ok = False
            return False

        logger.debug(f"Catalogue {self.kind.value} sauvegarde: {len(payload)} element(s)")
        self._last_save_ok = True
        return True

    # ------------------------------------------------------------------
    # Mutations (ecriture immediate)
    # ------------------------------------------------------------------

    def check(self, item: T) -> None:
        """
        Valide un element sans modifier le catalogue.

        A appeler avant de modifier sur place un element deja stocke.

        Raises:
            ValidationError: si l'element est invalide.
        """
        if self._validator is not None:
            self._validator.validate(item)

    def add(self, item: T) -> T:
        """
        Ajoute un element et persiste le catalogue.

        Un identifiant est attribue si l'element n'en a pas. Un element
        portant un identifiant deja present est refuse.

        Raises:
            ValidationError: si l'element est invalide ou son id deja pris.
        """
        self.check(item)

        if item.id is None:
            item.id = self._allocator.claim()
        elif self._index_of(item.id) is not None:
            raise ValidationError(f"{self.kind.label} id={item.id} existe deja")
        else:
            self._allocator.observe(item.id)

        self._items.append(item)
        logger.info(f"{self.kind.label} '{item.title}' ajoute (id={item.id})")
        self.save()
        return item

    def update(self, item: T) -> T:
        """
        Remplace l'element de meme identifiant et persiste.

        Raises:
            NotFoundError: si aucun element ne porte cet identifiant.
            ValidationError: si l'element est invalide.
        """
        index = self._index_of(item.id)
        if index is None:
            raise NotFoundError(self.kind.label, item.id)
        self.check(item)

        self._items[index] = item
        logger.info(f"{self.kind.label} '{item.title}' mis a jour (id={item.id})")
        self.save()
        return item

    def remove(self, item: Union[T, int]) -> None:
        """
        Supprime l'element de meme identifiant et persiste.

        Accepte l'element lui-meme ou son identifiant.

        Raises:
            NotFoundError: si aucun element ne porte cet identifiant.
        """
        item_id = item if isinstance(item, int) else item.id
        index = self._index_of(item_id)
        if index is None:
            raise NotFoundError(self.kind.label, item_id)

        removed = self._items.pop(index)
        logger.info(f"{self.kind.label} '{removed.title}' supprime (id={removed.id})")
        self.save()

    # ------------------------------------------------------------------
    # Lecture
    # ------------------------------------------------------------------

    def get_all(self) -> list[T]:
        return list(self._items)

    def get_by_id(self, item_id: int) -> Optional[T]:
        index = self._index_of(item_id)
        return self._items[index] if index is not None else None

    def require(self, item_id: int) -> T:
        """
        Recupere un element par son ID.

        Raises:
            NotFoundError: si aucun element ne porte cet identifiant.
        """
        item = self.get_by_id(item_id)
        if item is None:
            raise NotFoundError(self.kind.label, item_id)
        return item

    def search(self, criteria: Optional[str]) -> list[T]:
        return query.search(self._items, criteria)

    def listing(
        self,
        genre: Optional[str] = None,
        year: Optional[int] = None,
        sort: Union[SortOption, int] = SortOption.NONE,
    ) -> ListingResult:
        """Listing filtre (genre puis annee) et trie par note."""
        return query.list_catalog(self._items, genre=genre, year=year, sort=sort)

    def find_by_title(self, title: Optional[str]) -> Optional[T]:
        """
        Recherche exacte (insensible a la casse) sur le titre, puis sur le
        titre original si aucun titre ne correspond.
        """
        if title is None or not title.strip():
            return None
        wanted = title.strip().lower()
        for item in self._items:
            if item.title.lower() == wanted:
                return item
        for item in self._items:
            if item.original_title and item.original_title.lower() == wanted:
                return item
        return None

    def _index_of(self, item_id: Optional[int]) -> Optional[int]:
        if item_id is None:
            return None
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None
