"""
Evaluations et historique d'evaluations.

Review est un objet valeur immuable ; ReviewInfo est l'historique
append-only d'une entite et derive ses statistiques (nombre, moyenne,
derniere note).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from src.core.exceptions import ValidationError

MIN_RATING = 0
MAX_RATING = 5


def check_rating(rating: object) -> int:
    """
    Verifie qu'une note est un entier dans [MIN_RATING, MAX_RATING].

    Les valeurs hors bornes sont refusees, jamais ramenees dans l'intervalle.

    Raises:
        ValidationError: si la note n'est pas un entier valide.
    """
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise ValidationError(f"La note doit etre un entier, recu {rating!r}")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError(
            f"La note doit etre comprise entre {MIN_RATING} et {MAX_RATING}, recu {rating}"
        )
    return rating


@dataclass(frozen=True)
class Review:
    """
    Une evaluation : note, commentaire et date de creation.

    Attributs :
        rating : Note entiere de 0 a 5
        comment : Commentaire libre (peut etre vide)
        created_at : Horodatage attribue lors de l'ajout (informatif, peut
            manquer dans les anciens fichiers)
    """

    rating: int
    comment: str = ""
    created_at: Optional[datetime] = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        check_rating(self.rating)
        if self.comment is None:
            object.__setattr__(self, "comment", "")


class ReviewInfo:
    """
    Historique ordonne (ordre d'insertion) des evaluations d'une entite.

    L'ordre d'insertion fait foi : la derniere note est celle du dernier
    ajout, quel que soit son horodatage.
    """

    def __init__(self, reviews: Optional[Iterable[Review]] = None) -> None:
        self._reviews: list[Review] = list(reviews) if reviews is not None else []

    @property
    def reviews(self) -> list[Review]:
        """Copie de l'historique, du plus ancien au plus recent."""
        return list(self._reviews)

    @property
    def has_reviews(self) -> bool:
        return bool(self._reviews)

    def add_review(self, rating: int, comment: Optional[str] = "") -> Review:
        """
        Ajoute une evaluation horodatee a l'historique.

        Raises:
            ValidationError: si la note est hors de [0, 5] ; l'historique
                reste alors inchange.
        """
        review = Review(rating=check_rating(rating), comment=comment or "")
        self._reviews.append(review)
        return review

    def review_count(self) -> int:
        return len(self._reviews)

    def average_rating(self) -> float:
        """Moyenne arithmetique des notes, 0.0 si aucune evaluation."""
        if not self._reviews:
            return 0.0
        return sum(review.rating for review in self._reviews) / len(self._reviews)

    def last_rating(self) -> Optional[int]:
        """Note du dernier ajout, None si l'historique est vide."""
        if not self._reviews:
            return None
        return self._reviews[-1].rating

    def recent(self, limit: Optional[int] = None) -> list[Review]:
        """
        Retourne les evaluations de la plus recente a la plus ancienne.

        Args:
            limit: Nombre maximum d'evaluations retournees (toutes si None)
        """
        newest_first = list(reversed(self._reviews))
        if limit is None:
            return newest_first
        return newest_first[: max(limit, 0)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReviewInfo):
            return NotImplemented
        return self._reviews == other._reviews

    def __repr__(self) -> str:
        return f"ReviewInfo(count={len(self._reviews)}, average={self.average_rating():.2f})"
