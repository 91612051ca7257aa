"""
Allocation des identifiants d'un catalogue.

Chaque catalogue possede son propre compteur : les identifiants sont
strictement croissants et jamais reutilises au cours d'une session.
Au chargement, le compteur reprend a max(ids) + 1.
"""

from typing import Iterable


class IdAllocator:
    """
    Compteur d'identifiants monotone pour un type de media.

    Example:
        allocator = IdAllocator()
        allocator.reseed([3, 7, 5])
        allocator.claim()  # 8
        allocator.claim()  # 9
    """

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("start doit etre >= 1")
        self._next_id = start

    def reseed(self, ids: Iterable[int]) -> None:
        """Repart de max(ids) + 1, ou de 1 si aucun identifiant."""
        self._next_id = max(ids, default=0) + 1

    def claim(self) -> int:
        """Retourne l'identifiant courant puis incremente le compteur."""
        claimed = self._next_id
        self._next_id += 1
        return claimed

    def observe(self, item_id: int) -> None:
        """Avance le compteur au-dela d'un identifiant fourni de l'exterieur."""
        if item_id >= self._next_id:
            self._next_id = item_id + 1

    def peek(self) -> int:
        """Prochain identifiant, sans le consommer."""
        return self._next_id
