"""
Descripteur de champ liste copiee a la lecture et a l'ecriture.

Les listes exposees par les entites (genres, distribution, plateformes, saisons)
sont copiees a la lecture comme a l'ecriture : muter une liste retournee
ou passee en argument ne modifie jamais l'etat stocke.
"""

from typing import Any, Iterable, Optional


class CopiedList:
    """
    Champ de dataclass stockant une liste privee.

    Utilisation :
        @dataclass
        class Movie:
            cast: list[str] = CopiedList()

    La valeur par defaut du champ est une liste vide ; None est
    normalise en liste vide.
    """

    def __set_name__(self, owner: type, name: str) -> None:
        self._private_name = f"_{name}"

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            # Valeur par defaut vue par @dataclass (immuable)
            return ()
        return list(getattr(instance, self._private_name, ()))

    def __set__(self, instance: Any, value: Optional[Iterable[Any]]) -> None:
        setattr(instance, self._private_name, list(value) if value is not None else [])
