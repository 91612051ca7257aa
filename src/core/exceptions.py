"""
Exceptions du domaine Carnet.

Toutes les erreurs metier derivent de CarnetError afin que les surfaces
(CLI, interfaces graphiques) puissent les intercepter en un seul point
sans jamais interrompre le processus.
"""


class CarnetError(Exception):
    """Erreur de base du domaine."""


class ValidationError(CarnetError):
    """
    Donnee refusee avant toute mutation.

    Levee pour une note hors de [0, 5], une annee hors des bornes
    configurees, un champ obligatoire vide ou un identifiant deja pris.
    """


class PersistenceError(CarnetError):
    """Fichier de catalogue illisible, corrompu ou impossible a ecrire."""


class NotFoundError(CarnetError):
    """Mise a jour ou suppression d'un identifiant absent du catalogue."""

    def __init__(self, kind: str, item_id: object) -> None:
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind} introuvable (id={item_id})")
