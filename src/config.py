"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CARNET_,
et peut optionnellement être fournie via un fichier .env.
"""

from datetime import date
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CARNET_.
    Exemple : CARNET_DATA_DIR=~/carnet/data

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CARNET_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Répertoire des catalogues JSON (books.json, movies.json, series.json)
    data_dir: Path = Field(default=Path("data"))

    # Bornes de validation des saisies
    min_year: int = Field(default=1888, ge=0)
    min_book_year: int = Field(default=0, ge=0)
    max_year_ahead: int = Field(default=5, ge=0)
    max_duration: int = Field(default=900, ge=1)

    # Affichage de l'historique des évaluations
    review_history_limit: int = Field(default=5, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/carnet.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("data_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def max_year(self) -> int:
        """Année maximale acceptée (année courante + marge)."""
        return date.today().year + self.max_year_ahead
