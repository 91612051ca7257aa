"""
Configuration du logging de Carnet via loguru.

Deux sorties :
- console (stderr) : compacte, pour ne pas polluer les tableaux Rich de la CLI
- fichier : sérialisé en JSON avec rotation, trace de chaque écriture de catalogue
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import Settings

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> | <level>{message}</level>"
VERBOSE_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/carnet.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure les handlers loguru.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier de log JSON ; aucun fichier si None
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver

    En DEBUG la console affiche horodatage, fonction et ligne ; sinon seuls
    le niveau, le module et le message sont affichés. Le fichier capture
    toujours tout à partir de DEBUG.
    """
    logger.remove()

    level = log_level.upper()
    logger.add(
        sys.stderr,
        level=level,
        format=VERBOSE_CONSOLE_FORMAT if level == "DEBUG" else CONSOLE_FORMAT,
        colorize=True,
    )

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        encoding="utf-8",
    )
    logger.debug(f"Logging configuré (console {level}, fichier {log_file})")


def configure_from_settings(settings: Settings, level_override: Optional[str] = None) -> None:
    """Configure le logging depuis les Settings, niveau console surchargeable (-v / -q)."""
    configure_logging(
        log_level=level_override or settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
