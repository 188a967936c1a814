"""
Configuration loguru de Countarr.

Deux sorties :
- stderr : lignes colorees, seuil reglable depuis la CLI (-v, -q)
- fichier : JSON avec rotation, tout depuis DEBUG
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Identifiant du handler stderr courant (None tant que rien n'est configure)
_console_handler_id: Optional[int] = None


def verbosity_level(verbose: int = 0, quiet: bool = False) -> Optional[str]:
    """
    Traduit les options -v / -q de la CLI en niveau loguru.

    Args:
        verbose: Nombre de -v (1 -> DEBUG, 2 et plus -> TRACE).
        quiet: Ne garder que les erreurs. Prioritaire sur verbose.

    Returns:
        Niveau a appliquer a la console, ou None pour garder la configuration.
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "TRACE"
    if verbose == 1:
        return "DEBUG"
    return None


def set_console_level(level: str) -> None:
    """Remplace le handler stderr par un handler au niveau donne."""
    global _console_handler_id
    if _console_handler_id is not None:
        logger.remove(_console_handler_id)
    _console_handler_id = logger.add(
        sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True
    )


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/countarr.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """
    Installe les handlers console et fichier.

    Args:
        log_level: Seuil de la console.
        log_file: Fichier JSON (le dossier parent est cree si besoin).
        rotation_size: Taille declenchant la rotation ("10 MB").
        retention_count: Nombre d'archives conservees.
    """
    global _console_handler_id
    logger.remove()
    _console_handler_id = None
    set_console_level(log_level)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )
    logger.debug("Logging configure", log_file=str(log_file))
