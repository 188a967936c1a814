"""
Utilitaires partages pour les commandes CLI de Countarr.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container en premier argument
- read_titles : lecture d'un fichier de titres (un par ligne)
"""

from contextlib import contextmanager
from functools import wraps
from pathlib import Path

from loguru import logger as loguru_logger
from rich.console import Console

from countarr.container import Container

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("countarr")
    try:
        yield
    finally:
        loguru_logger.enable("countarr")


def with_container(func):
    """
    Decorateur qui injecte un container en premier argument.

    Usage:
        @with_container
        def _my_command(container, ...):
            config = container.config()
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        container = Container()
        return func(container, *args, **kwargs)
    return wrapper


def read_titles(path: Path) -> list[str]:
    """
    Lit un fichier de titres de release, un titre par ligne.

    Les lignes vides sont ignorees et les espaces en bordure retires.
    Les octets non UTF-8 sont remplaces plutot que de faire echouer la lecture.

    Args:
        path: Chemin du fichier

    Returns:
        Liste des titres dans l'ordre du fichier
    """
    text = path.read_text(encoding="utf-8", errors="replace")
    return [line.strip() for line in text.splitlines() if line.strip()]
