"""
Point d'entrée CLI de Countarr.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import classify, group, stats
from .config import Settings
from .container import Container
from .logging_config import configure_logging, set_console_level, verbosity_level

app = typer.Typer(
    name="countarr",
    help="Classification de la qualité des titres de release",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v: DEBUG, -vv: TRACE)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Countarr - Qualité des releases."""
    level = verbosity_level(verbose, quiet)
    if level is not None:
        set_console_level(level)


app.command()(classify)
app.command()(group)
app.command()(stats)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Format de sortie : {config.output_format}")
    typer.echo(f"Groupes classés : {config.top_groups_limit}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Countarr v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage de Countarr", version=__version__)

    app()


if __name__ == "__main__":
    main()
