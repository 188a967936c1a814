"""
Commandes CLI de classification de la qualite (classify, group, stats).
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from countarr.adapters.cli.helpers import (
    console,
    read_titles,
    suppress_loguru,
    with_container,
)
from countarr.adapters.cli.quality_display import render_releases, render_report


def classify(
    titles: Annotated[
        list[str],
        typer.Argument(help="Titres de release a classifier"),
    ],
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Sortie JSON, une ligne par titre (defaut: format configure)",
        ),
    ] = False,
) -> None:
    """
    Classifie la qualite d'un ou plusieurs titres de release.

    Exemples:
      countarr classify "Movie.2024.2160p.BluRay.REMUX.x265.Atmos-GROUP"
      countarr classify --json "Show.S01E01.720p.WEB-DL.x264-GROUP"
    """
    _classify(titles, as_json)


@with_container
def _classify(container, titles: list[str], as_json: bool) -> None:
    """Implementation de la commande classify."""
    config = container.config()
    parser = container.quality_parser()

    releases = [parser.parse_release(title) for title in titles]
    logger.debug("Titres classifies", count=len(releases))

    if as_json or config.json_output:
        for release in releases:
            typer.echo(json.dumps(release.to_dict(), ensure_ascii=False))
        return

    with suppress_loguru():
        render_releases(console, releases)


def group(
    title: Annotated[str, typer.Argument(help="Titre de release")],
) -> None:
    """Affiche le groupe de release d'un titre ("-" si absent)."""
    _group(title)


@with_container
def _group(container, title: str) -> None:
    """Implementation de la commande group."""
    parser = container.quality_parser()
    typer.echo(parser.extract_release_group(title) or "-")


def stats(
    titles_file: Annotated[
        Path,
        typer.Argument(help="Fichier de titres de release (un par ligne)"),
    ],
    limit: Annotated[
        Optional[int],
        typer.Option(
            "--limit", "-n",
            min=1,
            help="Nombre de groupes de release classes (defaut: configuration)",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Sortie JSON (defaut: format configure)"),
    ] = False,
) -> None:
    """
    Calcule les statistiques de qualite d'un fichier de titres.

    Exemples:
      countarr stats releases.txt
      countarr stats releases.txt --limit 5 --json
    """
    _stats(titles_file, limit, as_json)


@with_container
def _stats(container, titles_file: Path, limit: Optional[int], as_json: bool) -> None:
    """Implementation de la commande stats."""
    if not titles_file.is_file():
        console.print(f"[red]Erreur: Fichier introuvable: {titles_file}[/red]")
        raise typer.Exit(1)

    config = container.config()
    stats_service = container.quality_stats_service()

    titles = read_titles(titles_file)
    logger.info("Analyse des titres", file=str(titles_file), count=len(titles))
    report = stats_service.summarize(titles, limit=limit)

    if as_json or config.json_output:
        typer.echo(json.dumps(report.to_dict(), ensure_ascii=False))
        return

    with suppress_loguru():
        render_report(console, report)
