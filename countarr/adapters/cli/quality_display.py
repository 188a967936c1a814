"""
Affichage Rich des qualites de release et des rapports statistiques.
"""

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from countarr.core.value_objects.quality import ParsedRelease
from countarr.services.quality_parser import format_quality
from countarr.services.quality_stats import DistributionEntry, QualityReport


def _score_style(score: int) -> str:
    """Couleur du score : vert (>= 75), jaune (>= 50), rouge sinon."""
    if score >= 75:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def _flags(release: ParsedRelease) -> str:
    quality = release.quality
    flags = []
    if quality.is_3d:
        flags.append("3D")
    if quality.is_hdr:
        flags.append("HDR")
    if quality.is_dolby_vision:
        flags.append("DV")
    if quality.is_atmos:
        flags.append("Atmos")
    return " ".join(flags)


def render_releases(console: Console, releases: Iterable[ParsedRelease]) -> None:
    """Affiche un tableau des releases classifiees."""
    table = Table(title="Qualite des releases", show_header=True, header_style="bold cyan")
    table.add_column("Titre", overflow="fold")
    table.add_column("Qualite", style="cyan")
    table.add_column("Video")
    table.add_column("Audio")
    table.add_column("Options", style="magenta")
    table.add_column("Score", justify="right")
    table.add_column("Groupe", style="dim")

    for release in releases:
        quality = release.quality
        style = _score_style(quality.quality_score)
        table.add_row(
            escape(release.title),
            format_quality(quality),
            quality.video_codec.value,
            quality.audio_codec.value,
            _flags(release),
            f"[{style}]{quality.quality_score}[/{style}]",
            escape(release.release_group or "-"),
        )

    console.print(table)


def _distribution_table(title: str, entries: list[DistributionEntry]) -> Table:
    table = Table(title=title)
    table.add_column("Valeur", style="cyan")
    table.add_column("Nombre", justify="right")
    table.add_column("%", justify="right", style="dim")
    for entry in entries:
        table.add_row(entry.label, str(entry.count), f"{entry.percentage:.1f}")
    return table


def render_report(console: Console, report: QualityReport) -> None:
    """
    Affiche le rapport de qualite d'un lot de releases.

    Resume (total, score moyen, options), distributions, puis classement
    des groupes de release.
    """
    if report.total == 0:
        console.print("[yellow]Aucun titre a analyser.[/yellow]")
        return

    console.print(f"[bold]Releases analysees:[/bold] {report.total}")
    console.print(f"[bold]Score moyen:[/bold] {report.average_score:.1f}")
    console.print(
        f"[bold]HDR:[/bold] {report.hdr_count}  "
        f"[bold]Dolby Vision:[/bold] {report.dolby_vision_count}  "
        f"[bold]Atmos:[/bold] {report.atmos_count}"
    )

    console.print(_distribution_table("Resolutions", report.resolutions))
    console.print(_distribution_table("Sources", report.sources))
    console.print(_distribution_table("Codecs video", report.video_codecs))
    console.print(_distribution_table("Codecs audio", report.audio_codecs))

    if not report.top_release_groups:
        console.print("[dim]Aucun groupe de release detecte.[/dim]")
        return

    table = Table(title="Groupes de release")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Groupe", style="cyan")
    table.add_column("Releases", justify="right")
    table.add_column("Score moyen", justify="right")
    for rank, group in enumerate(report.top_release_groups, start=1):
        table.add_row(
            str(rank), escape(group.release_group), str(group.count), f"{group.average_score:.1f}"
        )
    console.print(table)
