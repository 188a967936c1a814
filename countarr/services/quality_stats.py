"""
Service de statistiques de qualite sur un lot de titres de release.

Agrege en memoire les classifications d'un ensemble de titres :
distributions par resolution, source et codecs, score moyen, nombre de
releases HDR / Dolby Vision / Atmos, et classement des groupes de release.
"""

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional

from loguru import logger

from countarr.core.value_objects.quality import (
    ParsedRelease,
    QualitySource,
)
from countarr.services.quality_parser import QualityParserService
from countarr.utils.constants import SOURCE_DISPLAY_NAMES, UNKNOWN_LABEL

if TYPE_CHECKING:
    from countarr.config import Settings


DEFAULT_TOP_GROUPS_LIMIT = 10


@dataclass(frozen=True)
class DistributionEntry:
    """
    Part d'une valeur dans une distribution.

    Attributs:
        label: Libelle affiche (ex: "1080p", "WEB-DL", "Unknown")
        count: Nombre de releases
        percentage: Pourcentage du total, arrondi a une decimale
    """

    label: str
    count: int
    percentage: float


@dataclass(frozen=True)
class GroupRanking:
    """Classement d'un groupe de release (nombre de releases et score moyen)."""

    release_group: str
    count: int
    average_score: float


@dataclass(frozen=True)
class QualityReport:
    """
    Rapport de qualite d'un lot de releases.

    Attributs:
        total: Nombre de titres analyses
        average_score: Score de qualite moyen (0.0 si aucun titre)
        resolutions: Distribution des resolutions
        sources: Distribution des sources
        video_codecs: Distribution des codecs video
        audio_codecs: Distribution des codecs audio
        hdr_count: Releases HDR
        dolby_vision_count: Releases Dolby Vision
        atmos_count: Releases Atmos
        top_release_groups: Groupes les plus frequents
    """

    total: int = 0
    average_score: float = 0.0
    resolutions: list[DistributionEntry] = field(default_factory=list)
    sources: list[DistributionEntry] = field(default_factory=list)
    video_codecs: list[DistributionEntry] = field(default_factory=list)
    audio_codecs: list[DistributionEntry] = field(default_factory=list)
    hdr_count: int = 0
    dolby_vision_count: int = 0
    atmos_count: int = 0
    top_release_groups: list[GroupRanking] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialise le rapport en dictionnaire JSON."""
        def entries(items: list[DistributionEntry]) -> list[dict]:
            return [
                {"label": e.label, "value": e.count, "percentage": e.percentage}
                for e in items
            ]

        return {
            "total": self.total,
            "averageScore": self.average_score,
            "resolutions": entries(self.resolutions),
            "sources": entries(self.sources),
            "videoCodecs": entries(self.video_codecs),
            "audioCodecs": entries(self.audio_codecs),
            "hdrCount": self.hdr_count,
            "dolbyVisionCount": self.dolby_vision_count,
            "atmosCount": self.atmos_count,
            "topReleaseGroups": [
                {
                    "releaseGroup": g.release_group,
                    "count": g.count,
                    "averageScore": g.average_score,
                }
                for g in self.top_release_groups
            ],
        }


def _label(value: str) -> str:
    return UNKNOWN_LABEL if value == "unknown" else value


def _source_label(source: QualitySource) -> str:
    return SOURCE_DISPLAY_NAMES.get(source, UNKNOWN_LABEL)


def build_distribution(labels: Iterable[str]) -> list[DistributionEntry]:
    """
    Construit une distribution triee depuis une suite de libelles.

    Tri par nombre decroissant, puis par libelle pour departager.

    Args:
        labels: Libelle de chaque release.

    Returns:
        Liste de DistributionEntry.
    """
    counts = Counter(labels)
    total = sum(counts.values())
    if total == 0:
        return []

    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [
        DistributionEntry(
            label=label,
            count=count,
            percentage=round(count * 100 / total, 1),
        )
        for label, count in ordered
    ]


def rank_release_groups(
    releases: Iterable[ParsedRelease], limit: int = DEFAULT_TOP_GROUPS_LIMIT
) -> list[GroupRanking]:
    """
    Classe les groupes de release par nombre de releases.

    Les releases sans groupe sont ignorees. Tri par nombre decroissant,
    puis par nom de groupe.
    """
    scores: dict[str, list[int]] = defaultdict(list)
    for release in releases:
        if release.release_group:
            scores[release.release_group].append(release.quality.quality_score)

    rankings = [
        GroupRanking(
            release_group=group,
            count=len(values),
            average_score=round(sum(values) / len(values), 1),
        )
        for group, values in scores.items()
    ]
    rankings.sort(key=lambda r: (-r.count, r.release_group))
    return rankings[:limit]


class QualityStatsService:
    """
    Service d'agregation des qualites d'un lot de titres.

    Classifie chaque titre via QualityParserService puis calcule
    les distributions et classements du rapport.
    """

    def __init__(
        self,
        parser: Optional[QualityParserService] = None,
        settings: Optional["Settings"] = None,
    ) -> None:
        """
        Initialise le service.

        Args:
            parser: Service de classification (instance par defaut si None).
            settings: Parametres (limite du classement des groupes).
        """
        self._parser = parser or QualityParserService()
        self._default_limit = (
            settings.top_groups_limit if settings is not None else DEFAULT_TOP_GROUPS_LIMIT
        )

    def summarize(
        self, titles: Iterable[str], limit: Optional[int] = None
    ) -> QualityReport:
        """
        Produit le rapport de qualite d'un lot de titres.

        Args:
            titles: Titres de release a analyser.
            limit: Nombre maximum de groupes classes (defaut: configuration).

        Returns:
            QualityReport, vide si aucun titre.
        """
        releases = [self._parser.parse_release(title) for title in titles]
        if not releases:
            return QualityReport()

        qualities = [release.quality for release in releases]
        total = len(qualities)
        average = round(sum(q.quality_score for q in qualities) / total, 1)

        report = QualityReport(
            total=total,
            average_score=average,
            resolutions=build_distribution(_label(q.resolution.value) for q in qualities),
            sources=build_distribution(_source_label(q.source) for q in qualities),
            video_codecs=build_distribution(_label(q.video_codec.value) for q in qualities),
            audio_codecs=build_distribution(_label(q.audio_codec.value) for q in qualities),
            hdr_count=sum(1 for q in qualities if q.is_hdr),
            dolby_vision_count=sum(1 for q in qualities if q.is_dolby_vision),
            atmos_count=sum(1 for q in qualities if q.is_atmos),
            top_release_groups=rank_release_groups(
                releases, limit if limit is not None else self._default_limit
            ),
        )

        logger.debug(
            "Rapport de qualite calcule",
            total=report.total,
            average_score=report.average_score,
        )
        return report
