"""
Service de classification de la qualite des titres de release.

Ce module extrait les attributs de qualite d'un titre de release libre
(ex: "Movie.2024.2160p.BluRay.REMUX.x265.Atmos-GROUP") a l'aide de tables
de motifs ordonnees, puis calcule le score de qualite.

Pour chaque dimension (resolution, source, codec video, codec audio),
les motifs sont testes dans l'ordre et le premier qui correspond gagne.
L'ordre est significatif : "remux" doit etre teste avant "bluray" car
les remux mentionnent aussi leur disque source.

Toutes les fonctions sont totales : aucune entree texte ne leve
d'exception, l'absence d'information donne UNKNOWN ou None.
"""

import re
from typing import Any, Optional, TypeVar

from loguru import logger

from countarr.core.value_objects.quality import (
    AudioCodec,
    ParsedQuality,
    ParsedRelease,
    QualitySource,
    Resolution,
    VideoCodec,
)
from countarr.services.quality_scorer import calculate_quality_score
from countarr.utils.constants import (
    CONTAINER_EXTENSIONS,
    RELEASE_GROUP_FALSE_POSITIVES,
    SOURCE_DISPLAY_NAMES,
    UNKNOWN_LABEL,
)

T = TypeVar("T")

# Limites de mot ASCII, insensible a la casse
_FLAGS = re.IGNORECASE | re.ASCII


def _rule(pattern: str, value: T) -> tuple[re.Pattern[str], T]:
    return re.compile(pattern, _FLAGS), value


# ====================
# Tables de motifs (l'ordre compte)
# ====================

RESOLUTION_PATTERNS: tuple[tuple[re.Pattern[str], Resolution], ...] = (
    _rule(r"\b2160p\b", Resolution.P2160),
    _rule(r"\b4k\b", Resolution.P2160),
    _rule(r"\buhd\b", Resolution.P2160),
    _rule(r"\b1080p\b", Resolution.P1080),
    _rule(r"\b1080i\b", Resolution.P1080),
    _rule(r"\b720p\b", Resolution.P720),
    _rule(r"\b576p\b", Resolution.P576),
    _rule(r"\b480p\b", Resolution.P480),
    _rule(r"\bsdtv\b", Resolution.P480),
)

SOURCE_PATTERNS: tuple[tuple[re.Pattern[str], QualitySource], ...] = (
    _rule(r"\bremux\b", QualitySource.REMUX),
    _rule(r"\bblu-?ray\b", QualitySource.BLURAY),
    _rule(r"\bbdrip\b", QualitySource.BLURAY),
    _rule(r"\bweb-?dl\b", QualitySource.WEBDL),
    _rule(r"\bamazon\b", QualitySource.WEBDL),
    _rule(r"\bamzn\b", QualitySource.WEBDL),
    _rule(r"\bnetflix\b", QualitySource.WEBDL),
    _rule(r"\bnf\b", QualitySource.WEBDL),
    _rule(r"\bdsnp\b", QualitySource.WEBDL),
    _rule(r"\bdisney\+?\b", QualitySource.WEBDL),
    _rule(r"\bhmax\b", QualitySource.WEBDL),
    _rule(r"\bweb-?rip\b", QualitySource.WEBRIP),
    _rule(r"\bhdtv\b", QualitySource.HDTV),
    _rule(r"\bpdtv\b", QualitySource.HDTV),
    _rule(r"\bdsr\b", QualitySource.HDTV),
    _rule(r"\bdvdrip\b", QualitySource.DVD),
    _rule(r"\bdvd-?r\b", QualitySource.DVD),
    _rule(r"\bdvd\b", QualitySource.DVD),
    _rule(r"\bcam\b", QualitySource.CAM),
    _rule(r"\bhdcam\b", QualitySource.CAM),
    _rule(r"\bts\b", QualitySource.TELESYNC),
    _rule(r"\btelesync\b", QualitySource.TELESYNC),
    _rule(r"\btc\b", QualitySource.TELECINE),
    _rule(r"\btelecine\b", QualitySource.TELECINE),
    _rule(r"\bworkprint\b", QualitySource.WORKPRINT),
    _rule(r"\bwp\b", QualitySource.WORKPRINT),
)

VIDEO_CODEC_PATTERNS: tuple[tuple[re.Pattern[str], VideoCodec], ...] = (
    _rule(r"\bav1\b", VideoCodec.AV1),
    _rule(r"\bx265\b", VideoCodec.X265),
    _rule(r"\bh\.?265\b", VideoCodec.H265),
    _rule(r"\bhevc\b", VideoCodec.HEVC),
    _rule(r"\bx264\b", VideoCodec.X264),
    _rule(r"\bh\.?264\b", VideoCodec.H264),
    _rule(r"\bavc\b", VideoCodec.H264),
    _rule(r"\bvp9\b", VideoCodec.VP9),
    _rule(r"\bxvid\b", VideoCodec.XVID),
    _rule(r"\bdivx\b", VideoCodec.DIVX),
    _rule(r"\bmpeg-?2\b", VideoCodec.MPEG2),
)

AUDIO_CODEC_PATTERNS: tuple[tuple[re.Pattern[str], AudioCodec], ...] = (
    _rule(r"\batmos\b", AudioCodec.ATMOS),
    _rule(r"\btruehd\b", AudioCodec.TRUEHD),
    _rule(r"\bdts-?hd\b", AudioCodec.DTSHD),
    _rule(r"\bdts-?ma\b", AudioCodec.DTSHD),
    _rule(r"\bdts\b", AudioCodec.DTS),
    _rule(r"\beac3\b", AudioCodec.EAC3),
    _rule(r"\bdd\+\b", AudioCodec.EAC3),
    _rule(r"\bddp\b", AudioCodec.EAC3),
    _rule(r"\bac3\b", AudioCodec.AC3),
    _rule(r"\bdd5\.?1\b", AudioCodec.AC3),
    _rule(r"\bdolby digital\b", AudioCodec.AC3),
    _rule(r"\bflac\b", AudioCodec.FLAC),
    _rule(r"\baac\b", AudioCodec.AAC),
    _rule(r"\bopus\b", AudioCodec.OPUS),
    _rule(r"\bmp3\b", AudioCodec.MP3),
)

# Drapeaux independants des dimensions ci-dessus
_3D_PATTERN = re.compile(r"\b3d\b", _FLAGS)
_HDR_PATTERN = re.compile(r"\bhdr(?:10)?\+?\b", _FLAGS)
_DOLBY_VISION_PATTERN = re.compile(r"\bdolby.?vision\b", _FLAGS)
_DV_PATTERN = re.compile(r"\bdv\b", _FLAGS)
_DV_OR_DOVI_PATTERN = re.compile(r"\b(?:dv|dovi)\b", _FLAGS)
_ATMOS_PATTERN = re.compile(r"\batmos\b", _FLAGS)

# Groupe de release : tiret final suivi d'un token alphanumerique,
# eventuellement suivi d'un tag entre crochets (ex: -GROUP[rarbg])
_CONTAINER_EXTENSION_PATTERN = re.compile(
    r"\.(?:" + "|".join(CONTAINER_EXTENSIONS) + r")\Z", _FLAGS
)
_RELEASE_GROUP_PATTERN = re.compile(r"-([a-zA-Z0-9]+)(?:\[[\w.]+\])?\Z", re.ASCII)


def _normalize_title(release_title: Any) -> str:
    """Ramene toute entree a une chaine (None -> chaine vide)."""
    if release_title is None:
        return ""
    if isinstance(release_title, str):
        return release_title
    return str(release_title)


def find_match(
    text: str, patterns: tuple[tuple[re.Pattern[str], T], ...]
) -> Optional[T]:
    """
    Retourne la valeur du premier motif correspondant au texte.

    Args:
        text: Texte a analyser.
        patterns: Paires (motif, valeur) ordonnees.

    Returns:
        Valeur associee au premier motif trouve, ou None.
    """
    for pattern, value in patterns:
        if pattern.search(text):
            return value
    return None


def classify(release_title: Optional[str]) -> ParsedQuality:
    """
    Classifie la qualite d'un titre de release.

    Les quatre dimensions sont resolues independamment par premier motif
    correspondant ; les drapeaux 3D/HDR/Dolby Vision/Atmos sont detectes
    separement. Le score est derive des dimensions et des drapeaux.

    Args:
        release_title: Titre de release (None est traite comme vide).

    Returns:
        ParsedQuality nouvellement construit, jamais d'exception.
    """
    title = _normalize_title(release_title)

    resolution = find_match(title, RESOLUTION_PATTERNS) or Resolution.UNKNOWN
    source = find_match(title, SOURCE_PATTERNS) or QualitySource.UNKNOWN
    video_codec = find_match(title, VIDEO_CODEC_PATTERNS) or VideoCodec.UNKNOWN
    audio_codec = find_match(title, AUDIO_CODEC_PATTERNS) or AudioCodec.UNKNOWN

    is_3d = bool(_3D_PATTERN.search(title))
    is_hdr = bool(
        _HDR_PATTERN.search(title)
        or _DOLBY_VISION_PATTERN.search(title)
        or _DV_PATTERN.search(title)
    )
    is_dolby_vision = bool(
        _DOLBY_VISION_PATTERN.search(title) or _DV_OR_DOVI_PATTERN.search(title)
    )
    is_atmos = bool(_ATMOS_PATTERN.search(title))

    quality_score = calculate_quality_score(
        resolution,
        source,
        video_codec,
        is_hdr=is_hdr,
        is_dolby_vision=is_dolby_vision,
        is_atmos=is_atmos,
    )

    if title and quality_score == 0:
        logger.debug("Aucune qualite reconnue", title=title)

    return ParsedQuality(
        resolution=resolution,
        source=source,
        video_codec=video_codec,
        audio_codec=audio_codec,
        is_3d=is_3d,
        is_hdr=is_hdr,
        is_dolby_vision=is_dolby_vision,
        is_atmos=is_atmos,
        quality_score=quality_score,
    )


def extract_release_group(release_title: Optional[str]) -> Optional[str]:
    """
    Extrait le groupe de release en fin de titre.

    Retire une extension de conteneur finale (.mkv, .mp4...), puis cherche
    un token alphanumerique apres le dernier tiret, eventuellement suivi
    d'un tag entre crochets. Les tags de qualite places en fin de nom
    (REMUX, x264, 1080p...) ne sont pas des groupes.

    Args:
        release_title: Titre de release (None est traite comme vide).

    Returns:
        Nom du groupe, ou None si absent ou faux positif.
    """
    title = _normalize_title(release_title)
    cleaned = _CONTAINER_EXTENSION_PATTERN.sub("", title)

    match = _RELEASE_GROUP_PATTERN.search(cleaned)
    if match is None:
        return None

    group = match.group(1)
    if group.lower() in RELEASE_GROUP_FALSE_POSITIVES:
        logger.debug("Groupe de release ignore (tag de qualite)", group=group)
        return None
    return group


def format_quality(parsed: ParsedQuality) -> str:
    """
    Construit le libelle court d'une qualite (ex: "1080p BluRay HDR").

    Ordre : resolution, source, HDR, DV. Les dimensions inconnues sont
    omises ; retourne "Unknown" si rien n'est affichable.
    """
    parts: list[str] = []

    if parsed.resolution != Resolution.UNKNOWN:
        parts.append(parsed.resolution.value)

    if parsed.source != QualitySource.UNKNOWN:
        parts.append(SOURCE_DISPLAY_NAMES[parsed.source])

    if parsed.is_hdr:
        parts.append("HDR")
    if parsed.is_dolby_vision:
        parts.append("DV")

    return " ".join(parts) or UNKNOWN_LABEL


class QualityParserService:
    """
    Service de classification des titres de release.

    Fournit les methodes de haut niveau utilisees par la CLI et le
    pipeline d'import.

    Ce service est sans etat et peut etre utilise comme singleton.
    """

    def classify(self, release_title: Optional[str]) -> ParsedQuality:
        """
        Classifie la qualite d'un titre.

        Voir classify() pour les details.
        """
        return classify(release_title)

    def extract_release_group(self, release_title: Optional[str]) -> Optional[str]:
        """
        Extrait le groupe de release d'un titre.

        Voir extract_release_group() pour les details.
        """
        return extract_release_group(release_title)

    def format_quality(self, parsed: ParsedQuality) -> str:
        """Voir format_quality()."""
        return format_quality(parsed)

    def parse_release(
        self, release_title: Optional[str], fallback_group: Optional[str] = None
    ) -> ParsedRelease:
        """
        Analyse complete d'un titre : qualite et groupe de release.

        Args:
            release_title: Titre de release.
            fallback_group: Groupe fourni par le service de telechargement,
                utilise si aucun groupe n'est extrait du titre.

        Returns:
            ParsedRelease pret a etre stocke avec l'evenement.
        """
        title = _normalize_title(release_title)
        release_group = extract_release_group(title) or fallback_group or None
        return ParsedRelease(
            title=title,
            quality=classify(title),
            release_group=release_group,
        )
