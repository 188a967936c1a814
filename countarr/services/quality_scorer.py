"""
Service de calcul du score de qualite d'une release.

Ce module fournit le scoring multi-criteres d'une qualite classifiee
depuis un titre de release.

Criteres evalues (poids):
- Resolution (40%): 2160p > 1080p > 720p > 576p > 480p
- Source (35%): Remux > BluRay > WEB-DL > WEBRip > HDTV > DVD > pre-release
- Codec video (25%): AV1 > HEVC/x265 > VP9 > H.264 > anciens

Bonus appliques ensuite, plafonnes a 100 apres chaque ajout:
- HDR: +5
- Dolby Vision: +3
- Atmos: +2
"""

import math

from countarr.core.value_objects.quality import (
    QualitySource,
    Resolution,
    VideoCodec,
)


# ====================
# Poids des criteres (somme 1.0)
# ====================

WEIGHT_RESOLUTION = 0.40
WEIGHT_SOURCE = 0.35
WEIGHT_VIDEO_CODEC = 0.25


# ====================
# Bonus
# ====================

BONUS_HDR = 5
BONUS_DOLBY_VISION = 3
BONUS_ATMOS = 2

MAX_SCORE = 100


# ====================
# Tables de scores
# ====================

RESOLUTION_SCORES: dict[Resolution, int] = {
    Resolution.P2160: 100,
    Resolution.P1080: 75,
    Resolution.P720: 50,
    Resolution.P576: 30,
    Resolution.P480: 20,
    Resolution.UNKNOWN: 0,
}

SOURCE_SCORES: dict[QualitySource, int] = {
    QualitySource.REMUX: 100,
    QualitySource.BLURAY: 90,
    QualitySource.WEBDL: 80,
    QualitySource.WEBRIP: 70,
    QualitySource.HDTV: 50,
    QualitySource.DVD: 30,
    QualitySource.TELECINE: 20,
    QualitySource.TELESYNC: 15,
    QualitySource.CAM: 5,
    QualitySource.WORKPRINT: 5,
    QualitySource.UNKNOWN: 0,
}

VIDEO_CODEC_SCORES: dict[VideoCodec, int] = {
    # Moderne (meilleur)
    VideoCodec.AV1: 100,
    # HEVC / H.265
    VideoCodec.X265: 90,
    VideoCodec.H265: 90,
    VideoCodec.HEVC: 90,
    # VP9
    VideoCodec.VP9: 75,
    # H.264 / AVC
    VideoCodec.X264: 70,
    VideoCodec.H264: 70,
    # Anciens
    VideoCodec.XVID: 30,
    VideoCodec.DIVX: 30,
    VideoCodec.MPEG2: 20,
    VideoCodec.UNKNOWN: 0,
}


def score_resolution(resolution: Resolution) -> int:
    """Retourne le score de 0 a 100 d'une classe de resolution."""
    return RESOLUTION_SCORES.get(resolution, 0)


def score_source(source: QualitySource) -> int:
    """Retourne le score de 0 a 100 d'une source."""
    return SOURCE_SCORES.get(source, 0)


def score_video_codec(codec: VideoCodec) -> int:
    """Retourne le score de 0 a 100 d'un codec video."""
    return VIDEO_CODEC_SCORES.get(codec, 0)


def _add_bonus(score: int, bonus: int) -> int:
    return min(MAX_SCORE, score + bonus)


def calculate_quality_score(
    resolution: Resolution,
    source: QualitySource,
    video_codec: VideoCodec,
    is_hdr: bool = False,
    is_dolby_vision: bool = False,
    is_atmos: bool = False,
) -> int:
    """
    Calcule le score de qualite global d'une release.

    La somme ponderee flottante est arrondie a l'entier le plus proche,
    les demis etant arrondis vers le haut (65.5 -> 66). L'ordre des
    operations est fixe : la somme d'une release BluRay seule vaut
    31.499999999999996 et donne 31, comme les scores deja enregistres.

    Les bonus sont ajoutes dans l'ordre HDR, Dolby Vision, Atmos,
    avec plafonnement a 100 apres chaque ajout.

    Args:
        resolution: Classe de resolution.
        source: Source de la release.
        video_codec: Codec video.
        is_hdr: Variante HDR detectee.
        is_dolby_vision: Dolby Vision detecte.
        is_atmos: Piste Atmos detectee.

    Returns:
        Score entier de 0 a 100.
    """
    weighted = (
        score_resolution(resolution) * WEIGHT_RESOLUTION
        + score_source(source) * WEIGHT_SOURCE
        + score_video_codec(video_codec) * WEIGHT_VIDEO_CODEC
    )
    score = math.floor(weighted + 0.5)

    if is_hdr:
        score = _add_bonus(score, BONUS_HDR)
    if is_dolby_vision:
        score = _add_bonus(score, BONUS_DOLBY_VISION)
    if is_atmos:
        score = _add_bonus(score, BONUS_ATMOS)

    return score
