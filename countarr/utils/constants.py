"""
Constantes globales pour Countarr.

Ce module contient les constantes partagees par le classificateur:
- Extensions de conteneurs video retirees avant l'extraction du groupe
- Faux positifs de groupe de release (tags de qualite en fin de nom)
- Libelles d'affichage des sources
"""

from countarr.core.value_objects.quality import QualitySource

# Extensions retirees en fin de titre avant l'extraction du groupe
CONTAINER_EXTENSIONS = (
    "mkv",
    "mp4",
    "avi",
    "mov",
    "wmv",
    "flv",
    "webm",
)

# Tags de qualite souvent places apres le dernier tiret (compares en minuscules)
RELEASE_GROUP_FALSE_POSITIVES = frozenset({
    "720p",
    "1080p",
    "2160p",
    "x264",
    "x265",
    "hevc",
    "hdr",
    "remux",
    "bluray",
    "web",
    "amzn",
    "nf",
})

# Libelles canoniques des sources pour l'affichage
SOURCE_DISPLAY_NAMES: dict[QualitySource, str] = {
    QualitySource.REMUX: "Remux",
    QualitySource.BLURAY: "BluRay",
    QualitySource.WEBDL: "WEB-DL",
    QualitySource.WEBRIP: "WEBRip",
    QualitySource.HDTV: "HDTV",
    QualitySource.DVD: "DVD",
    QualitySource.CAM: "CAM",
    QualitySource.TELESYNC: "TS",
    QualitySource.TELECINE: "TC",
    QualitySource.WORKPRINT: "WP",
}

UNKNOWN_LABEL = "Unknown"
