"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Resolution : Classe de resolution video (2160p, 1080p, ...)
- QualitySource : Source de la release (Remux, BluRay, WEB-DL, ...)
- VideoCodec : Codec video (AV1, x265, H.264, ...)
- AudioCodec : Codec audio (Atmos, TrueHD, DTS, ...)
- ParsedQuality : Qualite extraite d'un titre de release
- ParsedRelease : Qualite et groupe de release d'un titre
"""

from countarr.core.value_objects.quality import (
    AudioCodec,
    ParsedQuality,
    ParsedRelease,
    QualitySource,
    Resolution,
    VideoCodec,
)

__all__ = [
    "Resolution",
    "QualitySource",
    "VideoCodec",
    "AudioCodec",
    "ParsedQuality",
    "ParsedRelease",
]
