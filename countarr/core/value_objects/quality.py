"""
Objets valeur pour la qualite des releases.

Enumerations des dimensions de qualite (resolution, source, codecs) et
objet valeur immutable ParsedQuality produit par la classification d'un
titre de release. Chaque enumeration possede un membre UNKNOWN : une
dimension n'est jamais absente.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Resolution(str, Enum):
    """Classe de resolution verticale."""

    P2160 = "2160p"
    P1080 = "1080p"
    P720 = "720p"
    P576 = "576p"
    P480 = "480p"
    UNKNOWN = "unknown"


class QualitySource(str, Enum):
    """Source d'acquisition ou d'encodage de la release.

    Valeurs:
        REMUX: Remux sans reencodage d'un disque
        BLURAY: Encodage depuis un Blu-ray
        WEBDL: Telechargement depuis un service de streaming
        WEBRIP: Capture d'un flux de streaming
        HDTV: Capture television
        DVD: Source DVD
        CAM, TELESYNC, TELECINE, WORKPRINT: Sources de salle / pre-release
        UNKNOWN: Source non determinee
    """

    REMUX = "remux"
    BLURAY = "bluray"
    WEBDL = "webdl"
    WEBRIP = "webrip"
    HDTV = "hdtv"
    DVD = "dvd"
    CAM = "cam"
    TELESYNC = "telesync"
    TELECINE = "telecine"
    WORKPRINT = "workprint"
    UNKNOWN = "unknown"


class VideoCodec(str, Enum):
    """Codec video."""

    AV1 = "av1"
    X265 = "x265"
    H265 = "h265"
    HEVC = "hevc"
    X264 = "x264"
    H264 = "h264"
    VP9 = "vp9"
    XVID = "xvid"
    DIVX = "divx"
    MPEG2 = "mpeg2"
    UNKNOWN = "unknown"


class AudioCodec(str, Enum):
    """Codec audio."""

    ATMOS = "atmos"
    TRUEHD = "truehd"
    DTSHD = "dtshd"
    DTS = "dts"
    EAC3 = "eac3"
    AC3 = "ac3"
    FLAC = "flac"
    AAC = "aac"
    OPUS = "opus"
    MP3 = "mp3"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ParsedQuality:
    """
    Qualite extraite d'un titre de release.

    Objet valeur immutable construit a chaque classification.
    Les champs enumeres valent UNKNOWN quand aucun motif ne correspond.

    Attributs:
        resolution: Classe de resolution
        source: Source de la release
        video_codec: Codec video
        audio_codec: Codec audio
        is_3d: Release stereoscopique
        is_hdr: Une variante HDR est detectee (Dolby Vision inclus)
        is_dolby_vision: Dolby Vision detecte
        is_atmos: Piste Dolby Atmos detectee
        quality_score: Score entier de 0 a 100
    """

    resolution: Resolution = Resolution.UNKNOWN
    source: QualitySource = QualitySource.UNKNOWN
    video_codec: VideoCodec = VideoCodec.UNKNOWN
    audio_codec: AudioCodec = AudioCodec.UNKNOWN
    is_3d: bool = False
    is_hdr: bool = False
    is_dolby_vision: bool = False
    is_atmos: bool = False
    quality_score: int = 0

    @classmethod
    def unknown(cls) -> "ParsedQuality":
        """Retourne la qualite de reference : tout inconnu, score 0."""
        return cls()

    def to_dict(self) -> dict[str, Any]:
        """
        Serialise la qualite en dictionnaire JSON.

        Les cles suivent le format camelCase attendu par le tableau de bord
        (videoCodec, isHdr, qualityScore...).
        """
        return {
            "resolution": self.resolution.value,
            "source": self.source.value,
            "videoCodec": self.video_codec.value,
            "audioCodec": self.audio_codec.value,
            "is3d": self.is_3d,
            "isHdr": self.is_hdr,
            "isDolbyVision": self.is_dolby_vision,
            "isAtmos": self.is_atmos,
            "qualityScore": self.quality_score,
        }


@dataclass(frozen=True)
class ParsedRelease:
    """
    Resultat complet de l'analyse d'un titre de release.

    Regroupe ce que le pipeline d'import stocke pour chaque evenement
    de telechargement.

    Attributs:
        title: Titre de release d'origine
        quality: Qualite classifiee
        release_group: Groupe de release, ou None
    """

    title: str
    quality: ParsedQuality
    release_group: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise la release en dictionnaire JSON."""
        return {
            "title": self.title,
            "releaseGroup": self.release_group,
            **self.quality.to_dict(),
        }
