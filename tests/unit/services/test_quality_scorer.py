"""
Tests unitaires pour le calcul du score de qualite.

Tests TDD pour le score pondere et les bonus plafonnes.
"""

from itertools import product

import pytest

from countarr.core.value_objects.quality import (
    QualitySource,
    Resolution,
    VideoCodec,
)
from countarr.services.quality_scorer import (
    RESOLUTION_SCORES,
    SOURCE_SCORES,
    VIDEO_CODEC_SCORES,
    calculate_quality_score,
    score_resolution,
    score_source,
    score_video_codec,
)


# ====================
# Tests des tables
# ====================

class TestScoreTables:
    """Tests pour les tables de scores."""

    @pytest.mark.parametrize(
        ("resolution", "expected"),
        [
            (Resolution.P2160, 100),
            (Resolution.P1080, 75),
            (Resolution.P720, 50),
            (Resolution.P576, 30),
            (Resolution.P480, 20),
            (Resolution.UNKNOWN, 0),
        ],
    )
    def test_score_resolution(self, resolution: Resolution, expected: int) -> None:
        """Score de chaque classe de resolution."""
        assert score_resolution(resolution) == expected

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            (QualitySource.REMUX, 100),
            (QualitySource.BLURAY, 90),
            (QualitySource.WEBDL, 80),
            (QualitySource.WEBRIP, 70),
            (QualitySource.HDTV, 50),
            (QualitySource.DVD, 30),
            (QualitySource.TELECINE, 20),
            (QualitySource.TELESYNC, 15),
            (QualitySource.CAM, 5),
            (QualitySource.WORKPRINT, 5),
            (QualitySource.UNKNOWN, 0),
        ],
    )
    def test_score_source(self, source: QualitySource, expected: int) -> None:
        """Score de chaque source."""
        assert score_source(source) == expected

    @pytest.mark.parametrize(
        ("codec", "expected"),
        [
            (VideoCodec.AV1, 100),
            (VideoCodec.X265, 90),
            (VideoCodec.H265, 90),
            (VideoCodec.HEVC, 90),
            (VideoCodec.VP9, 75),
            (VideoCodec.X264, 70),
            (VideoCodec.H264, 70),
            (VideoCodec.XVID, 30),
            (VideoCodec.DIVX, 30),
            (VideoCodec.MPEG2, 20),
            (VideoCodec.UNKNOWN, 0),
        ],
    )
    def test_score_video_codec(self, codec: VideoCodec, expected: int) -> None:
        """Score de chaque codec video."""
        assert score_video_codec(codec) == expected

    def test_tables_cover_every_member(self) -> None:
        """Chaque membre des enumerations a un score."""
        assert set(RESOLUTION_SCORES) == set(Resolution)
        assert set(SOURCE_SCORES) == set(QualitySource)
        assert set(VIDEO_CODEC_SCORES) == set(VideoCodec)


# ====================
# Tests calculate_quality_score
# ====================

class TestCalculateQualityScore:
    """Tests pour le score pondere."""

    def test_all_unknown(self) -> None:
        """Tout inconnu donne 0."""
        assert calculate_quality_score(
            Resolution.UNKNOWN, QualitySource.UNKNOWN, VideoCodec.UNKNOWN
        ) == 0

    def test_maximum(self) -> None:
        """2160p Remux AV1 donne 100."""
        assert calculate_quality_score(
            Resolution.P2160, QualitySource.REMUX, VideoCodec.AV1
        ) == 100

    def test_half_rounds_up(self) -> None:
        """65.5 est arrondi a 66."""
        assert calculate_quality_score(
            Resolution.P720, QualitySource.WEBDL, VideoCodec.X264
        ) == 66

    def test_float_sum_just_below_half(self) -> None:
        """BluRay seul : 90 * 0.35 vaut 31.499999999999996, arrondi a 31."""
        assert calculate_quality_score(
            Resolution.UNKNOWN, QualitySource.BLURAY, VideoCodec.UNKNOWN
        ) == 31


    def test_weighting(self) -> None:
        """1080p BluRay x264 : 30 + 31.5 + 17.5 = 79."""
        assert calculate_quality_score(
            Resolution.P1080, QualitySource.BLURAY, VideoCodec.X264
        ) == 79

    def test_low_quality(self) -> None:
        """480p HDTV XviD : 8 + 17.5 + 7.5 = 33."""
        assert calculate_quality_score(
            Resolution.P480, QualitySource.HDTV, VideoCodec.XVID
        ) == 33

    def test_hdr_bonus(self) -> None:
        """HDR ajoute 5 points."""
        base = calculate_quality_score(
            Resolution.P1080, QualitySource.WEBDL, VideoCodec.X265
        )
        with_hdr = calculate_quality_score(
            Resolution.P1080, QualitySource.WEBDL, VideoCodec.X265, is_hdr=True
        )
        assert with_hdr == base + 5

    def test_bonuses_without_dimensions(self) -> None:
        """Les bonus s'additionnent : 5 + 3 + 2."""
        assert calculate_quality_score(
            Resolution.UNKNOWN,
            QualitySource.UNKNOWN,
            VideoCodec.UNKNOWN,
            is_hdr=True,
            is_dolby_vision=True,
            is_atmos=True,
        ) == 10

    def test_bonus_truncated_at_100(self) -> None:
        """Un bonus qui depasse 100 est tronque, pas ignore."""
        # Base 98 (2160p Remux x265)
        assert calculate_quality_score(
            Resolution.P2160, QualitySource.REMUX, VideoCodec.X265, is_atmos=True
        ) == 100
        assert calculate_quality_score(
            Resolution.P2160, QualitySource.REMUX, VideoCodec.X265, is_dolby_vision=True
        ) == 100

    def test_all_bonuses_on_maximum(self) -> None:
        """HDR + DV + Atmos sur une base de 100 reste a 100."""
        assert calculate_quality_score(
            Resolution.P2160,
            QualitySource.REMUX,
            VideoCodec.AV1,
            is_hdr=True,
            is_dolby_vision=True,
            is_atmos=True,
        ) == 100

    def test_score_always_in_range(self) -> None:
        """Toutes les combinaisons donnent un entier entre 0 et 100."""
        flags = (False, True)
        for resolution, source, codec, hdr, dv, atmos in product(
            Resolution, QualitySource, VideoCodec, flags, flags, flags
        ):
            score = calculate_quality_score(
                resolution,
                source,
                codec,
                is_hdr=hdr,
                is_dolby_vision=dv,
                is_atmos=atmos,
            )
            assert isinstance(score, int)
            assert 0 <= score <= 100
