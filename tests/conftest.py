"""
Fixtures pytest partagees pour les tests Countarr.

Ce module contient les fixtures communes utilisees dans les tests:
- Service de classification
- Settings de test isoles de l'environnement
- Lot de titres de release representatif
"""

from pathlib import Path

import pytest

from countarr.config import Settings
from countarr.services.quality_parser import QualityParserService


@pytest.fixture
def parser() -> QualityParserService:
    """Service de classification sans etat."""
    return QualityParserService()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Ignore le fichier .env pour ne pas dependre de la machine.
    """
    return Settings(
        _env_file=None,
        output_format="table",
        top_groups_limit=10,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture(autouse=True)
def clean_countarr_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Retire les variables COUNTARR_ de l'environnement de test."""
    for name in ("COUNTARR_OUTPUT_FORMAT", "COUNTARR_TOP_GROUPS_LIMIT", "COUNTARR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_titles() -> list[str]:
    """Lot de titres de release pour les statistiques."""
    return [
        "Movie.A.2023.2160p.BluRay.REMUX.HEVC.DV.TrueHD.Atmos-FraMeSToR",
        "Movie.B.2022.1080p.BluRay.x264-SPARKS",
        "Movie.C.2021.1080p.BluRay.x264-SPARKS.mkv",
        "Show.S01E01.720p.WEB-DL.x264-NTb",
        "Random Home Video",
    ]
