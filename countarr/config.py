"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe COUNTARR_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de countarr/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

OUTPUT_FORMATS = ("table", "json")


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe COUNTARR_.
    Exemple : COUNTARR_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="COUNTARR_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Affichage CLI
    output_format: str = Field(default="table")
    top_groups_limit: int = Field(default=10, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/countarr.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("output_format")
    @classmethod
    def check_output_format(cls, v: str) -> str:
        """Vérifie que le format de sortie est supporté (table ou json)."""
        value = v.lower()
        if value not in OUTPUT_FORMATS:
            raise ValueError(
                f"Format de sortie inconnu: {v} (attendu: {', '.join(OUTPUT_FORMATS)})"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules."""
        return v.upper()

    @property
    def json_output(self) -> bool:
        """Vérifie si la sortie JSON est configurée par défaut."""
        return self.output_format == "json"
