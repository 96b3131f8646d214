"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe APPREG_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.entities.application import ExpiryPolicy

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe APPREG_.
    Exemple : APPREG_EXPIRY_MONTHS=3

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="APPREG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///appreg.db")

    # Expiration
    expiry_months: int = Field(default=1, ge=1)
    expiry_policy: ExpiryPolicy = Field(default=ExpiryPolicy.PER_APPLICATION)

    # Logging (stderr, journal JSON, journal des notifications ; rotation 10MB, 5 fichiers)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/appreg.log"))
    notification_log_file: Path = Field(default=Path("logs/notifications.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", "notification_log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()
