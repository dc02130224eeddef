"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe WATCHBOT_,
et peut optionnellement être fournie via un fichier .env ou un fichier config.yaml.

Le token Telegram et la clé API TMDB sont obligatoires : leur absence est une
erreur fatale au démarrage (StartupConfigError).
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from src.core.exceptions import StartupConfigError

# Fichiers de configuration a la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"
_YAML_FILE = _PROJECT_ROOT / "config.yaml"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe WATCHBOT_.
    Exemple : WATCHBOT_LOG_LEVEL=DEBUG

    Priorité : arguments explicites > environnement > .env > config.yaml.
    """

    model_config = SettingsConfigDict(
        env_prefix="WATCHBOT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        yaml_file=_YAML_FILE if _YAML_FILE.exists() else "config.yaml",
        case_sensitive=False,
        extra="ignore",
    )

    # Secrets (OBLIGATOIRES)
    telegram_token: str = Field(min_length=1)
    tmdb_api_key: str = Field(min_length=1)

    # Catalogue TMDB
    tmdb_language: str = Field(default="fr-FR")
    tmdb_timeout: Optional[float] = Field(default=None, gt=0)

    # Base de données
    database_url: str = Field(default="sqlite:///watched.db")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/watchbot.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Ajoute config.yaml comme source de plus faible priorité."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()


def load_settings(**overrides) -> Settings:
    """
    Charge la configuration une seule fois au démarrage.

    Args:
        **overrides: Valeurs explicites prioritaires (tests, CLI)

    Returns:
        Settings validés

    Raises:
        StartupConfigError: Si un paramètre obligatoire manque ou est invalide
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in e.errors()
        )
        raise StartupConfigError(f"Configuration invalide ou incomplète : {fields}") from e
