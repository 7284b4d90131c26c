"""
Configuration de l'application.

Deux niveaux de configuration :
- config.json : document utilisateur obligatoire indiquant le répertoire à trier
  ({"rootDir": "..."}). Son absence est fatale, aucune valeur par défaut.
- Settings : paramètres d'environnement via pydantic-settings (préfixe SYOBOI_,
  fichier .env optionnel) pour l'URL de l'API, le timeout et le logging.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from syoboi_sorting.core.errors import ConfigReadError

# Trouver le fichier .env à la racine du projet (parent du package)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

DEFAULT_CONFIG_FILE = Path("config.json")
TITLE_MEDIUM_URL = "https://cal.syoboi.jp/json.php?Req=TitleMedium"


class Config(BaseModel):
    """
    Contenu de config.json.

    Immuable une fois chargé, durée de vie = celle du processus.
    """

    model_config = ConfigDict(frozen=True)

    root_dir: Path = Field(alias="rootDir")

    @field_validator("root_dir")
    @classmethod
    def expand_path(cls, v: Path) -> Path:
        """Étend ~ vers le répertoire home."""
        return v.expanduser()


def load_config(path: Path = DEFAULT_CONFIG_FILE) -> Config:
    """
    Charge config.json.

    Args:
        path: Chemin du fichier de configuration (défaut: ./config.json)

    Returns:
        Config avec root_dir égal à la valeur de "rootDir"

    Raises:
        ConfigReadError: Fichier absent, illisible, JSON invalide ou champ manquant
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path, str(e)) from e

    try:
        return Config.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigReadError(path, str(e)) from e


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe SYOBOI_.
    Exemple : SYOBOI_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="SYOBOI_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Fichier de configuration utilisateur
    config_file: Path = Field(default=DEFAULT_CONFIG_FILE)

    # API Syoboi Calendar
    api_url: str = Field(default=TITLE_MEDIUM_URL)
    request_timeout: float = Field(default=30.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/syoboi-sorting.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("config_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()
