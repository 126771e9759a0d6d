"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MOVIES_API_,
et peut optionnellement être fournie via un fichier .env.

La clé API OMDb est optionnelle - la note Rotten Tomatoes est omise si elle n'est pas fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètrès de l'application avec support des variables d'environnement.

    Tous les paramètrès peuvent être surchargés via des variables d'environnement
    avec le préfixe MOVIES_API_.
    Exemple : MOVIES_API_OMDB_API_KEY=abcd1234
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIES_API_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    environment: str = Field(default="development")

    # Bases de données (catalogue + notes individuelles)
    database_url: str = Field(default="sqlite:///db/movies.db")
    ratings_database_url: str = Field(default="sqlite:///db/ratings.db")

    # Service de notes local
    ratings_api_url: str = Field(default="http://localhost:3000")
    local_ratings_timeout: float = Field(default=5.0, gt=0)

    # API OMDb (OPTIONNELLE - note Rotten Tomatoes désactivée si non définie)
    omdb_api_url: str = Field(default="https://www.omdbapi.com/")
    omdb_api_key: Optional[str] = Field(default=None)
    omdb_timeout: float = Field(default=10.0, gt=0)

    # Pagination des listes
    page_size: int = Field(default=50, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/movies_api.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("omdb_api_key", mode="before")
    @classmethod
    def blank_key_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Une clé vide ou composée d'espaces équivaut à une clé absente."""
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("ratings_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Supprime le / final pour construire les URLs /ratings/{id}."""
        return v.rstrip("/")

    @property
    def omdb_enabled(self) -> bool:
        """Vérifie si l'API OMDb est configurée."""
        return self.omdb_api_key is not None
