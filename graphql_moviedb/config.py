"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe
GRAPHQL_MOVIEDB_, et peut optionnellement être fournie via un fichier .env.

Les identifiants TMDB sont optionnels : sans clé v3 les requêtes v3 sont
refusées par TMDB, sans token de lecture v4 seules les requêtes portant un
token utilisateur peuvent interroger l'API v4.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de graphql_moviedb/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe GRAPHQL_MOVIEDB_.
    Exemple : GRAPHQL_MOVIEDB_ENVIRONMENT=development

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="GRAPHQL_MOVIEDB_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Identifiants TMDB (OPTIONNELS)
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_api_read_access_token: Optional[str] = Field(default=None)

    # Mode : development expose GraphiQL et le détail des erreurs
    environment: Literal["development", "production"] = Field(default="production")

    # Serveur HTTP
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=4000, ge=1, le=65535)
    request_timeout: float = Field(default=30.0, gt=0)

    # Cache des réponses GET (partagé entre requêtes)
    cache_dir: Path = Field(default=Path(".cache/api"))
    response_cache_ttl: int = Field(default=10000, ge=0)

    # Sessions v3 obtenues à partir des tokens utilisateur v4
    session_cache_dir: Path = Field(default=Path(".cache/sessions"))
    session_cache_ttl: int = Field(default=24 * 60 * 60, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/graphql-moviedb.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "session_cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def is_development(self) -> bool:
        """Vérifie si l'application tourne en mode développement."""
        return self.environment == "development"

    @property
    def v3_enabled(self) -> bool:
        """Vérifie si l'API TMDB v3 est configurée."""
        return bool(self.tmdb_api_key)

    @property
    def v4_enabled(self) -> bool:
        """Vérifie si l'API TMDB v4 est configurée."""
        return bool(self.tmdb_api_read_access_token)
