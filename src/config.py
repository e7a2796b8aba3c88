"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe COMPTOIRS_,
et peut optionnellement être fournie via un fichier .env.

Les parametres de la politique de remise (seuil d'articles, taux) sont
configurables ; leurs valeurs par defaut sont celles des regles metier.
"""

from decimal import Decimal
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe COMPTOIRS_.
    Exemple : COMPTOIRS_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="COMPTOIRS_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///comptoirs.db")
    database_echo: bool = Field(default=False)

    # Politique de remise : au-dela de discount_threshold articles deja commandes
    discount_threshold: int = Field(default=100, ge=0)
    # Deux decimales, comme la colonne orders.discount
    loyalty_discount: Decimal = Field(default=Decimal("0.15"), ge=0, le=1, decimal_places=2)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/comptoirs.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def is_sqlite(self) -> bool:
        """Vérifie si la base configurée est SQLite."""
        return self.database_url.startswith("sqlite")
