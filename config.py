"""
projects-api/config.py
Configuration de l'API (variables d'environnement)
"""

import os
import logging
from typing import List

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes", "y", "on"}


def _env(name: str, default: str = "") -> str:
    return str(os.getenv(name, default)).strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, "1" if default else "0").lower()
    return raw in TRUE_VALUES


def _env_int(name: str, default: int, min_value: int = 0) -> int:
    raw = _env(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid {name} value: '{raw}'. Using default {default}")
        return default
    return max(min_value, value)


class Config:
    """Configuration centrale chargée depuis l'environnement"""

    def __init__(self):
        # Base de données
        self.database_url = _env("DATABASE_URL", "sqlite:///./projects.db")
        self.db_pool_size = _env_int("DB_POOL_SIZE", 5, min_value=1)
        self.db_max_overflow = _env_int("DB_MAX_OVERFLOW", 0)
        self.db_pool_timeout = _env_int("DB_POOL_TIMEOUT", 3, min_value=1)
        self.seed_data = _env_bool("SEED_DATA", False)

        # Serveur
        self.host = _env("HOST", "0.0.0.0")
        self.port = _env_int("PORT", 3000, min_value=1)
        self.cors_origins: List[str] = [
            origin.strip()
            for origin in _env("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:3001").split(",")
            if origin.strip()
        ]

        # Limitation de débit
        self.rate_limit_enabled = _env_bool("RATE_LIMIT_ENABLED", True)
        self.rate_limit_per_second = _env_int("RATE_LIMIT_PER_SECOND", 100, min_value=1)
        self.rate_limit_burst = _env_int("RATE_LIMIT_BURST", 20, min_value=1)
        self.rate_limit_sweep_seconds = _env_int("RATE_LIMIT_SWEEP_SECONDS", 60, min_value=1)

        # Logging
        self.log_level = _env("LOG_LEVEL", "INFO")
        self.log_colored = _env_bool("LOG_COLORED", False)
        self.log_file_enabled = _env_bool("LOG_FILE_ENABLED", False)
        self.log_file_path = _env("LOG_FILE_PATH", "logs/projects-api.log")

    @property
    def rate_limit_max_requests(self) -> int:
        """
        Nombre de requêtes admises par fenêtre glissante d'une seconde.

        Seule la rafale est appliquée ; RATE_LIMIT_PER_SECOND est lu et
        journalisé mais ne borne rien.
        """
        return self.rate_limit_burst
