"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. The GUI entrypoint calls get_settings()
before building the persistence container so .env is respected.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
DEFAULT_DB_PATH = os.path.join(PROJECT_ROOT, "data", "coinpeek.db")


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    # Database (root-level data directory by default)
    database_url: str = field(
        default_factory=lambda: os.getenv(
            "COINPEEK_DATABASE_URL", "sqlite:///" + DEFAULT_DB_PATH
        )
    )
    in_memory: bool = field(default_factory=lambda: _env_flag("COINPEEK_IN_MEMORY"))

    # Window
    window_title: str = field(
        default_factory=lambda: os.getenv("COINPEEK_WINDOW_TITLE", "CoinPeek")
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("COINPEEK_LOG_LEVEL", "INFO").upper()
    )


def get_settings() -> Settings:
    """Return a new Settings instance (re-reads the environment)."""
    return Settings()
