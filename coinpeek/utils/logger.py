"""Centralized logger configuration.

Usage:
    from coinpeek.utils.logger import get_logger
    logger = get_logger(__name__)

Modules grab loggers at import time, which installs a default handler if none
exists. The GUI entrypoint then calls ``setup_logging(level, force=True)`` so
the configured level replaces that default.
"""
import logging
import os
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LEVEL = os.getenv("COINPEEK_LOG_LEVEL", "INFO")


def resolve_level(level: Union[str, int]) -> int:
    """Map a level name (any case) or number to a logging level; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: Union[str, int] = DEFAULT_LEVEL, force: bool = False) -> None:
    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT, force=force)
    # SQL echo stays off unless explicitly debugging
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if resolve_level(level) <= logging.DEBUG else logging.WARNING
    )


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
