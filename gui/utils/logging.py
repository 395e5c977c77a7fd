"""Logging helpers for the GUI.

Routes through the shared logger setup rather than configuring handlers here.
"""

from __future__ import annotations

import logging

from coinpeek.utils.logger import get_logger

logger = get_logger("coinpeek.gui")


def log(message: str, level: int = logging.INFO) -> None:
    logger.log(level, message)
