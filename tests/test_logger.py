import logging
from unittest.mock import patch

import pytest

from coinpeek.utils.logger import LOG_FORMAT, get_logger, resolve_level, setup_logging


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", logging.DEBUG),
        (" Warning ", logging.WARNING),
        ("ERROR", logging.ERROR),
        (logging.CRITICAL, logging.CRITICAL),
        ("not-a-level", logging.INFO),
    ],
)
def test_resolve_level(value, expected):
    assert resolve_level(value) == expected


def test_setup_logging_forwards_level_and_force():
    with patch("coinpeek.utils.logger.logging.basicConfig") as basic_config:
        setup_logging("debug", force=True)
    basic_config.assert_called_once_with(level=logging.DEBUG, format=LOG_FORMAT, force=True)


def test_sqlalchemy_logs_quiet_unless_debugging():
    sa_logger = logging.getLogger("sqlalchemy.engine")
    previous = sa_logger.level
    try:
        with patch("coinpeek.utils.logger.logging.basicConfig"):
            setup_logging("INFO")
            assert sa_logger.level == logging.WARNING
            setup_logging("DEBUG")
            assert sa_logger.level == logging.INFO
    finally:
        sa_logger.setLevel(previous)


def test_get_logger_returns_named_logger():
    assert get_logger("coinpeek.test").name == "coinpeek.test"


def test_main_reconfigures_logging_with_settings_level(monkeypatch):
    from gui import app as app_module

    monkeypatch.setenv("COINPEEK_LOG_LEVEL", "error")
    with patch.object(app_module, "setup_logging") as setup, patch.object(
        app_module, "CoinPeekApp"
    ) as app_cls:
        app_module.main()

    setup.assert_called_once_with("ERROR", force=True)
    app_cls.return_value.run.assert_called_once_with()
