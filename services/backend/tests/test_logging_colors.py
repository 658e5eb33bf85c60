import logging
import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.append(str(BACKEND_DIR))

from crop_relay.utils.logging_colors import (  # noqa: E402
    COLORS,
    ColorFormatter,
    color_enabled,
    install_color_handler,
)


def _record(level: int) -> logging.LogRecord:
    return logging.LogRecord("crop_relay.test", level, __file__, 1, "hello %s", ("world",), None)


def test_formatter_wraps_in_level_color():
    text = ColorFormatter("%(message)s", use_color=True).format(_record(logging.ERROR))

    assert text == f"{COLORS['RED']}hello world{COLORS['RESET']}"


def test_formatter_plain_when_disabled():
    text = ColorFormatter("%(message)s", use_color=False).format(_record(logging.WARNING))

    assert text == "hello world"


def test_no_color_env_disables(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")

    assert color_enabled() is False


def test_install_is_idempotent():
    logger = logging.getLogger("crop_relay.tests.idempotent")
    logger.handlers.clear()

    install_color_handler(logger, "DEBUG")
    install_color_handler(logger, "DEBUG")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    logger.handlers.clear()
