from __future__ import annotations
import logging
import os

COLORS = {
    "RESET": "\033[0m",
    "GRAY": "\033[90m",
    "RED": "\033[91m",
    "YELLOW": "\033[93m",
    "MAGENTA": "\033[95m",
    "CYAN": "\033[96m",
}

LEVEL_COLOR = {
    logging.DEBUG: "GRAY",
    logging.INFO: "CYAN",
    logging.WARNING: "YELLOW",
    logging.ERROR: "RED",
    logging.CRITICAL: "MAGENTA",
}

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def color_enabled() -> bool:
    # LOG_COLOR=0 or any NO_COLOR value turns colors off
    return os.getenv("LOG_COLOR", "1") == "1" and os.getenv("NO_COLOR") is None


class ColorFormatter(logging.Formatter):
    def __init__(self, fmt: str | None = None, use_color: bool | None = None) -> None:
        super().__init__(fmt)
        self.use_color = color_enabled() if use_color is None else use_color

    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        if not self.use_color:
            return msg
        color = COLORS.get(LEVEL_COLOR.get(record.levelno, "RESET"), "")
        reset = COLORS["RESET"]
        return f"{color}{msg}{reset}"


def install_color_handler(logger: logging.Logger, level: int | str = logging.INFO) -> None:
    logger.setLevel(level)
    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(ColorFormatter(LOG_FORMAT))
    logger.addHandler(handler)
