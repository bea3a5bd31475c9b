"""Leveled, optionally colored console logging."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from sak import config

COLOR_RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[90m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[31m",
}

LEVEL_NAMES = {
    logging.WARNING: "WARN",
}


class ColorFormatter(logging.Formatter):
    """Render records as ``[LEVEL] message`` with an ANSI colored tag."""

    def __init__(self, colors: bool = True) -> None:
        super().__init__("%(message)s")
        self.colors = colors

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        level = LEVEL_NAMES.get(record.levelno, record.levelname)
        if self.colors:
            color = LEVEL_COLORS.get(record.levelno, "")
            return f"{color}[{level}]{COLOR_RESET} {message}"
        return f"[{level}] {message}"


def setup_logging(verbose: bool = False, colors: Optional[bool] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single console handler to the ``sak`` logger."""

    root = logging.getLogger("sak")
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ColorFormatter(config.USE_COLORS if colors is None else colors))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.INFO))
    return root
