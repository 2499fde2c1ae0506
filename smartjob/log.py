"""Package logging: one stderr handler on the ``smartjob`` logger."""
from __future__ import annotations

import logging
import sys

from smartjob import config

_ROOT_NAME = "smartjob"
_FORMAT = "[SmartJob] %(levelname)s %(name)s: %(message)s"
_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under ``smartjob``; configures the handler on first call."""
    global _configured
    if not _configured:
        _configure()
        _configured = True
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + "."):
        name = f"{_ROOT_NAME}.{name}"
    return logging.getLogger(name)


def _configure() -> None:
    level = getattr(logging, config.SMARTJOB_LOG_LEVEL, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    root = logging.getLogger(_ROOT_NAME)
    root.setLevel(level)

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)


def set_level(level_name: str) -> None:
    """Override the package log level (used by the CLI --verbose flag)."""
    get_logger(_ROOT_NAME).setLevel(getattr(logging, level_name.upper(), logging.WARNING))
