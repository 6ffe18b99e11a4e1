"""
utils/logger.py
---------------
Logging for the LightBnB data layer.
Modules call `get_logger(__name__)`; the CLI calls `set_level("DEBUG")`
to see the assembled search SQL.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: logging.Handler | None = None


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _init_logging() -> None:
    global _handler
    if _handler is not None:
        return
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(_level(LOG_LEVEL))
    root.addHandler(_handler)


def set_level(name: str) -> None:
    """Change the root level at runtime. Unknown names mean INFO."""
    _init_logging()
    logging.getLogger().setLevel(_level(name))


def get_logger(name: str) -> logging.Logger:
    """Return the named logger, configuring the root logger on first use."""
    _init_logging()
    return logging.getLogger(name)
