"""
Logging Setup

Routes service loggers to stdout using the level, format and root logger
name from the application config.
"""

import logging
import sys
from typing import Optional

DEFAULT_LOGGER_NAME = "batchcost"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_logger_name = DEFAULT_LOGGER_NAME
_handler: Optional[logging.Handler] = None


def configure_logging(config) -> None:
    """Apply LOG_LEVEL, LOG_FORMAT and LOGGER_NAME from a config mapping."""
    global _logger_name, _handler
    _logger_name = config.get("LOGGER_NAME") or DEFAULT_LOGGER_NAME

    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        root.addHandler(_handler)
    _handler.setFormatter(logging.Formatter(config.get("LOG_FORMAT") or DEFAULT_LOG_FORMAT))
    root.setLevel(config.get("LOG_LEVEL") or "INFO")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a named logger; without a name, the application logger."""
    return logging.getLogger(name or _logger_name)
