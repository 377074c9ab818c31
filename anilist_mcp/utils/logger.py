"""Logging setup for anilist-mcp.

stdout carries the MCP stdio stream, so every record goes to stderr as JSON.
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

_LOGGER_NAME = "anilist_mcp"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def setup_logging(level: str = "INFO") -> None:
    """Attach a JSON stderr handler to the package logger (once)."""
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level.upper())
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter("%(levelname)s %(message)s %(asctime)s %(name)s"))
    logger.addHandler(handler)


logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())
