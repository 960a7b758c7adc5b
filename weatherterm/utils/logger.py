"""Logging configuration."""

import logging
import sys
from typing import Optional, TextIO

from pythonjsonlogger.json import JsonFormatter
from weatherterm.config import settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s"


def build_formatter(log_format: str) -> logging.Formatter:
    """Get the formatter for a log format name; anything but json is plain text."""
    if log_format.lower() == "json":
        return JsonFormatter(
            JSON_FIELDS,
            rename_fields={"asctime": "time", "levelname": "level", "name": "logger"},
        )
    return logging.Formatter(TEXT_FORMAT)


def setup_logger(
    name: str = __name__,
    level: Optional[str] = None,
    log_format: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Set up a module logger.

    Records go to stderr by default because stdout may be the report sink.

    Args:
        name: Logger name, usually ``__name__``
        level: Level name (default: settings.log_level)
        log_format: ``json`` or ``text`` (default: settings.log_format)
        stream: Destination stream (default: stderr)

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    level_value = getattr(logging, (level or settings.log_level).upper(), None)
    logger.setLevel(level_value if isinstance(level_value, int) else logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(build_formatter(log_format or settings.log_format))
        logger.addHandler(handler)

    return logger
