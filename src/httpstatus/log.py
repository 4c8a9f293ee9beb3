"""
Logging setup for the httpstatus package.

Importing the package never touches logging configuration; applications
that want to see registry diagnostics call setup_logging() once:

    from httpstatus import LoggingConfig, setup_logging

    setup_logging(LoggingConfig(log_level="DEBUG", log_format="json"))
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

from .config import LoggingConfig


TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON object (for log aggregators)."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger based on ``config``.

    Calling it again replaces the handler installed by the previous call
    instead of stacking a second one.
    """
    config = config or LoggingConfig.from_env()
    config.validate()

    level = getattr(logging, config.log_level.upper(), logging.WARNING)
    logger = logging.getLogger(config.logger_name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_httpstatus_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    if config.log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT))
    handler._httpstatus_handler = True
    logger.addHandler(handler)

    return logger
