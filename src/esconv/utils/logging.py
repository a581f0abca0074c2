"""Structured logging configuration.

Converters attach their context (target metric, study label) to
warnings through ``extra={"extra": {...}}``. The JSON formatter merges
it into the record; the text formatter appends it as ``key=value``.
"""

import logging
import json
import sys
from typing import Any, Dict

from ..config.settings import settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _context(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in getattr(record, "extra", {}).items() if v is not None}


class JSONFormatter(logging.Formatter):
    """Format logs as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(_context(record))
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


class ContextFormatter(logging.Formatter):
    """Plain text with the conversion context appended."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            line += " [" + " ".join(f"{k}={v}" for k, v in context.items()) + "]"
        return line


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JSONFormatter()
    return ContextFormatter(TEXT_FORMAT)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(build_formatter(settings.log_format))
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    return logger
