"""Logging setup for the ``planekit`` logger tree.

The kernel only emits records; applications decide where they go. The
structured formatter writes one JSON object per line, tagging each record
with a category derived from the emitting module:

- collision: segment/rect tests and rect collision response
- resampling: polygon, resampling and morph operations
- system: anything else
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from typing import TextIO

PACKAGE_LOGGER = "planekit"

PLAIN_FORMAT = "%(asctime)s %(levelname)5s [%(name)s] %(message)s"

# Attributes every LogRecord carries; anything else came in via ``extra=``
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

_MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB
_LOG_BACKUPS = 3


class StructuredFormatter(logging.Formatter):
    """JSON formatter emitting one object per line."""

    CATEGORY_MAP = {
        "planekit.line": "collision",
        "planekit.rect": "collision",
        "planekit.polygon": "resampling",
        "planekit.resampling": "resampling",
        "planekit.morph": "resampling",
    }

    def _get_category(self, logger_name: str) -> str:
        for prefix, category in self.CATEGORY_MAP.items():
            if logger_name.startswith(prefix):
                return category
        return "system"

    @staticmethod
    def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
        extra: dict[str, Any] = {}
        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRS or key.startswith("_"):
                continue
            try:
                json.dumps(value)
            except (TypeError, ValueError):
                value = str(value)
            extra[key] = value
        return extra

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        payload: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "category": self._get_category(record.name),
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = self._extra_fields(record)
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload)


class ErrorFilter(logging.Filter):
    """Pass ERROR and CRITICAL records only."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def _file_handler(path: str, formatter: logging.Formatter) -> RotatingFileHandler:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
    )
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    *,
    json_format: bool = False,
    log_level: int | str = logging.INFO,
    log_file: str | None = None,
    error_log_file: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Attach handlers to the ``planekit`` logger, replacing any from a previous call.

    Args:
        json_format: Use StructuredFormatter instead of the plain one-line format
        log_level: Minimum log level for the package logger
        log_file: Path to a rotating log file receiving every record
        error_log_file: Path to a rotating log file receiving errors only
        stream: Stream to write to (default: sys.stderr)
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    formatter = (
        StructuredFormatter()
        if json_format
        else logging.Formatter(PLAIN_FORMAT, datefmt="%H:%M:%S")
    )

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setFormatter(formatter)
    package_logger.addHandler(stream_handler)

    if log_file:
        package_logger.addHandler(_file_handler(log_file, formatter))

    if error_log_file:
        error_handler = _file_handler(error_log_file, formatter)
        error_handler.addFilter(ErrorFilter())
        package_logger.addHandler(error_handler)


def setup_logging_from_settings() -> None:
    """Configure logging from ``PLANEKIT_LOG_LEVEL`` / ``PLANEKIT_LOG_JSON``."""
    from planekit.config import settings

    configure_logging(json_format=settings.log_json, log_level=settings.log_level.upper())
