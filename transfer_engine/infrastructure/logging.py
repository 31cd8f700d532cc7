"""
Logging configuration module.

Console output is always on; rotating ``<log>`` and ``error.log`` files are
added when ``log_file_enabled`` is set. ``log_format="json"`` switches every
handler to python-json-logger for log aggregation.

Records carry a ``correlation_id`` that identifies one transfer attempt.
The embedding application opens a scope around each attempt:

    with correlation_scope():
        await container.execute_transfer().execute(transfer_input)
"""

import logging
import logging.config
import sys
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Optional

from transfer_engine.infrastructure.config.settings import Settings, get_settings

NO_CORRELATION_ID = "no-correlation-id"

correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

TEXT_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(correlation_id)s] - %(funcName)s() - %(message)s"
)
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(correlation_id)s %(funcName)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(settings: Settings | None = None) -> None:
    """
    Configure logging for the transfer engine.

    Call this once at startup of the process embedding the engine, before any
    logging occurs.

    Args:
        settings: Settings to use, defaults to the process-wide settings
    """
    settings = settings or get_settings()

    if settings.log_file_enabled:
        Path(settings.log_file_path).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(get_logging_config(settings))

    logging.getLogger(__name__).info(
        f"Logging configured: level={settings.log_level}, "
        f"format={settings.log_format}, "
        f"file_enabled={settings.log_file_enabled}"
    )


def get_logging_config(settings: Settings) -> dict[str, Any]:
    """
    Build the dictConfig dictionary for ``settings``.

    Returns:
        Dictionary compatible with logging.config.dictConfig()
    """
    formatter = "json" if settings.log_format == "json" else "detailed"

    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": settings.log_level,
            "formatter": formatter,
            "stream": sys.stdout,
            "filters": ["correlation_id"],
        },
    }
    if settings.log_file_enabled:
        log_path = Path(settings.log_file_path)
        handlers["file"] = _rotating_handler(
            settings, str(log_path), settings.log_level, formatter
        )
        handlers["error_file"] = _rotating_handler(
            settings, str(log_path.parent / "error.log"), "ERROR", formatter
        )

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {"format": TEXT_FORMAT, "datefmt": DATE_FORMAT},
            "json": {
                "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                "format": JSON_FORMAT,
            },
        },
        "filters": {
            "correlation_id": {"()": CorrelationIdFilter},
        },
        "handlers": handlers,
        "root": {
            "level": settings.log_level,
            "handlers": list(handlers),
        },
        "loggers": {
            "transfer_engine": {
                "level": settings.log_level,
                "handlers": list(handlers),
                "propagate": False,
            },
        },
    }


def _rotating_handler(
    settings: Settings, filename: str, level: str, formatter: str
) -> dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": formatter,
        "filename": filename,
        "maxBytes": settings.log_file_max_bytes,
        "backupCount": settings.log_file_backup_count,
        "encoding": "utf-8",
        "filters": ["correlation_id"],
    }


@contextmanager
def correlation_scope(correlation_id: Optional[str] = None) -> Iterator[str]:
    """
    Tag every record logged inside the block with one correlation id.

    Args:
        correlation_id: Id to use, a new uuid4 hex string if omitted

    Yields:
        The correlation id in effect
    """
    value = correlation_id or uuid.uuid4().hex
    token = correlation_id_var.set(value)
    try:
        yield value
    finally:
        correlation_id_var.reset(token)


class CorrelationIdFilter(logging.Filter):
    """
    Logging filter to add correlation_id to log records.

    An id passed with ``extra={"correlation_id": ...}`` wins; otherwise the
    id of the enclosing ``correlation_scope`` is used, or 'no-correlation-id'.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = correlation_id_var.get() or NO_CORRELATION_ID

        return True

