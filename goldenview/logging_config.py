"""
Logging configuration for goldenview.

The library only emits records; applications and test sessions call
setup_logging() to see them.

Environment Variables:
    GOLDENVIEW_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: WARNING
    GOLDENVIEW_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from goldenview.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="login_form")
    logger.info("Replaying script")
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Records logged without get_logger() still format cleanly.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    return logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> logging.Logger:
    """
    Configure the goldenview logger.

    Arguments override GOLDENVIEW_LOG_LEVEL and GOLDENVIEW_LOG_FORMAT.
    Unknown levels fall back to WARNING, unknown formats to text.

    Returns:
        The configured "goldenview" logger
    """
    level_name = (level or os.getenv("GOLDENVIEW_LOG_LEVEL", "WARNING")).upper()
    fmt = (log_format or os.getenv("GOLDENVIEW_LOG_FORMAT", "text")).lower()
    resolved = LEVELS.get(level_name, logging.WARNING)

    root = logging.getLogger("goldenview")
    root.setLevel(resolved)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(build_formatter(fmt))
    handler.addFilter(TraceIDFilter())
    root.addHandler(handler)
    return root


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the replay run id)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
