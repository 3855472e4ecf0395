"""
Logging configuration for EnumerateIt.

Features:
- Log level control via environment variable or settings
- Structured JSON logging with timestamps
- Colored human-readable console output
- Context fields attached to every record inside a log_context block

The library itself only creates module loggers; nothing is emitted until an
application calls setup_logging or configures the root logger on its own.
"""

import json
import logging
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any

from enumerate_it.settings import get_settings

LIBRARY_LOGGER = "enumerate_it"

_current_log_level: str | None = None


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured JSON logs."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        context = getattr(record, "context", None)
        if context:
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class HumanFormatter(logging.Formatter):
    """Human-readable formatter for console output."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]

        base_msg = f"[{timestamp}] {color}{record.levelname:8}{self.RESET} | {record.name:30} | {record.getMessage()}"

        context = getattr(record, "context", None)
        if context:
            base_msg += f" | context={json.dumps(context, ensure_ascii=False, default=str)}"

        if record.exc_info:
            base_msg += f"\n{self.formatException(record.exc_info)}"

        return base_msg


class LogContext:
    """Context manager for adding context to logs."""

    _current_context: dict[str, Any] = {}

    def __init__(self, **kwargs: Any):
        self._new_context = kwargs
        self._old_context: dict[str, Any] = {}

    def __enter__(self) -> "LogContext":
        self._old_context = LogContext._current_context.copy()
        LogContext._current_context = {**self._old_context, **self._new_context}
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        LogContext._current_context = self._old_context

    @classmethod
    def get_context(cls) -> dict[str, Any]:
        return cls._current_context.copy()


class ContextFilter(logging.Filter):
    """Filter that copies the active LogContext onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = getattr(record, "context", None) or {}
        record.context = {**LogContext.get_context(), **context}
        return True


def setup_logging(
    level: str | None = None,
    structured: bool = False,
    stream: Any = None,
) -> logging.Logger:
    """
    Setup logging for the library logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        structured: Emit JSON lines instead of colored console output
        stream: Target stream, defaults to stdout

    Returns:
        The configured "enumerate_it" logger
    """
    global _current_log_level

    _current_log_level = (level or get_settings().log_level).upper()

    logger = logging.getLogger(LIBRARY_LOGGER)
    logger.setLevel(getattr(logging, _current_log_level, logging.INFO))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(StructuredFormatter() if structured else HumanFormatter())
    handler.setLevel(getattr(logging, _current_log_level, logging.INFO))
    handler.addFilter(ContextFilter())
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (usually __name__)
    """
    return logging.getLogger(name)


def set_log_level(level: str) -> None:
    """
    Dynamically set the log level of the library logger and its handlers.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    global _current_log_level
    _current_log_level = level.upper()

    logger = logging.getLogger(LIBRARY_LOGGER)
    logger.setLevel(getattr(logging, _current_log_level, logging.INFO))

    for handler in logger.handlers:
        handler.setLevel(getattr(logging, _current_log_level, logging.INFO))


def get_log_level() -> str:
    """Get the current log level."""
    return _current_log_level or get_settings().log_level.upper()


@contextmanager
def log_context(**kwargs: Any):
    """
    Context manager for adding context to logs.

    Usage:
        with log_context(enumeration="RelationshipStatus"):
            logger.info("Loading translations")
    """
    with LogContext(**kwargs):
        yield
