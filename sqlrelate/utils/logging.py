# ruff: noqa: PLR6301
"""Logging helpers for SQLRelate.

All library loggers live under the ``sqlrelate`` namespace and only emit at
DEBUG. Applications opt in with :func:`configure_logging`. A correlation ID
set through :func:`correlation_context` is attached to every record emitted
while it is active, so the bind, execute and decode lines of one query can be
matched up.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, TextIO

import msgspec

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable
    from logging import LogRecord

__all__ = (
    "ROOT_LOGGER_NAME",
    "CorrelationIDFilter",
    "StructuredFormatter",
    "configure_logging",
    "correlation_context",
    "correlation_id_var",
    "get_correlation_id",
    "get_logger",
    "log_with_context",
    "set_correlation_id",
)

ROOT_LOGGER_NAME = "sqlrelate"

correlation_id_var: ContextVar[str | None] = ContextVar("sqlrelate_correlation_id", default=None)

_json_encoder = msgspec.json.Encoder()

_TEXT_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation ID for the current context; ``None`` clears it."""
    correlation_id_var.set(correlation_id)


def get_correlation_id() -> str | None:
    return correlation_id_var.get()


@contextmanager
def correlation_context(correlation_id: str) -> Generator[str, None, None]:
    """Tag every record logged inside the block with ``correlation_id``."""
    token = correlation_id_var.set(correlation_id)
    try:
        yield correlation_id
    finally:
        correlation_id_var.reset(token)


class StructuredFormatter(logging.Formatter):
    """One JSON object per record.

    Fields passed through :func:`log_with_context` are merged at the top level.
    """

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        correlation_id = getattr(record, "correlation_id", None) or get_correlation_id()
        if correlation_id:
            entry["correlation_id"] = correlation_id
        entry.update(getattr(record, "extra_fields", None) or {})
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return _json_encoder.encode(entry).decode("utf-8")


class CorrelationIDFilter(logging.Filter):
    """Copies the active correlation ID onto each record."""

    def filter(self, record: LogRecord) -> bool:
        correlation_id = get_correlation_id()
        if correlation_id:
            record.correlation_id = correlation_id  # type: ignore[attr-defined]
        return True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the ``sqlrelate`` namespace.

    Args:
        name: Dotted suffix such as ``"binding.statement"``. Names that already
            start with ``sqlrelate`` are used as given.
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(name)
    if not any(isinstance(existing, CorrelationIDFilter) for existing in logger.filters):
        logger.addFilter(CorrelationIDFilter())
    return logger


def configure_logging(
    level: int | str = logging.INFO,
    structured: bool = True,
    stream: TextIO | None = None,
    handlers: Iterable[logging.Handler] | None = None,
) -> logging.Logger:
    """Route SQLRelate records to ``stream`` and stop them reaching the root logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Level name or number for the ``sqlrelate`` logger.
        structured: JSON lines when True, plain text otherwise.
        stream: Output stream, ``sys.stderr`` by default.
        handlers: Additional handlers, used with their own formatters.

    Returns:
        The configured ``sqlrelate`` logger.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    root.handlers.clear()

    console = logging.StreamHandler(stream or sys.stderr)
    console.setFormatter(StructuredFormatter() if structured else logging.Formatter(_TEXT_FORMAT))
    root.addHandler(console)
    for handler in handlers or ():
        root.addHandler(handler)
    root.propagate = False

    log_with_context(
        root, logging.DEBUG, "Logging configured", structured=structured, handler_count=len(root.handlers)
    )
    return root


def log_with_context(logger: logging.Logger, level: int, message: str, **extra_fields: Any) -> None:
    """Log ``message`` with structured fields.

    The fields appear as top-level keys in :class:`StructuredFormatter` output.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={"extra_fields": extra_fields}, stacklevel=2)
