"""CacheLogger implementations backed by structlog."""

from __future__ import annotations

import functools
from typing import Any

import structlog


class StructlogCacheLogger:
    """Adapts a structlog logger to the CacheLogger interface."""

    def __init__(self, logger: Any | None = None) -> None:
        """Wrap ``logger``, or a structlog logger named 'file_cache'."""
        self._log = logger if logger is not None else structlog.get_logger("file_cache")

    def bind(self, **context: Any) -> StructlogCacheLogger:
        """Return a new logger carrying extra context on every entry."""
        return StructlogCacheLogger(self._log.bind(**context))

    def info(self, message: str) -> None:
        """Log an informational message."""
        self._log.info(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self._log.error(message)


class NullCacheLogger:
    """CacheLogger that discards everything."""

    def info(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


@functools.lru_cache(maxsize=1)
def get_default_logger() -> StructlogCacheLogger:
    """Return the process-wide default logger, constructed on first use."""
    return StructlogCacheLogger()


def reset_default_logger() -> None:
    """Drop the cached default logger so the next call builds a fresh one."""
    get_default_logger.cache_clear()
