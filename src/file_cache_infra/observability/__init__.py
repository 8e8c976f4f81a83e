"""Observability: structured logging and CacheLogger implementations."""

from file_cache_infra.observability.logger import (
    NullCacheLogger,
    StructlogCacheLogger,
    get_default_logger,
    reset_default_logger,
)
from file_cache_infra.observability.logging import configure_logging

__all__ = [
    "NullCacheLogger",
    "StructlogCacheLogger",
    "configure_logging",
    "get_default_logger",
    "reset_default_logger",
]
