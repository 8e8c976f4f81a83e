"""Public interface re-exports for file_cache_core."""

from file_cache_core.interfaces.item import CacheItem, Identifiable, JsonCodable
from file_cache_core.interfaces.logger import CacheLogger

__all__ = [
    "CacheItem",
    "CacheLogger",
    "Identifiable",
    "JsonCodable",
]
