"""Custom exception hierarchy for file-cache.

I/O and JSON encode/decode failures are not part of this hierarchy: they
propagate to the caller as the ``OSError``/``ValueError`` raised by the
standard library.
"""

from __future__ import annotations


class FileCacheError(Exception):
    """Base exception for all file-cache errors."""


class PathResolutionError(FileCacheError):
    """Raised when the storage directory or a cache file path cannot be resolved."""


class MalformedDataError(FileCacheError):
    """Raised when a cache file's top-level JSON value is not an array."""
