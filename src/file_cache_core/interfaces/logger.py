"""Logger interface consumed by FileCache."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheLogger(Protocol):
    """Fire-and-forget sink for informational and error messages."""

    def info(self, message: str) -> None:
        """Record an informational message."""
        ...

    def error(self, message: str) -> None:
        """Record an error message."""
        ...
