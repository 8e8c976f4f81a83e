"""Capability protocols for items stored in a FileCache."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import Self

    from file_cache_core.json_types import JSONValue


@runtime_checkable
class Identifiable(Protocol):
    """An item exposing a stable, unique identity string."""

    @property
    def id(self) -> str:
        """Identity used as the cache key."""
        ...


@runtime_checkable
class JsonCodable(Protocol):
    """An item that serializes itself to, and parses itself from, JSON values."""

    def to_json(self) -> JSONValue:
        """Return a JSON-compatible representation of this item."""
        ...

    @classmethod
    def from_json(cls, value: JSONValue) -> Self | None:
        """Build an item from a JSON value, or None if it is malformed."""
        ...


@runtime_checkable
class CacheItem(Identifiable, JsonCodable, Protocol):
    """An identifiable, JSON-codable item storable in a FileCache."""
