"""In-memory keyed item store with whole-file JSON snapshots."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Generic, TypeVar

from file_cache_core.config.settings import Settings
from file_cache_core.exceptions import MalformedDataError, PathResolutionError
from file_cache_core.interfaces.item import CacheItem
from file_cache_infra.observability.logger import get_default_logger
from file_cache_infra.storage.paths import StorageLocator

if TYPE_CHECKING:
    from collections.abc import Mapping

    from file_cache_core.interfaces.logger import CacheLogger
    from file_cache_core.json_types import JSONArray

ItemT = TypeVar("ItemT", bound=CacheItem)


class FileCache(Generic[ItemT]):
    """Keyed collection of items, persisted as a single JSON array per name.

    Items are keyed by their ``id``; adding an item whose id is already
    present replaces the stored one. ``save`` and ``load`` operate on the
    whole collection at once and raise on failure:

    - ``PathResolutionError`` when the storage location cannot be resolved
      (an error is logged first),
    - ``MalformedDataError`` when a loaded file is not a JSON array,
    - ``OSError`` and JSON errors from the standard library, unwrapped.

    Elements of a loaded array that the item type cannot parse are skipped.
    Not safe for concurrent use.
    """

    def __init__(
        self,
        item_type: type[ItemT],
        logger: CacheLogger | None = None,
        storage: StorageLocator | None = None,
    ) -> None:
        """Initialize an empty cache for ``item_type``.

        Falls back to the process-wide default logger and to a locator
        built from environment Settings (FC_STORAGE_DIR, else ~/Documents).
        """
        self._item_type = item_type
        self._logger = logger if logger is not None else get_default_logger()
        if storage is None:
            storage = StorageLocator.from_settings(Settings())
        self._storage = storage
        self._items: dict[str, ItemT] = {}

    @property
    def items(self) -> Mapping[str, ItemT]:
        """Read-only view of the stored items keyed by id."""
        return MappingProxyType(self._items)

    def get_all(self) -> Mapping[str, ItemT]:
        """Return a read-only view of the stored items keyed by id."""
        return self.items

    def add_or_replace(self, item: ItemT) -> ItemT | None:
        """Store ``item``, returning the item it displaced, if any."""
        previous = self._items.get(item.id)
        self._items[item.id] = item
        return previous

    def remove(self, item_id: str) -> ItemT | None:
        """Remove and return the item with ``item_id``, or None if absent."""
        return self._items.pop(item_id, None)

    def save(self, name: str) -> None:
        """Write every item to ``<storage_dir>/<name>.<ext>`` as one JSON array."""
        path = self._resolve_path(name, create_dir=True)

        payload: JSONArray = [item.to_json() for item in self._items.values()]
        data = json.dumps(payload, ensure_ascii=False, allow_nan=False)

        _atomic_write(path, data)
        self._logger.info(f"Saved {len(payload)} items to {path}")

    def load(self, name: str) -> None:
        """Replace the stored items with those read from ``<storage_dir>/<name>.<ext>``."""
        path = self._resolve_path(name)

        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            msg = f"Expected a JSON array in {path}, got {type(raw).__name__}"
            raise MalformedDataError(msg)

        loaded: dict[str, ItemT] = {}
        skipped = 0
        for element in raw:
            item = self._item_type.from_json(element)
            if item is None:
                skipped += 1
                continue
            loaded[item.id] = item

        self._items = loaded
        self._logger.info(f"Loaded {len(loaded)} items from {path} ({skipped} skipped)")

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def _resolve_path(self, name: str, *, create_dir: bool = False) -> Path:
        """Resolve the file for ``name``, logging once on failure."""
        try:
            path = self._storage.resolve(name)
            if create_dir:
                self._storage.ensure_directory()
        except PathResolutionError as e:
            self._logger.error(f"Failed to resolve storage path for cache {name!r}: {e}")
            raise
        return path


def _atomic_write(path: Path, data: str) -> None:
    """Replace ``path`` with ``data`` via a sibling temp file."""
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        with tmp.open("w", encoding="utf-8") as f:
            f.write(data)
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
