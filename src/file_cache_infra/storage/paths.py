"""Resolution of cache names to files inside a single storage directory."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from file_cache_core.constants import DEFAULT_FILE_EXTENSION, DOCUMENTS_DIR_NAME
from file_cache_core.exceptions import PathResolutionError

if TYPE_CHECKING:
    from file_cache_core.config.settings import Settings

DirectoryResolver = Callable[[], Path]


def documents_dir() -> Path:
    """Return the current user's documents directory.

    Raises PathResolutionError when the home directory cannot be determined.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        msg = f"Cannot determine home directory: {e}"
        raise PathResolutionError(msg) from e
    return home / DOCUMENTS_DIR_NAME


class StorageLocator:
    """Maps cache names to ``<directory>/<name>.<extension>`` paths."""

    def __init__(
        self,
        directory_resolver: DirectoryResolver = documents_dir,
        extension: str = DEFAULT_FILE_EXTENSION,
    ) -> None:
        """Initialize with a directory resolver and file extension."""
        self._directory_resolver = directory_resolver
        self._extension = extension.lstrip(".")

    @classmethod
    def from_settings(cls, settings: Settings) -> StorageLocator:
        """Build a locator honoring settings.storage_dir and file_extension."""
        storage_dir = settings.storage_dir
        if storage_dir is None:
            return cls(documents_dir, settings.file_extension)
        return cls(lambda: storage_dir.expanduser(), settings.file_extension)

    @property
    def extension(self) -> str:
        """File extension without the leading dot."""
        return self._extension

    def directory(self) -> Path:
        """Resolve the storage directory without creating it."""
        try:
            directory = self._directory_resolver()
            if directory.exists() and not directory.is_dir():
                msg = f"Storage path is not a directory: {directory}"
                raise PathResolutionError(msg)
        except PathResolutionError:
            raise
        except (OSError, RuntimeError, KeyError) as e:
            msg = f"Cannot resolve storage directory: {e}"
            raise PathResolutionError(msg) from e
        return directory

    def resolve(self, name: str) -> Path:
        """Return the full path for cache ``name`` inside the storage directory."""
        _validate_name(name)
        return self.directory() / f"{name}.{self._extension}"

    def ensure_directory(self) -> Path:
        """Resolve the storage directory, creating it if missing."""
        directory = self.directory()
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            msg = f"Cannot create storage directory {directory}: {e}"
            raise PathResolutionError(msg) from e
        return directory


def _validate_name(name: str) -> None:
    """Reject names that would escape the storage directory."""
    if not name or name in {".", ".."}:
        msg = f"Invalid cache name: {name!r}"
        raise PathResolutionError(msg)
    if "/" in name or "\\" in name:
        msg = f"Cache name must not contain path separators: {name!r}"
        raise PathResolutionError(msg)
