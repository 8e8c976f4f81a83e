"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from file_cache_core.models.todo import TodoItem
from file_cache_infra.cache.file_cache import FileCache
from file_cache_infra.storage.paths import StorageLocator
from tests.mocks.mock_factories import make_todo_item
from tests.mocks.mock_logger import RecordingLogger


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """Return a temporary directory for cache files (not yet created)."""
    return tmp_path / "storage"


@pytest.fixture
def locator(storage_dir: Path) -> StorageLocator:
    """Return a StorageLocator rooted at storage_dir."""
    return StorageLocator(lambda: storage_dir)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Return a logger that records info and error messages."""
    return RecordingLogger()


@pytest.fixture
def todo_cache(locator: StorageLocator, recording_logger: RecordingLogger) -> FileCache[TodoItem]:
    """Return an empty TodoItem cache backed by a temporary directory."""
    return FileCache(TodoItem, logger=recording_logger, storage=locator)


@pytest.fixture
def sample_item() -> TodoItem:
    """Return a minimal valid TodoItem."""
    return make_todo_item()
