"""Domain models for file-cache."""

from file_cache_core.models.todo import Importance, TodoItem

__all__ = [
    "Importance",
    "TodoItem",
]
