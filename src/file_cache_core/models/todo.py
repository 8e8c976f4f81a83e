"""To-do item model, the reference item type for FileCache."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING
from uuid import uuid4

from pydantic import BaseModel, Field, ValidationError

if TYPE_CHECKING:
    from file_cache_core.json_types import JSONObject, JSONValue


class Importance(StrEnum):
    """How urgent a to-do item is."""

    LOW = "low"
    BASIC = "basic"
    IMPORTANT = "important"


class TodoItem(BaseModel):
    """A single to-do entry."""

    id: str = Field(default_factory=lambda: uuid4().hex, description="Unique item identifier")
    text: str = Field(description="What needs to be done")
    importance: Importance = Field(default=Importance.BASIC, description="Item priority")
    deadline: datetime | None = Field(default=None, description="Optional due date")
    is_done: bool = Field(default=False, description="Whether the item is completed")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When the item was created"
    )
    changed_at: datetime | None = Field(
        default=None, description="When the item was last modified"
    )

    def to_json(self) -> JSONObject:
        """Dump to a JSON-compatible dict (datetimes as ISO-8601 strings)."""
        return self.model_dump(mode="json")

    @classmethod
    def from_json(cls, value: JSONValue) -> TodoItem | None:
        """Parse a JSON object, returning None when it is not a valid item."""
        if not isinstance(value, dict):
            return None
        try:
            return cls.model_validate(value)
        except ValidationError:
            return None
