"""Application settings using pydantic-settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from file_cache_core.constants import DEFAULT_FILE_EXTENSION, DEFAULT_LOG_RETENTION_DAYS


class Settings(BaseSettings):
    """Central configuration for file-cache."""

    model_config = SettingsConfigDict(env_prefix="FC_", env_file=".env")

    # --- Storage ---
    storage_dir: Path | None = Field(
        default=None,
        description="Directory holding cache files (defaults to ~/Documents)",
    )
    file_extension: str = Field(
        default=DEFAULT_FILE_EXTENSION,
        description="Extension appended to cache names",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level name",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for machines",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file, rotated daily",
    )
    log_retention_days: int = Field(
        default=DEFAULT_LOG_RETENTION_DAYS,
        ge=1,
        description="Number of rotated log files to keep",
    )

    @field_validator("file_extension")
    @classmethod
    def strip_extension_dot(cls, value: str) -> str:
        """Accept both 'json' and '.json'."""
        stripped = value.strip().lstrip(".")
        if not stripped:
            msg = "file_extension must not be empty"
            raise ValueError(msg)
        return stripped
