"""Tests for Settings configuration."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from file_cache_core.config.settings import Settings


@pytest.mark.unit
class TestSettings:
    """Test Settings validation and defaults."""

    def test_default_settings(self) -> None:
        """Settings loads with no environment and correct defaults."""
        with patch.dict(os.environ, {}, clear=True):
            s = Settings()
        assert s.storage_dir is None
        assert s.file_extension == "json"
        assert s.log_level == "INFO"
        assert s.log_format == "console"
        assert s.log_file is None
        assert s.log_retention_days == 7

    def test_env_overrides(self, tmp_path: Path) -> None:
        """FC_-prefixed environment variables are honored."""
        env = {
            "FC_STORAGE_DIR": str(tmp_path),
            "FC_LOG_FORMAT": "json",
            "FC_LOG_RETENTION_DAYS": "3",
        }
        with patch.dict(os.environ, env, clear=True):
            s = Settings()
        assert s.storage_dir == tmp_path
        assert s.log_format == "json"
        assert s.log_retention_days == 3

    def test_extension_leading_dot_stripped(self) -> None:
        """'.json' and 'json' are equivalent."""
        assert Settings(file_extension=".json").file_extension == "json"

    def test_empty_extension_raises(self) -> None:
        """An empty extension is rejected."""
        with pytest.raises(ValidationError, match="file_extension must not be empty"):
            Settings(file_extension=".")

    def test_invalid_log_format_raises(self) -> None:
        """Only json and console renderers exist."""
        with pytest.raises(ValidationError):
            Settings(log_format="xml")  # type: ignore[arg-type]

    def test_retention_must_be_positive(self) -> None:
        """At least one rotated log file is kept."""
        with pytest.raises(ValidationError):
            Settings(log_retention_days=0)
