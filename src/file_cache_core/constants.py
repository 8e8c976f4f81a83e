"""Shared constants for file-cache."""

from __future__ import annotations

# Extension appended to every cache name
DEFAULT_FILE_EXTENSION = "json"

# Directory under the user's home used when no storage_dir is configured
DOCUMENTS_DIR_NAME = "Documents"

# Rotated log files kept by the file log handler
DEFAULT_LOG_RETENTION_DAYS = 7
