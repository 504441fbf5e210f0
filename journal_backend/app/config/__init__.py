# journal_backend/app/config/__init__.py
from __future__ import annotations

# Re-export config surface expected by callers across the app.

# DB, HTTP and upload settings live in manifest.py
from .manifest import (
    get_db_url,
    get_cors_origins,
    APP_ENV,
    DEBUG_MODE,
    describe,
    RADAR_SIZE,
    MAX_TIMERS,
    MAX_UPLOAD_BYTES,
    ALLOWED_IMAGE_EXT,
)

# Path helpers live in paths.py
from .paths import (
    REPO_ROOT,
    get_data_dir,
    get_media_dir,
    ensure_data_dir_exists,
)

__all__ = [
    # manifest
    "get_db_url",
    "get_cors_origins",
    "APP_ENV",
    "DEBUG_MODE",
    "describe",
    "RADAR_SIZE",
    "MAX_TIMERS",
    "MAX_UPLOAD_BYTES",
    "ALLOWED_IMAGE_EXT",
    # paths
    "REPO_ROOT",
    "get_data_dir",
    "get_media_dir",
    "ensure_data_dir_exists",
]
