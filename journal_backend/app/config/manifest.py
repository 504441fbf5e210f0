# journal_backend/app/config/manifest.py
from __future__ import annotations

import os
from typing import Dict, List

from .paths import get_data_dir

# ---- DB settings and environment mode ----

def get_db_url() -> str:
    # DATABASE_URL wins; otherwise a SQLite file under DATA_DIR
    env = os.getenv("DATABASE_URL", "").strip()
    if env:
        return env
    return f"sqlite:///{(get_data_dir() / 'journal.sqlite3').resolve()}"

APP_ENV: str = os.getenv("APP_ENV", "development")
DEBUG_MODE: bool = os.getenv("DEBUG", "0") not in ("", "0", "false", "False")

# ---- HTTP surface ----

_DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"

def get_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", _DEFAULT_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]

# ---- Brew widgets ----

RADAR_SIZE: float = float(os.getenv("RADAR_SIZE", "300"))
# live stopwatches kept in memory; the least recently used one is evicted past this
MAX_TIMERS: int = int(os.getenv("MAX_TIMERS", "256"))

# ---- Media uploads ----

MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(8 * 1024 * 1024)))
ALLOWED_IMAGE_EXT: List[str] = [".jpg", ".jpeg", ".png", ".webp", ".gif", ".heic"]

def describe() -> Dict[str, object]:
    # served by /api/health; the DB url stays out since it may carry credentials
    return {
        "app_env": APP_ENV,
        "debug": DEBUG_MODE,
        "data_dir": str(get_data_dir()),
        "cors_origins": get_cors_origins(),
        "radar_size": RADAR_SIZE,
        "max_timers": MAX_TIMERS,
        "max_upload_bytes": MAX_UPLOAD_BYTES,
    }


__all__ = [
    "get_db_url", "APP_ENV", "DEBUG_MODE", "get_cors_origins",
    "RADAR_SIZE", "MAX_TIMERS", "MAX_UPLOAD_BYTES", "ALLOWED_IMAGE_EXT", "describe",
]
