# journal_backend/app/config/paths.py
from __future__ import annotations

"""
Central path resolution for the journal backend.

Env overrides:
    DATA_DIR
    MEDIA_DIR

Defaults:
    <repo_root>/data
    <DATA_DIR>/media

Values are read on every call so tests (and a re-configured process) can point
DATA_DIR somewhere else without re-importing this module.
"""

import os
from pathlib import Path

# ──────────────────────────────────────────────────────────────────────────────
_THIS_FILE = Path(__file__).resolve()

def _resolve_repo_root() -> Path:
    p = _THIS_FILE
    for _ in range(6):
        if (p.parent / "journal_backend" / "app").exists():
            return p.parent
        p = p.parent
    return _THIS_FILE.parents[3]

REPO_ROOT: Path = _resolve_repo_root()

def _clean_env(value: str | None) -> str | None:
    if value is None:
        return None
    v = value.strip().strip('"').strip("'")
    return v or None

def _env_path(name: str) -> Path | None:
    raw = _clean_env(os.getenv(name))
    if not raw:
        return None
    return Path(raw).expanduser().resolve()

# ── Getters
def get_data_dir() -> Path:
    return (_env_path("DATA_DIR") or REPO_ROOT / "data").resolve()

def get_media_dir() -> Path:
    return (_env_path("MEDIA_DIR") or get_data_dir() / "media").resolve()

def ensure_data_dir_exists(*parts: str) -> Path:
    """
    Ensure DATA_DIR (and optional subpaths) exist.
    Examples:
        ensure_data_dir_exists() -> <DATA_DIR>
        ensure_data_dir_exists("media") -> <DATA_DIR>/media
    """
    p = get_data_dir().joinpath(*parts)
    p.mkdir(parents=True, exist_ok=True)
    return p

__all__ = [
    "REPO_ROOT",
    "get_data_dir", "get_media_dir",
    "ensure_data_dir_exists",
]
