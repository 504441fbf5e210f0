from __future__ import annotations

import logging
import uuid
from pathlib import Path

from journal_backend.app.config import ALLOWED_IMAGE_EXT, MAX_UPLOAD_BYTES, get_media_dir
from journal_backend.app.utils.storage import ensure_dir, write_bytes
from journal_backend.app.utils.strings import safe_filename

# Purpose:
# Blob storage for review/pantry photos. Bytes land under MEDIA_DIR and are
# served back from the /media static mount, so the public URL is just the
# mount path plus the stored name.

log = logging.getLogger("journal.media")
if not log.handlers:
    handler = logging.StreamHandler()
    log.addHandler(handler)
    log.setLevel(logging.INFO)

MEDIA_URL_PREFIX = "/media"


class MediaError(ValueError):
    pass


def _stored_name(filename: str) -> str:
    base = safe_filename(filename, fallback="photo")
    stem, ext = Path(base).stem, Path(base).suffix.lower()
    if ext not in ALLOWED_IMAGE_EXT:
        raise MediaError(f"unsupported image type: {ext or '(none)'}")
    # unique prefix keeps two "photo.jpg" uploads apart
    return f"{uuid.uuid4().hex[:12]}-{stem}{ext}"


def save_upload(filename: str, data: bytes) -> str:
    """Store `data` and return its public URL."""
    if not data:
        raise MediaError("empty upload")
    if len(data) > MAX_UPLOAD_BYTES:
        raise MediaError(f"upload too large ({len(data)} > {MAX_UPLOAD_BYTES} bytes)")
    name = _stored_name(filename)
    target = ensure_dir(get_media_dir()) / name
    write_bytes(target, data)
    log.info(f"[media] stored {name} ({len(data)} bytes)")
    return f"{MEDIA_URL_PREFIX}/{name}"


def path_for_url(url: str) -> Path:
    # inverse of save_upload, used when a record's photo is replaced
    name = safe_filename(url.rsplit("/", 1)[-1])
    return get_media_dir() / name


def delete_media(url: str) -> bool:
    if not url or not url.startswith(MEDIA_URL_PREFIX + "/"):
        return False
    p = path_for_url(url)
    if p.exists():
        p.unlink()
        log.info(f"[media] removed {p.name}")
        return True
    return False
