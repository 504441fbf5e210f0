# journal_backend/app/services/serve_frontend.py
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional
from fastapi import FastAPI
from starlette.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from journal_backend.app.config import REPO_ROOT, get_media_dir
from journal_backend.app.services.data_stores.media import MEDIA_URL_PREFIX

logger = logging.getLogger("uvicorn.error")

class SPAStaticFiles(StaticFiles):
    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code == 404:
                # SPA fallback: always return index.html for client routes
                return await super().get_response("index.html", scope)
            raise

def _default_dist_dir() -> Path:
    return REPO_ROOT / "frontend" / "dist"

def mount_media(app: FastAPI) -> Path:
    media = get_media_dir()
    media.mkdir(parents=True, exist_ok=True)
    app.mount(MEDIA_URL_PREFIX, StaticFiles(directory=str(media)), name="media")
    logger.info(f"[media] serving uploads from: {media}")
    return media

def mount_frontend(app: FastAPI, dist_dir: Optional[Path] = None) -> None:
    dist = Path(dist_dir or os.getenv("FRONTEND_DIST", _default_dist_dir())).resolve()
    if not dist.exists():
        logger.info(f"[frontend] dist not found, skipping mount: {dist}")
        return
    logger.info(f"[frontend] mounting SPA from: {dist}")
    app.mount("/", SPAStaticFiles(directory=str(dist), html=True), name="spa")
