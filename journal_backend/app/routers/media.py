# app/routers/media.py
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, File, HTTPException, UploadFile

from journal_backend.app.services.data_stores import MediaError, save_upload

router = APIRouter(prefix="/media", tags=["media"])


@router.post("/upload")
async def upload(file: UploadFile = File(...)) -> Dict[str, Any]:
    """
    Returns:
      { ok: true, url: "/media/<stored name>" }
    The url is what reviews/pantry/wishlist store in image_url.
    """
    data = await file.read()
    try:
        url = save_upload(file.filename or "photo", data)
    except MediaError as e:
        raise HTTPException(400, str(e))
    return {"ok": True, "url": url}
