# app/routers/reviews.py
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from journal_backend.app.brew.sensory import SensoryProfile, radar_for_record
from journal_backend.app.config import RADAR_SIZE
from journal_backend.app.db.session import get_session
from journal_backend.app.schemas import ReviewIn, ReviewPatch
from journal_backend.app.services.data_stores import REVIEWS, RecordNotFound

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("")
def list_reviews(
    q: Optional[str] = None,
    brew_method: Optional[str] = None,
    roast_level: Optional[str] = None,
    order: str = "created_at",
    ascending: bool = False,
    limit: int = 200,
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    """
    Journal list, newest first by default.
    `q` is a case-insensitive substring match over name, brand, origin and notes.
    """
    try:
        rows = REVIEWS.list(
            session,
            order_by=order,
            descending=not ascending,
            filters={"brew_method": brew_method, "roast_level": roast_level},
            q=q,
            limit=limit,
        )
    except ValueError as e:
        raise HTTPException(400, str(e))
    return {"reviews": rows}


@router.post("")
def create_review(review: ReviewIn, session: Session = Depends(get_session)) -> Dict[str, Any]:
    row = REVIEWS.create(session, review.model_dump(exclude_none=True))
    return {"review": row}


@router.get("/{review_id}")
def get_review(review_id: int, session: Session = Depends(get_session)) -> Dict[str, Any]:
    try:
        return {"review": REVIEWS.get(session, review_id)}
    except RecordNotFound:
        raise HTTPException(404, "review not found")


@router.patch("/{review_id}")
def update_review(review_id: int, patch: ReviewPatch, session: Session = Depends(get_session)) -> Dict[str, Any]:
    try:
        row = REVIEWS.update(session, review_id, patch.model_dump(exclude_unset=True))
    except RecordNotFound:
        raise HTTPException(404, "review not found")
    return {"review": row}


@router.delete("/{review_id}")
def delete_review(review_id: int, session: Session = Depends(get_session)) -> Dict[str, Any]:
    if not REVIEWS.delete(session, review_id):
        raise HTTPException(404, "review not found")
    return {"ok": True}


@router.get("/{review_id}/radar")
def review_radar(review_id: int, size: float = RADAR_SIZE, session: Session = Depends(get_session)) -> Dict[str, Any]:
    """
    Radar geometry for the review's sensory profile:
      - profile: the five values actually charted (defaults filled in)
      - geometry: center/radius/axes/rings/polygon/labels
    """
    if size <= 0:
        raise HTTPException(400, "size must be positive")
    try:
        row = REVIEWS.get(session, review_id)
    except RecordNotFound:
        raise HTTPException(404, "review not found")
    return {
        "profile": SensoryProfile.from_record(row).model_dump(),
        "geometry": radar_for_record(row, size=size).as_dict(),
    }
