# app/routers/wishlist.py
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from journal_backend.app.db.session import get_session
from journal_backend.app.schemas import PurchaseIn, WishlistIn, WishlistPatch
from journal_backend.app.services.data_stores import WISHLIST, RecordNotFound, purchase_wishlist_item

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@router.get("")
def list_wishlist(
    q: Optional[str] = None,
    order: str = "created_at",
    ascending: bool = False,
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    try:
        rows = WISHLIST.list(session, order_by=order, descending=not ascending, q=q)
    except ValueError as e:
        raise HTTPException(400, str(e))
    return {"items": rows}


@router.post("")
def create_entry(entry: WishlistIn, session: Session = Depends(get_session)) -> Dict[str, Any]:
    return {"item": WISHLIST.create(session, entry.model_dump(exclude_none=True))}


@router.get("/{item_id}")
def get_entry(item_id: int, session: Session = Depends(get_session)) -> Dict[str, Any]:
    try:
        return {"item": WISHLIST.get(session, item_id)}
    except RecordNotFound:
        raise HTTPException(404, "wishlist entry not found")


@router.patch("/{item_id}")
def update_entry(item_id: int, patch: WishlistPatch, session: Session = Depends(get_session)) -> Dict[str, Any]:
    try:
        return {"item": WISHLIST.update(session, item_id, patch.model_dump(exclude_unset=True))}
    except RecordNotFound:
        raise HTTPException(404, "wishlist entry not found")


@router.delete("/{item_id}")
def delete_entry(item_id: int, session: Session = Depends(get_session)) -> Dict[str, Any]:
    if not WISHLIST.delete(session, item_id):
        raise HTTPException(404, "wishlist entry not found")
    return {"ok": True}


@router.post("/{item_id}/purchase")
def purchase_entry(item_id: int, body: Optional[PurchaseIn] = None, session: Session = Depends(get_session)) -> Dict[str, Any]:
    """Bought it: the entry leaves the wishlist and shows up in the pantry."""
    try:
        item = purchase_wishlist_item(session, item_id, weight_g=body.weight_g if body else None)
    except RecordNotFound:
        raise HTTPException(404, "wishlist entry not found")
    return {"item": item}
