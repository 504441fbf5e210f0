# app/routers/inventory.py
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from journal_backend.app.db.session import get_session
from journal_backend.app.schemas import InventoryIn, InventoryPatch
from journal_backend.app.services.data_stores import INVENTORY, RecordNotFound

router = APIRouter(prefix="/inventory", tags=["pantry"])


@router.get("")
def list_inventory(
    q: Optional[str] = None,
    opened: Optional[bool] = None,
    order: str = "created_at",
    ascending: bool = False,
    session: Session = Depends(get_session),
) -> Dict[str, Any]:
    try:
        rows = INVENTORY.list(session, order_by=order, descending=not ascending, filters={"opened": opened}, q=q)
    except ValueError as e:
        raise HTTPException(400, str(e))
    return {"items": rows}


@router.post("")
def create_item(item: InventoryIn, session: Session = Depends(get_session)) -> Dict[str, Any]:
    return {"item": INVENTORY.create(session, item.model_dump(exclude_none=True))}


@router.get("/{item_id}")
def get_item(item_id: int, session: Session = Depends(get_session)) -> Dict[str, Any]:
    try:
        return {"item": INVENTORY.get(session, item_id)}
    except RecordNotFound:
        raise HTTPException(404, "item not found")


@router.patch("/{item_id}")
def update_item(item_id: int, patch: InventoryPatch, session: Session = Depends(get_session)) -> Dict[str, Any]:
    try:
        return {"item": INVENTORY.update(session, item_id, patch.model_dump(exclude_unset=True))}
    except RecordNotFound:
        raise HTTPException(404, "item not found")


@router.delete("/{item_id}")
def delete_item(item_id: int, session: Session = Depends(get_session)) -> Dict[str, Any]:
    if not INVENTORY.delete(session, item_id):
        raise HTTPException(404, "item not found")
    return {"ok": True}
