from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Iterable, List, Optional, Type

from sqlmodel import Session, SQLModel, col, or_, select

from journal_backend.app.brew.sensory import SENSORY_FIELDS, snap_half
from journal_backend.app.db.models import InventoryItem, Review, WishlistItem

from .media import delete_media

# Purpose:
# Generic CRUD over the journal's record kinds (review / inventory / wishlist).
# Records are attribute bags as far as callers care: unknown keys are dropped,
# numeric and boolean fields are coerced from text, nothing else is validated.
# A record owns its uploaded photo: replacing image_url or deleting the record
# removes the old file from media storage.

log = logging.getLogger("journal.records")
if not log.handlers:
    handler = logging.StreamHandler()
    log.addHandler(handler)
    log.setLevel(logging.INFO)

_READONLY = {"id", "created_at"}
_TRUTHY = {"1", "true", "yes", "on", "sim"}


class RecordNotFound(KeyError):
    pass


def _to_float(v: Any) -> Optional[float]:
    if v is None or (isinstance(v, str) and not v.strip()):
        return None
    try:
        x = float(str(v).strip().replace(",", ".")) if isinstance(v, str) else float(v)
    except (TypeError, ValueError):
        return None
    return x if math.isfinite(x) else None


def _to_bool(v: Any) -> bool:
    if isinstance(v, str):
        return v.strip().lower() in _TRUTHY
    return bool(v)


class RecordStore:
    def __init__(
        self,
        kind: str,
        model: Type[SQLModel],
        *,
        search_fields: Iterable[str],
        numeric_fields: Iterable[str] = (),
        bool_fields: Iterable[str] = (),
        normalizers: Optional[Dict[str, Callable[[Any], Any]]] = None,
    ):
        self.kind = kind
        self.model = model
        self.search_fields = tuple(search_fields)
        self.numeric_fields = set(numeric_fields)
        self.bool_fields = set(bool_fields)
        self.normalizers = dict(normalizers or {})
        self.columns = set(model.model_fields.keys())

    # ---- coercion ----
    def _clean(self, record: Dict[str, Any]) -> Dict[str, Any]:
        if not isinstance(record, dict):
            raise TypeError(f"{self.kind} must be a dict")
        out: Dict[str, Any] = {}
        for k, v in record.items():
            if k not in self.columns or k in _READONLY:
                continue
            if k in self.numeric_fields:
                v = _to_float(v)
            elif k in self.bool_fields:
                v = _to_bool(v)
            if v is not None and k in self.normalizers:
                v = self.normalizers[k](v)
            out[k] = v
        return out

    def _column(self, name: str):
        if name not in self.columns:
            raise ValueError(f"unknown {self.kind} field: {name}")
        return getattr(self.model, name)

    # ---- queries ----
    def list(
        self,
        session: Session,
        *,
        order_by: str = "created_at",
        descending: bool = True,
        filters: Optional[Dict[str, Any]] = None,
        q: Optional[str] = None,
        limit: int = 200,
    ) -> List[SQLModel]:
        stmt = select(self.model)
        for k, v in (filters or {}).items():
            if v is None:
                continue
            stmt = stmt.where(self._column(k) == v)

        qnorm = (q or "").strip()
        if qnorm:
            pattern = f"%{qnorm}%"
            stmt = stmt.where(or_(*[col(self._column(f)).ilike(pattern) for f in self.search_fields]))

        order_col = col(self._column(order_by))
        # id breaks ties between rows created in the same instant
        if descending:
            stmt = stmt.order_by(order_col.desc(), col(self.model.id).desc())
        else:
            stmt = stmt.order_by(order_col.asc(), col(self.model.id).asc())
        stmt = stmt.limit(max(1, min(int(limit), 500)))
        return list(session.exec(stmt).all())

    def get(self, session: Session, record_id: int) -> SQLModel:
        row = session.get(self.model, record_id)
        if row is None:
            raise RecordNotFound(f"{self.kind} not found: {record_id}")
        return row

    # ---- mutations ----
    def create(self, session: Session, record: Dict[str, Any]) -> SQLModel:
        data = {k: v for k, v in self._clean(record).items() if v is not None}
        row = self.model(**data)
        session.add(row)
        session.commit()
        session.refresh(row)
        log.info(f"[{self.kind}] created id={row.id}")
        return row

    def update(self, session: Session, record_id: int, patch: Dict[str, Any]) -> SQLModel:
        row = self.get(session, record_id)
        old_image = getattr(row, "image_url", None)
        for k, v in self._clean(patch).items():
            if v is not None:
                setattr(row, k, v)
        session.add(row)
        session.commit()
        session.refresh(row)
        if old_image and old_image != getattr(row, "image_url", None):
            delete_media(old_image)
        log.info(f"[{self.kind}] updated id={record_id}")
        return row

    def delete(self, session: Session, record_id: int) -> bool:
        row = session.get(self.model, record_id)
        if row is None:
            return False
        image = getattr(row, "image_url", None)
        session.delete(row)
        session.commit()
        if image:
            delete_media(image)
        log.info(f"[{self.kind}] deleted id={record_id}")
        return True


REVIEWS = RecordStore(
    "review", Review,
    search_fields=("coffee_name", "brand", "origin", "notes"),
    numeric_fields=("rating", "acidity", "body", "sweetness", "bitterness", "aroma"),
    normalizers={k: snap_half for k in SENSORY_FIELDS},
)

INVENTORY = RecordStore(
    "inventory", InventoryItem,
    search_fields=("name", "brand", "origin"),
    numeric_fields=("weight_g",),
    bool_fields=("opened",),
)

WISHLIST = RecordStore(
    "wishlist", WishlistItem,
    search_fields=("name", "brand", "origin"),
    numeric_fields=("price",),
)

_STORES = {s.kind: s for s in (REVIEWS, INVENTORY, WISHLIST)}

def store_for(kind: str) -> RecordStore:
    try:
        return _STORES[kind]
    except KeyError:
        raise ValueError(f"unknown record kind: {kind}") from None


def purchase_wishlist_item(session: Session, item_id: int, weight_g: Optional[float] = None) -> SQLModel:
    """
    Move a wishlist entry into the pantry: creates the inventory row and
    removes the wishlist row in one commit.
    """
    wish = WISHLIST.get(session, item_id)
    data = {k: getattr(wish, k) for k in ("name", "brand", "origin", "notes", "image_url")}
    data = {k: v for k, v in data.items() if v is not None}
    w = _to_float(weight_g)
    if w is not None:
        data["weight_g"] = w
    item = InventoryItem(**data)
    session.add(item)
    session.delete(wish)
    session.commit()
    session.refresh(item)
    log.info(f"[wishlist] purchased id={item_id} -> inventory id={item.id}")
    return item
