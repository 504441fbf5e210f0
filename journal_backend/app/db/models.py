# models.py  (journal records: reviews, pantry inventory, wishlist)

from __future__ import annotations
from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    # timezone-aware: sqlmodel's datetime column rejects naive values
    return datetime.now(timezone.utc)

# ---------- Reviews ----------

class Review(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    coffee_name: str
    brand: Optional[str] = None                    # roaster / torrefação
    origin: Optional[str] = None
    brew_method: str = "Coado"
    roast_level: str = "Média"
    rating: float = 5
    # sensory profile (1..5, half steps)
    acidity: float = 3
    body: float = 3
    sweetness: float = 3
    bitterness: float = 2
    aroma: float = 4
    notes: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)


# ---------- Pantry ----------

class InventoryItem(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    brand: Optional[str] = None
    origin: Optional[str] = None
    roast_level: Optional[str] = None
    weight_g: Optional[float] = None
    roast_date: Optional[str] = None               # ISO date "YYYY-MM-DD"
    opened: bool = False
    notes: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)


# ---------- Wishlist ----------

class WishlistItem(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    brand: Optional[str] = None
    origin: Optional[str] = None
    where_to_buy: Optional[str] = None
    price: Optional[float] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)
