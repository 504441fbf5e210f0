# schemas.py  (request/response shapes for the journal API)

from __future__ import annotations
from typing import List, Optional, Union, Any, Dict
from pydantic import BaseModel, Field, ConfigDict

# Text inputs may arrive as "", "3.5" or "3,5"; str members let the brew layer
# and the record store do the coercion instead of a generic 422.
NumberLike = Union[float, str]


# ===================== Reviews =====================

class ReviewIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    coffee_name: str = Field(min_length=1)
    brand: Optional[str] = None
    origin: Optional[str] = None
    brew_method: Optional[str] = None          # "Coado (V60/Melitta)", "Espresso", ...
    roast_level: Optional[str] = None          # Clara / Média / Escura
    rating: Optional[NumberLike] = None
    acidity: Optional[NumberLike] = None
    body: Optional[NumberLike] = None
    sweetness: Optional[NumberLike] = None
    bitterness: Optional[NumberLike] = None
    aroma: Optional[NumberLike] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None

class ReviewPatch(BaseModel):
    model_config = ConfigDict(extra="ignore")

    coffee_name: Optional[str] = None
    brand: Optional[str] = None
    origin: Optional[str] = None
    brew_method: Optional[str] = None
    roast_level: Optional[str] = None
    rating: Optional[NumberLike] = None
    acidity: Optional[NumberLike] = None
    body: Optional[NumberLike] = None
    sweetness: Optional[NumberLike] = None
    bitterness: Optional[NumberLike] = None
    aroma: Optional[NumberLike] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None


# ===================== Pantry / wishlist =====================

class InventoryIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    brand: Optional[str] = None
    origin: Optional[str] = None
    roast_level: Optional[str] = None
    weight_g: Optional[NumberLike] = None
    roast_date: Optional[str] = None           # ISO date "YYYY-MM-DD"
    opened: Optional[bool] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None

class InventoryPatch(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    brand: Optional[str] = None
    origin: Optional[str] = None
    roast_level: Optional[str] = None
    weight_g: Optional[NumberLike] = None
    roast_date: Optional[str] = None
    opened: Optional[bool] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None

class WishlistIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    brand: Optional[str] = None
    origin: Optional[str] = None
    where_to_buy: Optional[str] = None
    price: Optional[NumberLike] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None

class WishlistPatch(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    brand: Optional[str] = None
    origin: Optional[str] = None
    where_to_buy: Optional[str] = None
    price: Optional[NumberLike] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None

class PurchaseIn(BaseModel):
    weight_g: Optional[NumberLike] = None


# ===================== Brew calculator =====================

class BrewCalcRequest(BaseModel):
    coffee_g: Optional[NumberLike] = None
    water_ml: Optional[NumberLike] = None
    ratio: Optional[NumberLike] = None

class BrewCalcResponse(BaseModel):
    coffee_g: float
    water_ml: float
    ratio: float
    display: Dict[str, str]


# ===================== Radar =====================

# ring count follows max_value, so both knobs are capped
MAX_RADAR_AXES = 24
MAX_RADAR_SCALE = 10

class RadarAxisIn(BaseModel):
    label: str
    value: Any = None                          # clamped/coerced downstream

class RadarRequest(BaseModel):
    values: List[RadarAxisIn] = Field(default_factory=list, max_length=MAX_RADAR_AXES)
    max_value: float = Field(5.0, gt=0, le=MAX_RADAR_SCALE)
    size: float = Field(300.0, gt=0, le=4000)
    fill_ratio: float = Field(0.35, gt=0, le=0.5)


# ===================== Timers =====================

class TimerCreate(BaseModel):
    timer_id: Optional[str] = None

class TimerOut(BaseModel):
    timer_id: str
    elapsed_seconds: int
    running: bool
    state: str
    display: str
