# journal_backend/app/brew/sensory.py
from __future__ import annotations

import math
from typing import Any, List, Tuple

from pydantic import BaseModel

from .radar import RadarGeometry, project_radar

# Purpose:
# Five-attribute taste description attached to a review, plus the glue that
# turns a stored review (any attribute bag) into radar geometry.

SENSORY_FIELDS: Tuple[str, ...] = ("acidity", "body", "sweetness", "bitterness", "aroma")
SENSORY_LABELS = {
    "acidity": "Acidity",
    "body": "Body",
    "sweetness": "Sweetness",
    "bitterness": "Bitterness",
    "aroma": "Aroma",
}
SENSORY_DEFAULTS = {"acidity": 3.0, "body": 3.0, "sweetness": 3.0, "bitterness": 2.0, "aroma": 4.0}

SCALE_MIN = 1.0
SCALE_MAX = 5.0


def snap_half(value: Any, lo: float = SCALE_MIN, hi: float = SCALE_MAX) -> float:
    # slider convention: half-point steps inside [1, 5]
    x = round(float(value) * 2) / 2
    return max(lo, min(hi, x))


def _read(record: Any, key: str) -> Any:
    if isinstance(record, dict):
        return record.get(key)
    return getattr(record, key, None)


def _coerce(raw: Any, default: float) -> float:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    try:
        x = float(raw)
    except (TypeError, ValueError):
        return default
    return x if math.isfinite(x) else default


class SensoryProfile(BaseModel):
    acidity: float = SENSORY_DEFAULTS["acidity"]
    body: float = SENSORY_DEFAULTS["body"]
    sweetness: float = SENSORY_DEFAULTS["sweetness"]
    bitterness: float = SENSORY_DEFAULTS["bitterness"]
    aroma: float = SENSORY_DEFAULTS["aroma"]

    @classmethod
    def from_record(cls, record: Any) -> "SensoryProfile":
        """
        Read the five sensory fields from a dict or ORM row.
        Missing or non-numeric values fall back to the defaults.
        """
        return cls(**{k: _coerce(_read(record, k), SENSORY_DEFAULTS[k]) for k in SENSORY_FIELDS})

    def axes(self) -> List[Tuple[str, float]]:
        return [(SENSORY_LABELS[k], getattr(self, k)) for k in SENSORY_FIELDS]


def radar_for_record(record: Any, size: float = 300.0, **kwargs: Any) -> RadarGeometry:
    return project_radar(SensoryProfile.from_record(record).axes(), max_value=SCALE_MAX, size=size, **kwargs)
