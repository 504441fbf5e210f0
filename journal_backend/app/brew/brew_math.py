# journal_backend/app/brew/brew_math.py
from __future__ import annotations

import math
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

# Purpose:
# Coffee/water ratio arithmetic for the brew calculator.
# ratio = water_ml / coffee_g, so any two of the three determine the third.
# Nothing here rounds; presentation code calls round_ml() when it needs to.

# Slider bounds used by the frontend (1:10 strong .. 1:22 very light).
# Not enforced by the math below.
RATIO_MIN = 10
RATIO_MAX = 22
RATIO_DEFAULT = 15


class InvalidInput(ValueError):
    """Raised for negative, non-finite or non-numeric brew arguments."""


@dataclass
class BrewRatio:
    coffee_g: float
    water_ml: float
    ratio: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def _num(value: Any, name: str) -> float:
    # numeric coercion only: text fields arrive as "18" or "18.5"
    if isinstance(value, bool):
        raise InvalidInput(f"{name} must be a number")
    try:
        x = float(str(value).strip().replace(",", ".")) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"{name} must be a number, got {value!r}")
    if not math.isfinite(x):
        raise InvalidInput(f"{name} must be finite")
    if x < 0:
        raise InvalidInput(f"{name} must not be negative")
    return x


def water_for(coffee_g: Any, ratio: Any) -> float:
    """
    Water (ml) needed for `coffee_g` grams at 1:`ratio`.
    A zero ratio is a valid degenerate brew and yields 0.
    """
    c = _num(coffee_g, "coffee_g")
    r = _num(ratio, "ratio")
    return c * r


def coffee_for(water_ml: Any, ratio: Any) -> float:
    """
    Coffee (g) for `water_ml` at 1:`ratio`. The ratio is the divisor here,
    so ratio <= 0 is rejected.
    """
    w = _num(water_ml, "water_ml")
    r = _num(ratio, "ratio")
    if r <= 0:
        raise InvalidInput("ratio must be greater than zero")
    return w / r


def ratio_for(water_ml: Any, coffee_g: Any) -> float:
    w = _num(water_ml, "water_ml")
    c = _num(coffee_g, "coffee_g")
    if c <= 0:
        raise InvalidInput("coffee_g must be greater than zero")
    return w / c


def solve_ratio(
    coffee_g: Optional[Any] = None,
    water_ml: Optional[Any] = None,
    ratio: Optional[Any] = None,
) -> BrewRatio:
    """
    Complete a BrewRatio from exactly two known members.
    Blank strings count as missing (empty form fields).
    """
    def _given(v: Any) -> bool:
        return v is not None and not (isinstance(v, str) and not v.strip())

    known = [name for name, v in (("coffee_g", coffee_g), ("water_ml", water_ml), ("ratio", ratio)) if _given(v)]
    if len(known) != 2:
        raise InvalidInput(f"exactly two of coffee_g, water_ml, ratio are required (got {known or 'none'})")

    if "ratio" not in known:
        c, w = _num(coffee_g, "coffee_g"), _num(water_ml, "water_ml")
        return BrewRatio(coffee_g=c, water_ml=w, ratio=ratio_for(w, c))
    if "water_ml" not in known:
        c, r = _num(coffee_g, "coffee_g"), _num(ratio, "ratio")
        return BrewRatio(coffee_g=c, water_ml=water_for(c, r), ratio=r)
    w, r = _num(water_ml, "water_ml"), _num(ratio, "ratio")
    return BrewRatio(coffee_g=coffee_for(w, r), water_ml=w, ratio=r)


def round_ml(value: float, digits: int = 0) -> float:
    # presentation helper: whole ml for the water readout, 1 decimal for grams
    return round(float(value), digits)
