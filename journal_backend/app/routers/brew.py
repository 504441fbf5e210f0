# app/routers/brew.py
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from journal_backend.app.brew.brew_math import (
    RATIO_DEFAULT,
    RATIO_MAX,
    RATIO_MIN,
    InvalidInput,
    round_ml,
    solve_ratio,
)
from journal_backend.app.brew.radar import project_radar, svg_points
from journal_backend.app.schemas import BrewCalcRequest, BrewCalcResponse, RadarRequest

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/brew", tags=["brew"])


@router.get("/ratios")
def ratio_bounds() -> Dict[str, int]:
    """Slider bounds for the ratio picker (1:10 .. 1:22)."""
    return {"min": RATIO_MIN, "max": RATIO_MAX, "default": RATIO_DEFAULT}


@router.post("/calc", response_model=BrewCalcResponse)
def calc(req: BrewCalcRequest):
    """
    Fill in the missing member of coffee_g / water_ml / ratio.
    Returns raw values plus rounded display strings (water to whole ml,
    coffee to 0.1 g).
    """
    try:
        res = solve_ratio(coffee_g=req.coffee_g, water_ml=req.water_ml, ratio=req.ratio)
    except InvalidInput as e:
        logger.warning(f"[brew] calc rejected: {e}")
        raise HTTPException(400, str(e))
    return {
        **res.as_dict(),
        "display": {
            # fixed-point: large brews must not render as 1.5e+06
            "coffee_g": f"{res.coffee_g:.1f} g",
            "water_ml": f"{round_ml(res.water_ml):.0f} ml",
            "ratio": "1:" + f"{res.ratio:.1f}".removesuffix(".0"),
        },
    }


@router.post("/radar")
def radar(req: RadarRequest) -> Dict[str, Any]:
    """
    Ad-hoc radar geometry (e.g. the live preview while a review form is edited).
    """
    geo = project_radar(
        [(a.label, a.value) for a in req.values],
        max_value=req.max_value,
        size=req.size,
        fill_ratio=req.fill_ratio,
    )
    out = geo.as_dict()
    out["svg"] = {"polygon": svg_points(geo.polygon), "rings": [svg_points(r) for r in geo.rings]}
    return out
