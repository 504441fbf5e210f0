# journal_backend/app/brew/radar.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple, Union

# Purpose:
# Radar (spider) chart geometry. Maps N bounded values onto the vertices of
# concentric N-gons and returns plain point lists:
#   - axes:    center -> full-scale tip, one per value
#   - rings:   one closed polygon per integer grid level 1..max
#   - polygon: the data shape, closed (first vertex repeated)
#   - labels:  anchors just outside the outer ring
# Screen coordinates: origin top-left, y grows downward. Axis 0 points up and
# the axes advance clockwise, so the first attribute always renders on top.

Point = Tuple[float, float]
RadarValues = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]

DEFAULT_MAX = 5.0
DEFAULT_SIZE = 300.0
DEFAULT_FILL_RATIO = 0.35   # radius = 0.35 * size, i.e. 70% of the half-width
LABEL_FACTOR = 1.16


@dataclass
class RadarGeometry:
    center: Point
    radius: float
    axes: List[Tuple[Point, Point]] = field(default_factory=list)
    rings: List[List[Point]] = field(default_factory=list)
    polygon: List[Point] = field(default_factory=list)
    labels: List[Tuple[str, Point]] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "center": list(self.center),
            "radius": self.radius,
            "axes": [[list(a), list(b)] for a, b in self.axes],
            "rings": [[list(p) for p in ring] for ring in self.rings],
            "polygon": [list(p) for p in self.polygon],
            "labels": [{"label": name, "x": p[0], "y": p[1]} for name, p in self.labels],
        }


def _angle(i: int, n: int) -> float:
    return i * (2 * math.pi / n) - math.pi / 2


def _point(center: Point, radius: float, angle: float) -> Point:
    return (center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))


def _coerce(value: Any) -> float:
    try:
        x = float(value)
    except (TypeError, ValueError):
        return 0.0
    return x if math.isfinite(x) else 0.0


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _pairs(values: RadarValues) -> List[Tuple[str, Any]]:
    if isinstance(values, Mapping):
        return [(str(k), v) for k, v in values.items()]
    return [(str(label), v) for label, v in values]


def project_radar(
    values: RadarValues,
    max_value: float = DEFAULT_MAX,
    size: float = DEFAULT_SIZE,
    fill_ratio: float = DEFAULT_FILL_RATIO,
    label_factor: float = LABEL_FACTOR,
) -> RadarGeometry:
    """
    Project ordered (label, value) pairs onto a radar chart of canvas `size`.

    Values outside [0, max_value] are clamped; non-numeric values count as 0.
    An empty input gives empty geometry rather than an error.
    """
    if max_value <= 0:
        raise ValueError("max_value must be positive")
    if size <= 0:
        raise ValueError("size must be positive")

    pairs = _pairs(values)
    center: Point = (size / 2.0, size / 2.0)
    radius = fill_ratio * size
    geo = RadarGeometry(center=center, radius=radius)

    n = len(pairs)
    if n == 0:
        return geo

    angles = [_angle(i, n) for i in range(n)]

    geo.axes = [(center, _point(center, radius, a)) for a in angles]

    for level in range(1, int(math.floor(max_value)) + 1):
        r = (level / max_value) * radius
        ring = [_point(center, r, a) for a in angles]
        ring.append(ring[0])
        geo.rings.append(ring)

    poly = []
    for (_label, raw), a in zip(pairs, angles):
        v = _clamp(_coerce(raw), 0.0, max_value)
        poly.append(_point(center, (v / max_value) * radius, a))
    poly.append(poly[0])
    geo.polygon = poly

    geo.labels = [(label, _point(center, label_factor * radius, a)) for (label, _v), a in zip(pairs, angles)]
    return geo


def svg_points(points: Sequence[Point], digits: int = 2) -> str:
    """Format points for an SVG <polygon points="..."> attribute."""
    return " ".join(f"{round(x, digits)},{round(y, digits)}" for x, y in points)
