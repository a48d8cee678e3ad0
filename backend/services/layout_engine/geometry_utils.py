"""
Geometry helpers shared by the layout pipeline.

Centralizes the tolerance used for adjacency tests, the half-meter snap,
the canonical wall key used for wall deduplication, and the Shapely-based
overlap / containment checks used to sanity-check a finished layout.
"""

import math
from typing import List, NamedTuple, Tuple

from shapely.geometry import Point, Polygon, box

from services.layout_constants import ADJACENCY_EPS, GRID_SNAP, WALL_KEY_SCALE


def approx_equals(a: float, b: float, eps: float = ADJACENCY_EPS) -> bool:
    """True when *a* and *b* differ by less than *eps*."""
    return abs(a - b) < eps


def within_span(value: float, lo: float, hi: float, eps: float = ADJACENCY_EPS) -> bool:
    """True when *value* lies in ``[lo, hi]`` widened by *eps* on both sides."""
    return lo - eps <= value <= hi + eps


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (like JS Math.round)."""
    return int(math.floor(value + 0.5))


def snap_half(value: float) -> float:
    """Snap to the nearest GRID_SNAP increment."""
    return round_half_up(value / GRID_SNAP) * GRID_SNAP


def clamp(val: float, lo: float, hi: float) -> float:
    return max(lo, min(val, hi))


class GridPoint(NamedTuple):
    """A plan point on the integer centimeter grid."""
    x: int
    y: int

    @classmethod
    def from_coords(cls, x: float, y: float) -> "GridPoint":
        return cls(round_half_up(x * WALL_KEY_SCALE), round_half_up(y * WALL_KEY_SCALE))


class WallKey(NamedTuple):
    """
    Direction-independent identity of a wall segment.

    The two endpoints are snapped to the centimeter grid and stored
    smaller-first (by x, then y), so AB and BA produce the same key.
    """
    a: GridPoint
    b: GridPoint

    @classmethod
    def from_segment(cls, x1: float, y1: float, x2: float, y2: float) -> "WallKey":
        p = GridPoint.from_coords(x1, y1)
        q = GridPoint.from_coords(x2, y2)
        return cls(p, q) if p <= q else cls(q, p)


def rect_polygon(x: float, y: float, width: float, depth: float) -> Polygon:
    """Axis-aligned rectangle with its top-left corner at (x, y)."""
    return box(x, y, x + width, y + depth)


def detect_overlaps(rooms: List[Polygon],
                    tolerance: float = 1e-6) -> List[Tuple[int, int]]:
    """
    Return a list of (i, j) index pairs for rooms that overlap.

    Rooms sharing only an edge (zero-area intersection) are **not**
    considered overlapping.

    Parameters
    ----------
    rooms : list[Polygon]
        Room polygons to check.
    tolerance : float
        Minimum intersection area to count as an overlap (sq m).
    """
    overlaps = []
    for i in range(len(rooms)):
        for j in range(i + 1, len(rooms)):
            inter = rooms[i].intersection(rooms[j])
            if inter.area > tolerance:
                overlaps.append((i, j))
    return overlaps


def has_overlaps(rooms: List[Polygon], tolerance: float = 1e-6) -> bool:
    """Quick check — are there *any* overlapping room pairs?"""
    return len(detect_overlaps(rooms, tolerance)) > 0


def point_in_inset(x: float, y: float, polygon: Polygon, margin: float,
                   tol: float = 1e-9) -> bool:
    """True when (x, y) lies inside *polygon* shrunk by *margin* on all sides."""
    inner = polygon.buffer(-margin, join_style=2)
    if inner.is_empty:
        return False
    return inner.buffer(tol, join_style=2).covers(Point(x, y))
