"""
Wall synthesis and interior/exterior classification.

Every placed room contributes its four boundary segments. Segments whose
canonical key was already seen (the shared edge of two adjacent rooms) are
dropped, so the wall graph holds each edge once. Classification then counts
how many rooms' edges pass through each wall's midpoint.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Set, Tuple

from services.layout_constants import FLOOR_HEIGHT, WALL_THICKNESS

from .geometry_utils import WallKey, approx_equals, within_span
from .ids import IdGenerator
from .room_model import PlacedRoom

logger = logging.getLogger(__name__)

DEFAULT_WALL_COLOR = "#F5F5F0"


@dataclass(frozen=True)
class Wall:
    """A straight, axis-aligned wall segment."""

    id: str
    start: Tuple[float, float]
    end: Tuple[float, float]
    thickness: float = WALL_THICKNESS
    height: float = FLOOR_HEIGHT
    color: str = DEFAULT_WALL_COLOR

    @property
    def length(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])

    @property
    def midpoint(self) -> Tuple[float, float]:
        return ((self.start[0] + self.end[0]) / 2, (self.start[1] + self.end[1]) / 2)

    @property
    def key(self) -> WallKey:
        return WallKey.from_segment(*self.start, *self.end)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "start": {"x": self.start[0], "y": self.start[1]},
            "end": {"x": self.end[0], "y": self.end[1]},
            "thickness": self.thickness,
            "height": self.height,
            "color": self.color,
        }


@dataclass
class WallClassification:
    """Derived adjacency information for one wall. Never persisted."""

    wall: Wall
    adjacent_rooms: List[PlacedRoom] = field(default_factory=list)

    @property
    def is_interior(self) -> bool:
        return len(self.adjacent_rooms) >= 2

    @property
    def is_exterior(self) -> bool:
        return len(self.adjacent_rooms) <= 1


def room_segments(room: PlacedRoom) -> List[Tuple[float, float, float, float]]:
    """Top, right, bottom and left edges of a room, clockwise."""
    x, y, r, b = room.x, room.y, room.right, room.bottom
    return [
        (x, y, r, y),   # top
        (r, y, r, b),   # right
        (r, b, x, b),   # bottom
        (x, b, x, y),   # left
    ]


def generate_walls(
    placed_rooms: Sequence[PlacedRoom],
    wall_color: str,
    ids: IdGenerator,
) -> List[Wall]:
    """
    Build the deduplicated wall list for a layout.

    Parameters
    ----------
    placed_rooms : list[PlacedRoom]
        Rooms in placement order; walls are emitted in the same order.
    wall_color : str
        Color applied to every wall (from the style palette).
    ids : IdGenerator
        Source of wall ids (prefix ``w``).
    """
    walls: List[Wall] = []
    seen: Set[WallKey] = set()

    for room in placed_rooms:
        for x1, y1, x2, y2 in room_segments(room):
            key = WallKey.from_segment(x1, y1, x2, y2)
            if key in seen:
                continue
            seen.add(key)
            walls.append(Wall(
                id=ids.next("w"),
                start=(x1, y1),
                end=(x2, y2),
                color=wall_color or DEFAULT_WALL_COLOR,
            ))

    logger.debug(f"Generated {len(walls)} walls for {len(placed_rooms)} rooms")
    return walls


def point_on_room_edge(px: float, py: float, room: PlacedRoom) -> bool:
    """True when (px, py) lies on any of the room's four edges, within tolerance."""
    in_y_span = within_span(py, room.y, room.bottom)
    in_x_span = within_span(px, room.x, room.right)
    on_left = approx_equals(px, room.x) and in_y_span
    on_right = approx_equals(px, room.right) and in_y_span
    on_top = approx_equals(py, room.y) and in_x_span
    on_bottom = approx_equals(py, room.bottom) and in_x_span
    return on_left or on_right or on_top or on_bottom


def classify_walls(
    walls: Sequence[Wall],
    placed_rooms: Sequence[PlacedRoom],
) -> Dict[str, WallClassification]:
    """
    Classify every wall by the rooms whose edges pass through its midpoint.

    Returns:
        Mapping wall id → WallClassification, in wall order.
    """
    classifications: Dict[str, WallClassification] = {}
    for wall in walls:
        mx, my = wall.midpoint
        adjacent = [room for room in placed_rooms if point_on_room_edge(mx, my, room)]
        classifications[wall.id] = WallClassification(wall=wall, adjacent_rooms=adjacent)

    interior = sum(1 for c in classifications.values() if c.is_interior)
    logger.debug(f"Classified {len(walls)} walls: {interior} interior, "
                 f"{len(walls) - interior} exterior")
    return classifications
