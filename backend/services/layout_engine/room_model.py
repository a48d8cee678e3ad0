"""
Room data model used across the pipeline stages.

A room goes through three immutable shapes:
``RoomRole`` (purpose only) → ``SizedRoom`` (+ dimensions) →
``PlacedRoom`` (+ top-left position on the shared plane).
"""

import enum
from dataclasses import dataclass

from shapely.geometry import Polygon

from .geometry_utils import rect_polygon


class RoomType(str, enum.Enum):
    BEDROOM = "bedroom"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    LIVING = "living"
    OFFICE = "office"
    DINING = "dining"
    LAUNDRY = "laundry"
    HALLWAY = "hallway"


@dataclass(frozen=True)
class RoomRole:
    """An abstract room purpose before it has size or position."""

    type: RoomType
    name: str

    def to_dict(self) -> dict:
        return {"type": self.type.value, "name": self.name}


@dataclass(frozen=True)
class SizedRoom:
    """A role with its allocated width (x) and depth (y), in meters."""

    role: RoomRole
    width: float
    depth: float

    @property
    def type(self) -> RoomType:
        return self.role.type

    @property
    def name(self) -> str:
        return self.role.name

    @property
    def area(self) -> float:
        return self.width * self.depth

    def at(self, x: float, y: float) -> "PlacedRoom":
        """Return this room placed with its top-left corner at (x, y)."""
        return PlacedRoom(role=self.role, width=self.width, depth=self.depth, x=x, y=y)


@dataclass(frozen=True)
class PlacedRoom(SizedRoom):
    """A sized room positioned on the plan (top-left corner at x, y)."""

    x: float = 0.0
    y: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.depth

    @property
    def polygon(self) -> Polygon:
        """Room footprint as a Shapely box."""
        return rect_polygon(self.x, self.y, self.width, self.depth)

    def __repr__(self) -> str:
        return (
            f"PlacedRoom({self.name!r}, {self.type.value}, "
            f"{self.width:.1f}x{self.depth:.1f} @ ({self.x:.1f},{self.y:.1f}))"
        )
