"""
Plan aggregate returned by the layout engine.

``Plan.to_dict`` emits the editor's JSON shape (camelCase keys). Stairs,
columns, dimensions and annotations are owned by the manual editor and are
always empty here.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from services.layout_constants import FLOOR_HEIGHT, SCHEMA_VERSION, UNITS, WALL_THICKNESS

from .doors import Door
from .furniture import FurniturePlacement
from .walls import Wall
from .windows import Window


@dataclass(frozen=True)
class RoomRecord:
    """Floor entry for a placed room."""

    id: str
    name: str
    type: str
    x: float
    y: float
    width: float
    depth: float
    floor_material: str
    floor_color: str

    @property
    def area(self) -> float:
        return self.width * self.depth

    @property
    def vertices(self) -> List[Tuple[float, float]]:
        x, y, w, d = self.x, self.y, self.width, self.depth
        return [(x, y), (x + w, y), (x + w, y + d), (x, y + d)]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "vertices": [{"x": vx, "y": vy} for vx, vy in self.vertices],
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "depth": self.depth,
            "area": self.area,
            "floorMaterial": self.floor_material,
            "floorColor": self.floor_color,
        }


@dataclass
class Plan:
    id: str
    name: str
    walls: List[Wall] = field(default_factory=list)
    rooms: List[RoomRecord] = field(default_factory=list)
    doors: List[Door] = field(default_factory=list)
    windows: List[Window] = field(default_factory=list)
    furniture: List[FurniturePlacement] = field(default_factory=list)
    stairs: List[Any] = field(default_factory=list)
    columns: List[Any] = field(default_factory=list)
    dimensions: List[Any] = field(default_factory=list)
    annotations: List[Any] = field(default_factory=list)
    schema_version: int = SCHEMA_VERSION
    units: str = UNITS
    floor_height: float = FLOOR_HEIGHT
    wall_thickness: float = WALL_THICKNESS

    @property
    def built_area(self) -> float:
        return sum(r.area for r in self.rooms)

    def wall_by_id(self) -> Dict[str, Wall]:
        return {w.id: w for w in self.walls}

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "schemaVersion": self.schema_version,
            "units": self.units,
            "floorHeight": self.floor_height,
            "wallThickness": self.wall_thickness,
            "walls": [w.to_dict() for w in self.walls],
            "rooms": [r.to_dict() for r in self.rooms],
            "doors": [d.to_dict() for d in self.doors],
            "windows": [w.to_dict() for w in self.windows],
            "dimensions": list(self.dimensions),
            "annotations": list(self.annotations),
            "furniture": [f.to_dict() for f in self.furniture],
            "stairs": list(self.stairs),
            "columns": list(self.columns),
        }


def validate_plan(plan: Dict[str, Any]) -> List[str]:
    """
    Structural check of a plan in its JSON shape.

    Returns a list of error strings (empty when valid): missing id/name,
    non-list collections, and doors/windows referencing walls that do not
    exist.
    """
    errors: List[str] = []
    if not plan:
        return ["Plan is empty"]
    if not plan.get("id"):
        errors.append("Missing plan id")
    if not plan.get("name"):
        errors.append("Missing plan name")
    for key in ("walls", "rooms"):
        if not isinstance(plan.get(key), list):
            errors.append(f"{key} must be a list")

    walls = plan.get("walls") if isinstance(plan.get("walls"), list) else []
    wall_ids = {w.get("id") for w in walls if isinstance(w, dict)}
    for door in plan.get("doors") or []:
        if door.get("wallId") not in wall_ids:
            errors.append(f"Door {door.get('id')} references missing wall {door.get('wallId')}")
    for window in plan.get("windows") or []:
        if window.get("wallId") not in wall_ids:
            errors.append(f"Window {window.get('id')} references missing wall {window.get('wallId')}")
    return errors
