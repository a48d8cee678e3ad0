"""
Furniture curation and placement.

Picks a catalog item list for each room from its type and the budget tier,
then drops every item onto one of nine named zones inside the room. Each
room type walks its own zone order; when a room has more items than its
strategy, later items are nudged so repeats do not stack exactly.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from services.furniture_catalog import CatalogLookup
from services.layout_constants import (
    CORNER_INSET,
    DEFAULT_BUDGET,
    DEFAULT_STRATEGY_TYPE,
    FURNITURE_MARGIN,
    FURNITURE_SUGGESTIONS,
    MAX_AREA_TOLERANCE,
    MAX_PROPORTION_RATIO,
    MIN_AREA_TOLERANCE,
    MIN_ROOM_DIMENSION,
    REPEAT_JITTER,
    ROOM_SIZE_RANGES,
    ZONE_ROTATIONS,
    ZONE_STRATEGIES,
    get_area_bounds,
)

from .geometry_utils import clamp
from .ids import IdGenerator
from .room_model import PlacedRoom

logger = logging.getLogger(__name__)


class ZonePosition(NamedTuple):
    x: float
    y: float
    rotation: float


@dataclass(frozen=True)
class FurniturePlacement:
    """A catalog item positioned (by its center) on the plan."""

    id: str
    catalog_id: str
    position: Tuple[float, float]
    rotation: float = 0.0
    scale: Tuple[float, float, float] = field(default=(1.0, 1.0, 1.0))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "catalogId": self.catalog_id,
            "position": {"x": round(self.position[0], 4), "y": round(self.position[1], 4)},
            "rotation": self.rotation,
            "scale": {"x": self.scale[0], "y": self.scale[1], "z": self.scale[2]},
        }


def _type_key(room_type) -> str:
    return getattr(room_type, "value", room_type)


def suggest_furniture(room_type, budget: str = DEFAULT_BUDGET) -> List[str]:
    """
    Catalog ids suggested for a room type at a budget tier.

    Unknown budgets fall back to the medium tier; unknown room types get
    an empty list.
    """
    tiers = FURNITURE_SUGGESTIONS.get(_type_key(room_type))
    if not tiers:
        return []
    items = tiers.get(budget)
    if items is None:
        items = tiers.get(DEFAULT_BUDGET, [])
    return list(items)


def furniture_zones(room: PlacedRoom, margin: float = FURNITURE_MARGIN) -> Dict[str, ZonePosition]:
    """The nine named placement zones of a room, with default facing."""
    x, y, w, d = room.x, room.y, room.width, room.depth
    inset = margin + CORNER_INSET
    coords = {
        'topCenter':    (x + w / 2, y + margin),
        'bottomCenter': (x + w / 2, y + d - margin),
        'leftCenter':   (x + margin, y + d / 2),
        'rightCenter':  (x + w - margin, y + d / 2),
        'center':       (x + w / 2, y + d / 2),
        'topLeft':      (x + inset, y + inset),
        'topRight':     (x + w - inset, y + inset),
        'bottomLeft':   (x + inset, y + d - inset),
        'bottomRight':  (x + w - inset, y + d - inset),
    }
    return {
        name: ZonePosition(cx, cy, ZONE_ROTATIONS[name])
        for name, (cx, cy) in coords.items()
    }


def compute_furniture_positions(
    room: PlacedRoom,
    item_ids: Sequence[str],
    catalog: CatalogLookup,
    margin: float = FURNITURE_MARGIN,
) -> List[ZonePosition]:
    """
    Position each item of *item_ids* inside *room*.

    Item ``i`` takes zone ``strategy[i % len(strategy)]``. Items past the
    first pass through the strategy are offset by REPEAT_JITTER per step on
    both axes. Every result is clamped to the room shrunk by *margin*.
    Items unknown to the catalog are spread around the room center.
    """
    zones = furniture_zones(room, margin)
    strategy = ZONE_STRATEGIES.get(_type_key(room.type), ZONE_STRATEGIES[DEFAULT_STRATEGY_TYPE])

    lo_x, hi_x = room.x + margin, room.right - margin
    lo_y, hi_y = room.y + margin, room.bottom - margin
    n = len(item_ids)

    positions: List[ZonePosition] = []
    for i, item_id in enumerate(item_ids):
        zone = zones.get(strategy[i % len(strategy)])
        if zone is not None and catalog.get_item(item_id) is not None:
            jitter = (i - len(strategy) + 1) * REPEAT_JITTER if i >= len(strategy) else 0.0
            positions.append(ZonePosition(
                clamp(zone.x + jitter, lo_x, hi_x),
                clamp(zone.y + jitter, lo_y, hi_y),
                zone.rotation,
            ))
        else:
            cx = room.x + room.width / 2 + (i * 0.5 - n * 0.25)
            positions.append(ZonePosition(
                clamp(cx, lo_x, hi_x),
                clamp(room.y + room.depth / 2, lo_y, hi_y),
                0.0,
            ))
    return positions


def generate_furniture(
    placed_rooms: Sequence[PlacedRoom],
    budget: str,
    catalog: CatalogLookup,
    ids: IdGenerator,
) -> List[FurniturePlacement]:
    """Furnish every room; items missing from the catalog are skipped."""
    furniture: List[FurniturePlacement] = []

    for room in placed_rooms:
        items = suggest_furniture(room.type, budget)
        if not items:
            continue

        positions = compute_furniture_positions(room, items, catalog)
        for catalog_id, pos in zip(items, positions):
            if catalog.get_item(catalog_id) is None:
                logger.debug(f"Catalog has no item {catalog_id!r}, skipped in {room.name}")
                continue
            furniture.append(FurniturePlacement(
                id=ids.next("furn"),
                catalog_id=catalog_id,
                position=(pos.x, pos.y),
                rotation=pos.rotation,
            ))

    return furniture


def validate_proportions(room) -> List[str]:
    """
    Advisory proportion check for a room-like object.

    *room* needs ``width``, ``depth`` and ``type`` attributes. Returns a list
    of human-readable issues (empty when the room looks reasonable); never
    raises for odd input.
    """
    width = getattr(room, "width", None)
    depth = getattr(room, "depth", None)
    if not width or not depth or width <= 0 or depth <= 0:
        return ["Missing room dimensions."]

    issues: List[str] = []
    ratio = width / depth
    if ratio > MAX_PROPORTION_RATIO or ratio < 1 / MAX_PROPORTION_RATIO:
        issues.append(
            f"Proportion too narrow ({ratio:.1f}:1). "
            f"Consider something between 1:3 and 3:1."
        )
    if width < MIN_ROOM_DIMENSION:
        issues.append(f"Width too small ({width:.1f}m). "
                      f"Recommended minimum: {MIN_ROOM_DIMENSION}m.")
    if depth < MIN_ROOM_DIMENSION:
        issues.append(f"Depth too small ({depth:.1f}m). "
                      f"Recommended minimum: {MIN_ROOM_DIMENSION}m.")

    room_type: Optional[str] = _type_key(getattr(room, "type", None))
    if room_type in ROOM_SIZE_RANGES:
        area = width * depth
        min_area, max_area = get_area_bounds(room_type)
        if area < min_area * MIN_AREA_TOLERANCE:
            issues.append(f"Area too small for {room_type} ({area:.1f}m2). "
                          f"Recommended minimum: {min_area:.1f}m2.")
        if area > max_area * MAX_AREA_TOLERANCE:
            issues.append(f"Area too large for {room_type} ({area:.1f}m2). "
                          f"Typical maximum: {max_area:.1f}m2.")

    return issues
