"""
Window placement on exterior walls.

Habitable rooms get standard windows (two of them on long walls);
bathrooms get a single small window set high for privacy.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from services.layout_constants import (
    BATHROOM_WINDOW_HEIGHT,
    BATHROOM_WINDOW_SILL,
    BATHROOM_WINDOW_WIDTH,
    DOUBLE_WINDOW_MIN_LENGTH,
    WINDOW_CLEARANCE,
    WINDOW_HEIGHT,
    WINDOW_MIN_OFFSET,
    WINDOW_SILL,
    WINDOW_WIDTH,
)

from .ids import IdGenerator
from .room_model import RoomType
from .walls import WallClassification

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Window:
    """A window on a wall. ``position`` is measured from the wall start."""

    id: str
    wall_id: str
    position: float
    width: float = WINDOW_WIDTH
    height: float = WINDOW_HEIGHT
    sill_height: float = WINDOW_SILL
    type: str = "standard"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "wallId": self.wall_id,
            "position": round(self.position, 4),
            "width": self.width,
            "height": self.height,
            "sillHeight": self.sill_height,
            "type": self.type,
        }


def owned_by_bathroom(info: WallClassification) -> bool:
    room = info.adjacent_rooms[0] if info.adjacent_rooms else None
    return room is not None and room.type == RoomType.BATHROOM


def window_size_for(info: WallClassification) -> Tuple[float, float, float]:
    """(width, height, sill) for the room owning an exterior wall."""
    if owned_by_bathroom(info):
        return BATHROOM_WINDOW_WIDTH, BATHROOM_WINDOW_HEIGHT, BATHROOM_WINDOW_SILL
    return WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_SILL


def place_windows(
    classifications: Dict[str, WallClassification],
    ids: IdGenerator,
) -> List[Window]:
    """
    Place windows on every qualifying exterior wall.

    A wall must be at least ``WINDOW_WIDTH + WINDOW_CLEARANCE`` long. Walls
    longer than DOUBLE_WINDOW_MIN_LENGTH that do not belong to a bathroom get
    two windows centered on the third points; all others get one centered
    window.
    """
    windows: List[Window] = []

    for wall_id, info in classifications.items():
        if not info.is_exterior:
            continue

        wall_len = info.wall.length
        if wall_len < WINDOW_WIDTH + WINDOW_CLEARANCE:
            continue

        width, height, sill = window_size_for(info)
        is_bathroom = owned_by_bathroom(info)

        if wall_len > DOUBLE_WINDOW_MIN_LENGTH and not is_bathroom:
            spacing = wall_len / 3
            positions = [spacing - width / 2, spacing * 2 - width / 2]
        else:
            positions = [max(WINDOW_MIN_OFFSET, (wall_len - width) / 2)]

        for position in positions:
            windows.append(Window(
                id=ids.next("win"),
                wall_id=wall_id,
                position=position,
                width=width,
                height=height,
                sill_height=sill,
            ))

    logger.debug(f"Placed {len(windows)} windows")
    return windows
