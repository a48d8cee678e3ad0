"""
Door placement on interior walls.

Each wall shared by two rooms that is long enough gets exactly one door,
centered along the wall and kept at least DOOR_MIN_OFFSET from either end.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Set

from services.layout_constants import (
    DOOR_CLEARANCE,
    DOOR_HEIGHT,
    DOOR_MIN_OFFSET,
    DOOR_WIDTH,
)

from .ids import IdGenerator
from .walls import WallClassification

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Door:
    """A single door on a wall. ``position`` is measured from the wall start."""

    id: str
    wall_id: str
    position: float
    width: float = DOOR_WIDTH
    height: float = DOOR_HEIGHT
    type: str = "single"

    def to_dict(self) -> dict:
        """Serialize door to a dictionary."""
        return {
            "id": self.id,
            "wallId": self.wall_id,
            "position": round(self.position, 4),
            "width": self.width,
            "height": self.height,
            "type": self.type,
        }

    def __repr__(self) -> str:
        return f"Door(id={self.id}, wall={self.wall_id}, pos={self.position:.2f})"


def place_doors(
    classifications: Dict[str, WallClassification],
    ids: IdGenerator,
    door_width: float = DOOR_WIDTH,
) -> List[Door]:
    """
    Place one centered door on every qualifying interior wall.

    Parameters
    ----------
    classifications : dict[str, WallClassification]
        Output of ``classify_walls``.
    ids : IdGenerator
        Source of door ids (prefix ``d``).
    door_width : float
        Width of each door (meters).

    Returns
    -------
    list[Door]
        At most one door per wall. Walls shorter than
        ``door_width + DOOR_CLEARANCE`` are skipped.
    """
    doors: List[Door] = []
    used_walls: Set[str] = set()

    for wall_id, info in classifications.items():
        if not info.is_interior or wall_id in used_walls:
            continue

        wall_len = info.wall.length
        if wall_len < door_width + DOOR_CLEARANCE:
            logger.debug(f"Wall {wall_id} too short for a door ({wall_len:.2f} m)")
            continue

        position = max(DOOR_MIN_OFFSET, (wall_len - door_width) / 2)
        doors.append(Door(
            id=ids.next("d"),
            wall_id=wall_id,
            position=position,
            width=door_width,
        ))
        used_walls.add(wall_id)

    return doors
