"""
Dimension allocation: turn room roles into sized rooms.

Each role receives a weighted share of the requested total area. The share
is clamped to the role's standard area range, split into width/depth using
the average aspect ratio of that range, clamped again per dimension and
snapped to the half-meter grid.

Because of the two clamps the built area can drift away from the requested
total for very small or very large programs. That drift is accepted.
"""

import logging
import math
from typing import List, Sequence

from services.layout_constants import (
    AREA_WEIGHTS,
    DEFAULT_AREA_WEIGHT,
    get_area_bounds,
    get_size_range,
)

from .geometry_utils import clamp, snap_half
from .room_model import RoomRole, SizedRoom

logger = logging.getLogger(__name__)


def size_room(role: RoomRole, target_area: float) -> SizedRoom:
    """Size a single room for *target_area* square meters."""
    rtype = role.type.value
    min_w, max_w, min_d, max_d = get_size_range(rtype)
    min_area, max_area = get_area_bounds(rtype)

    area = clamp(target_area, min_area, max_area)

    avg_w = (min_w + max_w) / 2
    avg_d = (min_d + max_d) / 2
    ratio = avg_w / avg_d

    width = math.sqrt(area * ratio)
    depth = area / width

    width = snap_half(clamp(width, min_w, max_w))
    depth = snap_half(clamp(depth, min_d, max_d))
    return SizedRoom(role=role, width=width, depth=depth)


def compute_room_dimensions(roles: Sequence[RoomRole], total_area: float) -> List[SizedRoom]:
    """
    Distribute *total_area* over *roles* by weight.

    Returns:
        One SizedRoom per role, in the same order. Empty for no roles.
    """
    if not roles:
        return []

    weights = [AREA_WEIGHTS.get(r.type.value, DEFAULT_AREA_WEIGHT) for r in roles]
    total_weight = sum(weights)

    sized = [
        size_room(role, (w / total_weight) * total_area)
        for role, w in zip(roles, weights)
    ]

    built = sum(r.area for r in sized)
    logger.debug(f"Allocated {len(sized)} rooms: built {built:.1f} m2 "
                 f"for {total_area:.1f} m2 requested")
    return sized
