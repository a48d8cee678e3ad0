"""
Spatial packing: give every sized room an (x, y) origin.

Rooms are laid out largest-first on a cursor that only ever moves forward,
so no two rooms can overlap. The strategy depends on the room count:

  * n <= 4      rows of two
  * 4 < n <= 6  L-shape: one top row plus a column hanging under its right end
  * n > 6       rows of three
"""

import logging
import math
from typing import List, Sequence

from .room_model import PlacedRoom, SizedRoom

logger = logging.getLogger(__name__)

ROW_LAYOUT_MAX = 4
L_SHAPE_MAX = 6


def place_in_rows(rooms: Sequence[SizedRoom], rooms_per_row: int) -> List[PlacedRoom]:
    """Fill rows left to right; each new row starts below the deepest room of the last."""
    placed: List[PlacedRoom] = []
    cur_x = 0.0
    cur_y = 0.0
    row_max_depth = 0.0
    col_in_row = 0

    for room in rooms:
        if col_in_row >= rooms_per_row:
            cur_x = 0.0
            cur_y += row_max_depth
            row_max_depth = 0.0
            col_in_row = 0

        placed.append(room.at(cur_x, cur_y))
        cur_x += room.width
        row_max_depth = max(row_max_depth, room.depth)
        col_in_row += 1

    return placed


def place_in_l_shape(rooms: Sequence[SizedRoom]) -> List[PlacedRoom]:
    """
    Top row of ``ceil(n/2)`` rooms, the rest stacked in a column.

    The column is right-aligned with the top row using the width of its
    first room and starts just below the deepest top-row room.
    """
    top_count = math.ceil(len(rooms) / 2)
    top_rooms = rooms[:top_count]
    side_rooms = rooms[top_count:]

    placed: List[PlacedRoom] = []
    cur_x = 0.0
    top_max_depth = 0.0
    for room in top_rooms:
        placed.append(room.at(cur_x, 0.0))
        cur_x += room.width
        top_max_depth = max(top_max_depth, room.depth)

    side_x = cur_x - (side_rooms[0].width if side_rooms else 0.0)
    cur_y = top_max_depth
    for room in side_rooms:
        placed.append(room.at(side_x, cur_y))
        cur_y += room.depth

    return placed


def place_rooms(rooms: Sequence[SizedRoom]) -> List[PlacedRoom]:
    """Sort by descending area (stable) and pack with the count-based strategy."""
    if not rooms:
        return []

    ordered = sorted(rooms, key=lambda r: -r.area)
    n = len(ordered)

    if n <= ROW_LAYOUT_MAX:
        strategy = "rows-2"
        placed = place_in_rows(ordered, 2)
    elif n <= L_SHAPE_MAX:
        strategy = "l-shape"
        placed = place_in_l_shape(ordered)
    else:
        strategy = "rows-3"
        placed = place_in_rows(ordered, 3)

    logger.debug(f"Placed {n} rooms using {strategy} layout")
    return placed
