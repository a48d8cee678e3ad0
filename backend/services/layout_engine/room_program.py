"""
Room programming: which rooms a project gets.

Maps (project type, room count) to an ordered list of room roles.
No randomness — identical inputs always produce the identical list.
"""

import logging
import math
from typing import List

from services.layout_constants import (
    BEDROOM_SHARE,
    MEETING_ROOM_MIN_COUNT,
    RESIDENTIAL_EXTRAS,
)

from .room_model import RoomRole, RoomType

logger = logging.getLogger(__name__)


def _commercial_program(room_count: int) -> List[RoomRole]:
    rooms = [RoomRole(RoomType.LIVING, "Reception")]
    office_count = max(1, room_count - 2)
    for i in range(office_count):
        rooms.append(RoomRole(RoomType.OFFICE, f"Office {i + 1}"))
    rooms.append(RoomRole(RoomType.BATHROOM, "Restroom"))
    if room_count >= MEETING_ROOM_MIN_COUNT:
        rooms.append(RoomRole(RoomType.DINING, "Meeting Room"))
    return rooms


def _residential_program(room_count: int) -> List[RoomRole]:
    # Living, kitchen and bathroom are always present
    rooms = [
        RoomRole(RoomType.LIVING, "Living Room"),
        RoomRole(RoomType.KITCHEN, "Kitchen"),
        RoomRole(RoomType.BATHROOM, "Bathroom"),
    ]

    remaining = max(0, room_count - 3)
    bedroom_count = min(remaining, math.ceil(remaining * BEDROOM_SHARE))
    for i in range(bedroom_count):
        rooms.append(RoomRole(RoomType.BEDROOM, f"Bedroom {i + 1}"))
    remaining -= bedroom_count

    for room_type, name in RESIDENTIAL_EXTRAS[:remaining]:
        rooms.append(RoomRole(RoomType(room_type), name))
    return rooms


def determine_room_types(project_type: str, room_count: int) -> List[RoomRole]:
    """
    Resolve the ordered room program for a project.

    Parameters
    ----------
    project_type : str
        ``house``, ``apartment``, ``commercial`` or ``singleRoom``.
        Any other value is treated as residential.
    room_count : int
        Requested number of rooms (1-10). Residential programs never go
        below their three core rooms and stop adding extras once the
        fixed extras list is exhausted.

    Returns
    -------
    list[RoomRole]
    """
    if project_type == "singleRoom":
        return [RoomRole(RoomType.LIVING, "Studio")]
    if project_type == "commercial":
        return _commercial_program(room_count)
    if project_type not in ("house", "apartment"):
        logger.debug(f"Unknown project type {project_type!r}, using residential program")
    return _residential_program(room_count)
