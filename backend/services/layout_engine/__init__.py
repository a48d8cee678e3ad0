"""
Layout Engine for the Smart Wizard.

Turns five wizard answers (project type, room count, total area, style,
budget) into a complete floor plan: rooms, walls, doors, windows and
furniture. Pure and deterministic.
"""

from .dimensions import compute_room_dimensions
from .doors import Door, place_doors
from .errors import ConfigOutOfRange
from .furniture import (
    FurniturePlacement,
    compute_furniture_positions,
    generate_furniture,
    suggest_furniture,
    validate_proportions,
)
from .generator import LayoutGenerator, WizardConfig, generate_layout
from .ids import IdGenerator, SequentialIdGenerator
from .placement import place_rooms
from .plan import Plan, RoomRecord, validate_plan
from .room_model import PlacedRoom, RoomRole, RoomType, SizedRoom
from .room_program import determine_room_types
from .walls import Wall, WallClassification, classify_walls, generate_walls
from .windows import Window, place_windows

__all__ = [
    "LayoutGenerator",
    "WizardConfig",
    "generate_layout",
    "ConfigOutOfRange",
    "IdGenerator",
    "SequentialIdGenerator",
    "RoomType",
    "RoomRole",
    "SizedRoom",
    "PlacedRoom",
    "determine_room_types",
    "compute_room_dimensions",
    "place_rooms",
    "Wall",
    "WallClassification",
    "generate_walls",
    "classify_walls",
    "Door",
    "place_doors",
    "Window",
    "place_windows",
    "FurniturePlacement",
    "suggest_furniture",
    "compute_furniture_positions",
    "generate_furniture",
    "validate_proportions",
    "Plan",
    "RoomRecord",
    "validate_plan",
]
