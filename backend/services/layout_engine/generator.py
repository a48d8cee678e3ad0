"""
Main layout generator — public API of the wizard engine.

Runs the full pipeline for one wizard configuration:

  1. Room program        (project type + room count → roles)
  2. Dimension allocation (roles + total area → sized rooms)
  3. Spatial packing     (sized rooms → placed rooms)
  4. Wall synthesis      (placed rooms → deduplicated walls)
  5. Wall classification (interior / exterior)
  6. Doors and windows
  7. Furniture
  8. Plan assembly

The whole call is synchronous and side-effect free: the same configuration
always yields the same plan, ids included.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from services.furniture_catalog import CatalogLookup, default_catalog
from services.layout_constants import (
    DEFAULT_BUDGET,
    MAX_ROOM_COUNT,
    MAX_TOTAL_SIZE,
    MIN_ROOM_COUNT,
    MIN_TOTAL_SIZE,
    PROJECT_TYPE_LABELS,
)
from services.styles import StyleColors, StylePalette, default_palette

from .dimensions import compute_room_dimensions
from .doors import place_doors
from .errors import ConfigOutOfRange
from .furniture import generate_furniture
from .geometry_utils import detect_overlaps
from .ids import IdGenerator, SequentialIdGenerator
from .placement import place_rooms
from .plan import Plan, RoomRecord
from .room_program import determine_room_types
from .walls import classify_walls, generate_walls
from .windows import place_windows

logger = logging.getLogger(__name__)


def _whole_count(value) -> int:
    """Room counts must be whole numbers; ``3.0`` is accepted, ``3.5`` is not."""
    count = float(value)
    if not count.is_integer():
        raise ConfigOutOfRange("roomCount", value, MIN_ROOM_COUNT, MAX_ROOM_COUNT,
                               reason="is not a whole number")
    return int(count)


@dataclass(frozen=True)
class WizardConfig:
    """The five wizard answers that drive generation."""

    project_type: str
    room_count: int
    total_size: float
    style: str = "modern"
    budget: str = DEFAULT_BUDGET

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "WizardConfig":
        """Build from a dict using either camelCase or snake_case keys."""
        def pick(snake: str, camel: str, default=None):
            if snake in data:
                return data[snake]
            return data.get(camel, default)

        return cls(
            project_type=pick("project_type", "projectType", "house"),
            room_count=_whole_count(pick("room_count", "roomCount", 3)),
            total_size=float(pick("total_size", "totalSize", 70)),
            style=pick("style", "style", "modern"),
            budget=pick("budget", "budget", DEFAULT_BUDGET),
        )

    def check_ranges(self):
        """Raise ConfigOutOfRange for room counts or sizes outside the wizard limits."""
        _whole_count(self.room_count)
        if not MIN_ROOM_COUNT <= self.room_count <= MAX_ROOM_COUNT:
            raise ConfigOutOfRange("roomCount", self.room_count, MIN_ROOM_COUNT, MAX_ROOM_COUNT)
        if not MIN_TOTAL_SIZE <= self.total_size <= MAX_TOTAL_SIZE:
            raise ConfigOutOfRange("totalSize", self.total_size, MIN_TOTAL_SIZE, MAX_TOTAL_SIZE)


def plan_name(config: WizardConfig) -> str:
    label = PROJECT_TYPE_LABELS.get(config.project_type, "Project")
    return f"{label} - {config.total_size:g}m2"


class LayoutGenerator:
    """
    Generate a complete floor plan from wizard answers.

    Typical workflow::

        gen = LayoutGenerator()
        plan = gen.generate({"projectType": "house", "roomCount": 4,
                             "totalSize": 90, "style": "modern",
                             "budget": "medium"})
    """

    def __init__(
        self,
        catalog: Optional[CatalogLookup] = None,
        palette: Optional[StylePalette] = None,
        ids: Optional[IdGenerator] = None,
    ):
        """
        Parameters
        ----------
        catalog : CatalogLookup, optional
            Furniture catalog; defaults to the built-in catalog.
        palette : StylePalette, optional
            Style resolver; defaults to the built-in styles.
        ids : IdGenerator, optional
            Shared id source. When omitted every ``generate`` call numbers
            its entities from 1, which keeps repeated runs identical.
        """
        self.catalog = catalog or default_catalog
        self.palette = palette or default_palette
        self.ids = ids

    def generate(self, config: Union[WizardConfig, Mapping[str, Any]]) -> Plan:
        if not isinstance(config, WizardConfig):
            config = WizardConfig.from_mapping(config)
        config.check_ranges()

        ids = self.ids or SequentialIdGenerator()
        style = self.palette.resolve(config.style)

        roles = determine_room_types(config.project_type, config.room_count)
        sized = compute_room_dimensions(roles, config.total_size)
        placed = place_rooms(sized)

        walls = generate_walls(placed, style.wall_color, ids)
        classifications = classify_walls(walls, placed)
        doors = place_doors(classifications, ids)
        windows = place_windows(classifications, ids)
        rooms = self._room_records(placed, style, ids)
        furniture = generate_furniture(placed, config.budget, self.catalog, ids)

        overlaps = detect_overlaps([r.polygon for r in placed])
        if overlaps:
            logger.warning(f"Generated layout has overlapping rooms: {overlaps}")

        plan = Plan(
            id=ids.next("plan"),
            name=plan_name(config),
            walls=walls,
            rooms=rooms,
            doors=doors,
            windows=windows,
            furniture=furniture,
        )

        logger.info(
            f"Generated {config.project_type} plan: {len(rooms)} rooms, "
            f"{len(walls)} walls, {len(doors)} doors, {len(windows)} windows, "
            f"{len(furniture)} furniture; built {plan.built_area:.1f} m2 "
            f"of {config.total_size:g} m2 requested"
        )
        return plan

    @staticmethod
    def _room_records(placed, style: StyleColors, ids: IdGenerator):
        return [
            RoomRecord(
                id=ids.next("r"),
                name=room.name,
                type=room.type.value,
                x=room.x,
                y=room.y,
                width=room.width,
                depth=room.depth,
                floor_material=style.floor_material,
                floor_color=style.floor_color,
            )
            for room in placed
        ]


def generate_layout(
    config: Union[WizardConfig, Mapping[str, Any]],
    *,
    catalog: Optional[CatalogLookup] = None,
    palette: Optional[StylePalette] = None,
    ids: Optional[IdGenerator] = None,
) -> Plan:
    """Convenience wrapper: ``LayoutGenerator(...).generate(config)``."""
    return LayoutGenerator(catalog=catalog, palette=palette, ids=ids).generate(config)
