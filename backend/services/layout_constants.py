"""
Centralized Layout Constants — Single source of truth for the wizard engine.

Exposes the static tables every stage of the layout pipeline reads:
  - Structural defaults (wall thickness, floor height)
  - Door / window opening sizes and the minimum wall lengths they need
  - Standard room dimension ranges (meters) and area weights
  - Furniture suggestions per room type and budget tier
  - Furniture zone strategies per room type

All values are metric. Nothing here is loaded from disk; the engine is a
pure function of its inputs and these tables.
"""

import math
from typing import Dict, List, Tuple

# ===========================================================================
# STRUCTURAL CONSTANTS
# ===========================================================================

WALL_THICKNESS = 0.15   # m
FLOOR_HEIGHT = 2.8      # m
SCHEMA_VERSION = 2
UNITS = "meters"

GRID_SNAP = 0.5         # room dimensions snap to a half-meter grid

# Tolerance for "point lies on a room edge" tests in wall classification
ADJACENCY_EPS = 0.05

# Wall keys are compared on a centimeter grid
WALL_KEY_SCALE = 100

# ===========================================================================
# OPENINGS
# ===========================================================================

DOOR_WIDTH = 0.9
DOOR_HEIGHT = 2.1
DOOR_CLEARANCE = 0.4        # wall must be at least DOOR_WIDTH + this
DOOR_MIN_OFFSET = 0.2       # door never starts closer than this to a wall end

WINDOW_WIDTH = 1.2
WINDOW_HEIGHT = 1.0
WINDOW_SILL = 1.0
WINDOW_CLEARANCE = 0.3      # wall must be at least WINDOW_WIDTH + this
WINDOW_MIN_OFFSET = 0.15

# Bathrooms get a small, high window for privacy
BATHROOM_WINDOW_WIDTH = 0.6
BATHROOM_WINDOW_HEIGHT = 0.6
BATHROOM_WINDOW_SILL = 1.5

# Exterior walls longer than this get two windows (non-bathrooms only)
DOUBLE_WINDOW_MIN_LENGTH = 4.0

# ===========================================================================
# ROOM DIMENSION STANDARDS (meters)
# ===========================================================================

# (min_width, max_width, min_depth, max_depth)
ROOM_SIZE_RANGES: Dict[str, Tuple[float, float, float, float]] = {
    'bedroom':  (3.0, 4.0, 3.5, 5.0),
    'kitchen':  (2.5, 3.0, 3.0, 4.0),
    'bathroom': (2.0, 3.0, 2.5, 3.0),
    'living':   (4.0, 6.0, 5.0, 7.0),
    'office':   (2.5, 3.0, 3.0, 4.0),
    'laundry':  (1.8, 2.5, 2.0, 3.0),
    'dining':   (3.0, 4.0, 3.0, 4.5),
    'hallway':  (1.2, 1.5, 2.0, 4.0),
}

# Relative share of the requested total area
AREA_WEIGHTS: Dict[str, float] = {
    'living':   1.5,
    'bedroom':  1.2,
    'kitchen':  1.0,
    'dining':   1.0,
    'office':   0.8,
    'bathroom': 0.5,
    'laundry':  0.4,
    'hallway':  0.3,
}
DEFAULT_AREA_WEIGHT = 1.0
DEFAULT_SIZE_RANGE_TYPE = 'living'

# Advisory proportion checks
MAX_PROPORTION_RATIO = 3.0
MIN_ROOM_DIMENSION = 1.5
MIN_AREA_TOLERANCE = 0.7
MAX_AREA_TOLERANCE = 1.5


def get_size_range(room_type: str) -> Tuple[float, float, float, float]:
    """Return the (min_w, max_w, min_d, max_d) range for a room type."""
    return ROOM_SIZE_RANGES.get(room_type, ROOM_SIZE_RANGES[DEFAULT_SIZE_RANGE_TYPE])


def get_area_bounds(room_type: str) -> Tuple[float, float]:
    """Return the (min_area, max_area) implied by a room type's range."""
    min_w, max_w, min_d, max_d = get_size_range(room_type)
    return min_w * min_d, max_w * max_d


# ===========================================================================
# ROOM PROGRAMS
# ===========================================================================

PROJECT_TYPES: List[Dict[str, str]] = [
    {'id': 'house',      'label': 'House'},
    {'id': 'apartment',  'label': 'Apartment'},
    {'id': 'commercial', 'label': 'Commercial Space'},
    {'id': 'singleRoom', 'label': 'Single Room'},
]

PROJECT_TYPE_LABELS: Dict[str, str] = {p['id']: p['label'] for p in PROJECT_TYPES}

MIN_ROOM_COUNT = 1
MAX_ROOM_COUNT = 10
MIN_TOTAL_SIZE = 10.0
MAX_TOTAL_SIZE = 500.0

SIZE_PRESETS = [30, 50, 70, 100, 150, 200]

# Share of the post-core slots that become bedrooms in residential programs
BEDROOM_SHARE = 0.6

# Filled in order once bedrooms are allocated: (type, display name)
RESIDENTIAL_EXTRAS: List[Tuple[str, str]] = [
    ('dining', 'Dining Room'),
    ('office', 'Office'),
    ('laundry', 'Laundry'),
    ('bathroom', 'Bathroom 2'),
]

# Commercial programs gain a meeting room from this room count up
MEETING_ROOM_MIN_COUNT = 5

# ===========================================================================
# BUDGET TIERS
# ===========================================================================

BUDGET_LEVELS: List[Dict[str, str]] = [
    {'id': 'economical', 'label': 'Economical',
     'description': 'Essential, compact furniture'},
    {'id': 'medium', 'label': 'Medium',
     'description': 'A good balance between quality and cost'},
    {'id': 'premium', 'label': 'Premium',
     'description': 'High quality, fully furnished rooms'},
]
DEFAULT_BUDGET = 'medium'

# ===========================================================================
# FURNITURE
# ===========================================================================

FURNITURE_SUGGESTIONS: Dict[str, Dict[str, List[str]]] = {
    'bedroom': {
        'economical': ['bed-double', 'table-bedside', 'wardrobe-2d'],
        'medium':     ['bed-queen', 'table-bedside', 'table-bedside', 'wardrobe-3d',
                       'chest-drawers', 'lamp-table'],
        'premium':    ['bed-king', 'table-bedside', 'table-bedside', 'wardrobe-sliding',
                       'chest-drawers', 'desk-vanity', 'lamp-floor', 'lamp-table',
                       'rug-medium', 'mirror-floor'],
    },
    'kitchen': {
        'economical': ['fridge-single', 'stove-4', 'sink-kitchen', 'counter-section'],
        'medium':     ['fridge-single', 'stove-4', 'sink-kitchen', 'counter-section',
                       'microwave', 'pantry-cabinet'],
        'premium':    ['fridge-double', 'stove-6', 'sink-kitchen', 'counter-section',
                       'counter-section', 'microwave', 'oven', 'dishwasher', 'hood',
                       'kitchen-island', 'pantry-cabinet'],
    },
    'bathroom': {
        'economical': ['toilet', 'sink-bath', 'shower'],
        'medium':     ['toilet', 'sink-bath', 'shower', 'mirror-bath', 'bath-cabinet'],
        'premium':    ['toilet', 'sink-double', 'shower-rect', 'mirror-bath',
                       'bath-cabinet', 'towel-rack', 'bidet'],
    },
    'living': {
        'economical': ['sofa-2seat', 'table-coffee', 'table-tv', 'tv-50'],
        'medium':     ['sofa-3seat', 'table-coffee', 'table-tv', 'tv-50', 'bookcase',
                       'rug-medium', 'lamp-floor'],
        'premium':    ['sofa-l', 'table-coffee', 'table-side', 'table-tv', 'tv-65',
                       'bookcase-wide', 'rug-large', 'lamp-floor', 'chandelier',
                       'chair-arm', 'table-console', 'plant-tall'],
    },
    'office': {
        'economical': ['desk-standard', 'chair-office', 'bookcase'],
        'medium':     ['desk-large', 'chair-office', 'bookcase', 'file-cabinet', 'lamp-desk'],
        'premium':    ['desk-l', 'chair-office', 'bookcase-wide', 'file-cabinet-tall',
                       'lamp-desk', 'monitor', 'whiteboard', 'plant-medium'],
    },
    'dining': {
        'economical': ['table-dining-4'] + ['chair-dining'] * 4,
        'medium':     ['table-dining-6'] + ['chair-dining'] * 6 + ['sideboard'],
        'premium':    ['table-dining-8'] + ['chair-dining'] * 8
                      + ['sideboard', 'chandelier', 'rug-large'],
    },
    'laundry': {
        'economical': ['washer', 'laundry-sink'],
        'medium':     ['washer-dryer', 'laundry-sink', 'ironing-board'],
        'premium':    ['washer', 'dryer', 'laundry-sink', 'ironing-board',
                       'drying-rack', 'shelf-wall'],
    },
    'hallway': {
        'economical': [],
        'medium':     ['bench-entry', 'shoe-rack'],
        'premium':    ['bench-entry', 'shoe-rack', 'mirror-floor', 'plant-medium'],
    },
}

FURNITURE_MARGIN = 0.3      # distance kept from every wall
CORNER_INSET = 0.3          # corners sit this much further in than the margin
REPEAT_JITTER = 0.4         # offset per repeat once a strategy wraps around

# zone name -> default facing rotation (radians)
ZONE_ROTATIONS: Dict[str, float] = {
    'topCenter':    0.0,
    'bottomCenter': math.pi,
    'leftCenter':   math.pi / 2,
    'rightCenter':  -math.pi / 2,
    'center':       0.0,
    'topLeft':      0.0,
    'topRight':     0.0,
    'bottomLeft':   math.pi,
    'bottomRight':  math.pi,
}

# Repeats are deliberate: they reflect how many items a room usually gets
ZONE_STRATEGIES: Dict[str, List[str]] = {
    'bedroom':  ['topCenter', 'topLeft', 'topRight', 'rightCenter', 'bottomLeft',
                 'leftCenter', 'bottomCenter', 'center', 'bottomRight', 'topLeft'],
    'kitchen':  ['topCenter', 'topLeft', 'topRight', 'rightCenter', 'leftCenter',
                 'bottomCenter', 'center', 'bottomLeft', 'bottomRight', 'topCenter',
                 'bottomCenter'],
    'bathroom': ['bottomCenter', 'topCenter', 'rightCenter', 'leftCenter', 'topLeft',
                 'topRight', 'center'],
    'living':   ['bottomCenter', 'center', 'topCenter', 'topLeft', 'rightCenter',
                 'leftCenter', 'topRight', 'bottomLeft', 'bottomRight', 'center',
                 'center', 'center'],
    'office':   ['topCenter', 'topLeft', 'rightCenter', 'leftCenter', 'bottomLeft',
                 'center', 'topRight', 'bottomCenter'],
    'dining':   ['center', 'topLeft', 'topRight', 'bottomLeft', 'bottomRight',
                 'topCenter', 'bottomCenter', 'topLeft', 'topRight', 'rightCenter',
                 'leftCenter', 'center'],
    'laundry':  ['topCenter', 'topRight', 'rightCenter', 'leftCenter', 'bottomCenter',
                 'center'],
    'hallway':  ['leftCenter', 'rightCenter', 'topCenter', 'bottomCenter'],
}
DEFAULT_STRATEGY_TYPE = 'living'
