"""
Furniture catalog — default CatalogLookup for the layout engine.

Static list of furniture items (dimensions in meters) grouped in
categories. The layout engine only needs ``get_item``; the remaining
helpers back the catalog browsing endpoints.
"""

from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Protocol


@dataclass(frozen=True)
class CatalogItem:
    id: str
    name: str
    category: str
    width: float
    depth: float
    height: float
    color: str

    def to_dict(self) -> dict:
        return asdict(self)


class CatalogLookup(Protocol):
    """Resolves catalog ids to items; unknown ids give ``None``."""

    def get_item(self, catalog_id: str) -> Optional[CatalogItem]:
        ...


CATEGORIES: List[Dict[str, str]] = [
    {'id': 'sofas', 'name': 'Sofas'},
    {'id': 'chairs', 'name': 'Chairs'},
    {'id': 'tables', 'name': 'Tables'},
    {'id': 'beds', 'name': 'Beds'},
    {'id': 'storage', 'name': 'Storage'},
    {'id': 'desks', 'name': 'Desks'},
    {'id': 'kitchen', 'name': 'Kitchen'},
    {'id': 'bathroom', 'name': 'Bathroom'},
    {'id': 'lighting', 'name': 'Lighting'},
    {'id': 'electronics', 'name': 'Electronics'},
    {'id': 'decor', 'name': 'Decor'},
    {'id': 'office', 'name': 'Office'},
    {'id': 'laundry', 'name': 'Laundry'},
    {'id': 'plants', 'name': 'Plants'},
]

# (id, name, category, width, depth, height, color)
_ITEMS = [
    # SOFAS
    ('sofa-2seat', '2-seat sofa', 'sofas', 1.6, 0.85, 0.85, '#8B7355'),
    ('sofa-3seat', '3-seat sofa', 'sofas', 2.2, 0.85, 0.85, '#8B7355'),
    ('sofa-l', 'L-shaped sofa', 'sofas', 2.4, 2.4, 0.85, '#6B5B45'),
    ('sofa-corner', 'Corner sofa', 'sofas', 2.6, 1.6, 0.85, '#7B6B55'),
    ('loveseat', 'Loveseat', 'sofas', 1.4, 0.8, 0.8, '#9B8B75'),
    ('recliner', 'Recliner', 'sofas', 0.85, 0.9, 1.0, '#6B4B35'),
    ('ottoman', 'Ottoman', 'sofas', 0.6, 0.6, 0.45, '#8B7B65'),

    # CHAIRS
    ('chair-dining', 'Dining chair', 'chairs', 0.45, 0.45, 0.9, '#A08060'),
    ('chair-arm', 'Armchair', 'chairs', 0.7, 0.7, 0.9, '#7B6B55'),
    ('chair-office', 'Office chair', 'chairs', 0.6, 0.6, 1.1, '#333333'),
    ('stool-bar', 'Bar stool', 'chairs', 0.4, 0.4, 0.75, '#555555'),
    ('bench-dining', 'Dining bench', 'chairs', 1.2, 0.35, 0.45, '#A08060'),
    ('bench-entry', 'Entry bench', 'chairs', 1.0, 0.4, 0.5, '#7B6B55'),

    # TABLES
    ('table-dining-4', 'Dining table (4)', 'tables', 1.2, 0.8, 0.76, '#A08060'),
    ('table-dining-6', 'Dining table (6)', 'tables', 1.6, 0.9, 0.76, '#A08060'),
    ('table-dining-8', 'Dining table (8)', 'tables', 2.2, 1.0, 0.76, '#8B7050'),
    ('table-round', 'Round table', 'tables', 1.0, 1.0, 0.76, '#A08060'),
    ('table-coffee', 'Coffee table', 'tables', 1.1, 0.6, 0.45, '#5B4B35'),
    ('table-side', 'Side table', 'tables', 0.5, 0.5, 0.55, '#7B6B55'),
    ('table-console', 'Console table', 'tables', 1.2, 0.35, 0.8, '#6B5B45'),
    ('table-bedside', 'Bedside table', 'tables', 0.45, 0.4, 0.55, '#8B7B65'),
    ('table-tv', 'TV stand', 'tables', 1.8, 0.45, 0.5, '#4B3B25'),

    # BEDS
    ('bed-single', 'Single bed', 'beds', 1.0, 2.0, 0.55, '#E8E0D8'),
    ('bed-double', 'Double bed', 'beds', 1.4, 2.0, 0.55, '#E8E0D8'),
    ('bed-queen', 'Queen bed', 'beds', 1.6, 2.0, 0.55, '#D8D0C8'),
    ('bed-king', 'King bed', 'beds', 1.93, 2.03, 0.55, '#D8D0C8'),
    ('bed-bunk', 'Bunk bed', 'beds', 1.0, 2.0, 1.7, '#A08060'),
    ('crib', 'Crib', 'beds', 0.7, 1.3, 0.9, '#F0E8E0'),

    # STORAGE
    ('wardrobe-2d', 'Wardrobe (2 doors)', 'storage', 1.0, 0.6, 2.2, '#8B7050'),
    ('wardrobe-3d', 'Wardrobe (3 doors)', 'storage', 1.5, 0.6, 2.2, '#7B6040'),
    ('wardrobe-sliding', 'Sliding wardrobe', 'storage', 2.0, 0.6, 2.4, '#6B5030'),
    ('bookcase', 'Bookcase', 'storage', 0.8, 0.3, 1.8, '#A08060'),
    ('bookcase-wide', 'Wide bookcase', 'storage', 1.5, 0.35, 1.8, '#8B7050'),
    ('shelf-wall', 'Wall shelf', 'storage', 0.8, 0.25, 0.04, '#A08060'),
    ('chest-drawers', 'Chest of drawers', 'storage', 0.8, 0.45, 0.85, '#8B7B65'),
    ('shoe-rack', 'Shoe rack', 'storage', 0.8, 0.3, 1.0, '#7B6B55'),
    ('cabinet-tall', 'Tall cabinet', 'storage', 0.6, 0.4, 1.8, '#6B5B45'),
    ('sideboard', 'Sideboard', 'storage', 1.4, 0.45, 0.85, '#5B4B35'),

    # DESKS
    ('desk-standard', 'Desk', 'desks', 1.2, 0.6, 0.76, '#8B7050'),
    ('desk-large', 'Large desk', 'desks', 1.6, 0.8, 0.76, '#7B6040'),
    ('desk-l', 'L-shaped desk', 'desks', 1.6, 1.4, 0.76, '#6B5B45'),
    ('desk-standing', 'Standing desk', 'desks', 1.4, 0.7, 1.1, '#555555'),
    ('desk-vanity', 'Vanity desk', 'desks', 1.0, 0.45, 0.76, '#F0E8E0'),

    # KITCHEN
    ('fridge-single', 'Refrigerator', 'kitchen', 0.6, 0.65, 1.7, '#E0E0E0'),
    ('fridge-double', 'Double-door refrigerator', 'kitchen', 0.85, 0.7, 1.8, '#D0D0D0'),
    ('stove-4', '4-burner stove', 'kitchen', 0.55, 0.6, 0.85, '#C0C0C0'),
    ('stove-6', '6-burner stove', 'kitchen', 0.75, 0.6, 0.85, '#B0B0B0'),
    ('oven', 'Built-in oven', 'kitchen', 0.6, 0.55, 0.6, '#333333'),
    ('microwave', 'Microwave', 'kitchen', 0.5, 0.4, 0.3, '#C0C0C0'),
    ('dishwasher', 'Dishwasher', 'kitchen', 0.6, 0.6, 0.85, '#D0D0D0'),
    ('sink-kitchen', 'Kitchen sink', 'kitchen', 0.8, 0.5, 0.85, '#E0E0E0'),
    ('kitchen-island', 'Kitchen island', 'kitchen', 1.5, 0.8, 0.9, '#8B7050'),
    ('pantry-cabinet', 'Pantry cabinet', 'kitchen', 0.6, 0.5, 2.0, '#A08060'),
    ('counter-section', 'Counter section', 'kitchen', 0.6, 0.6, 0.85, '#D0C8B8'),
    ('hood', 'Range hood', 'kitchen', 0.6, 0.5, 0.3, '#999999'),

    # BATHROOM
    ('toilet', 'Toilet', 'bathroom', 0.4, 0.65, 0.4, '#F5F5F5'),
    ('sink-bath', 'Bathroom sink', 'bathroom', 0.55, 0.45, 0.85, '#F0F0F0'),
    ('sink-double', 'Double sink', 'bathroom', 1.2, 0.5, 0.85, '#F0F0F0'),
    ('bathtub', 'Bathtub', 'bathroom', 0.75, 1.7, 0.6, '#F5F5F5'),
    ('shower', 'Shower stall', 'bathroom', 0.9, 0.9, 2.0, '#DDEEFF'),
    ('shower-rect', 'Rectangular shower', 'bathroom', 1.2, 0.8, 2.0, '#DDEEFF'),
    ('bidet', 'Bidet', 'bathroom', 0.38, 0.6, 0.38, '#F5F5F5'),
    ('bath-cabinet', 'Vanity cabinet', 'bathroom', 0.8, 0.4, 0.55, '#8B7050'),
    ('mirror-bath', 'Bathroom mirror', 'bathroom', 0.6, 0.05, 0.8, '#C0D0E0'),
    ('towel-rack', 'Towel rack', 'bathroom', 0.6, 0.1, 0.7, '#999999'),

    # LIGHTING
    ('lamp-floor', 'Floor lamp', 'lighting', 0.3, 0.3, 1.6, '#FFE4B5'),
    ('lamp-table', 'Table lamp', 'lighting', 0.25, 0.25, 0.5, '#FFE4B5'),
    ('lamp-desk', 'Desk lamp', 'lighting', 0.2, 0.2, 0.45, '#888888'),
    ('chandelier', 'Chandelier', 'lighting', 0.6, 0.6, 0.5, '#FFD700'),
    ('pendant', 'Pendant light', 'lighting', 0.35, 0.35, 0.4, '#333333'),

    # ELECTRONICS
    ('tv-50', 'TV 50"', 'electronics', 1.12, 0.07, 0.65, '#222222'),
    ('tv-65', 'TV 65"', 'electronics', 1.45, 0.07, 0.84, '#222222'),
    ('monitor', 'Monitor', 'electronics', 0.6, 0.2, 0.45, '#333333'),
    ('printer', 'Printer', 'electronics', 0.45, 0.35, 0.2, '#444444'),

    # DECOR
    ('rug-small', 'Small rug', 'decor', 1.2, 0.8, 0.02, '#B39978'),
    ('rug-medium', 'Medium rug', 'decor', 2.0, 1.4, 0.02, '#A08060'),
    ('rug-large', 'Large rug', 'decor', 3.0, 2.0, 0.02, '#8B7050'),
    ('mirror-floor', 'Floor mirror', 'decor', 0.5, 0.05, 1.6, '#C0D0E0'),
    ('picture-frame', 'Picture frame', 'decor', 0.6, 0.03, 0.45, '#DAA520'),
    ('curtain', 'Curtain', 'decor', 1.5, 0.1, 2.4, '#D2B48C'),

    # OFFICE
    ('file-cabinet', 'File cabinet', 'office', 0.4, 0.5, 0.7, '#888888'),
    ('file-cabinet-tall', 'Tall file cabinet', 'office', 0.45, 0.6, 1.35, '#888888'),
    ('whiteboard', 'Whiteboard', 'office', 1.2, 0.05, 0.9, '#F5F5F5'),
    ('meeting-table', 'Meeting table', 'office', 2.4, 1.2, 0.76, '#7B6040'),
    ('reception-desk', 'Reception desk', 'office', 1.8, 0.7, 1.1, '#6B5B45'),

    # LAUNDRY
    ('washer', 'Washing machine', 'laundry', 0.6, 0.6, 0.85, '#E0E0E0'),
    ('dryer', 'Dryer', 'laundry', 0.6, 0.6, 0.85, '#D8D8D8'),
    ('washer-dryer', 'Washer-dryer', 'laundry', 0.6, 0.65, 0.85, '#E0E0E0'),
    ('laundry-sink', 'Laundry sink', 'laundry', 0.55, 0.55, 0.85, '#F0F0F0'),
    ('ironing-board', 'Ironing board', 'laundry', 0.35, 1.2, 0.9, '#C0C0C0'),
    ('drying-rack', 'Drying rack', 'laundry', 0.55, 1.3, 1.0, '#AAAAAA'),

    # PLANTS
    ('plant-small', 'Small plant', 'plants', 0.25, 0.25, 0.35, '#228B22'),
    ('plant-medium', 'Medium plant', 'plants', 0.4, 0.4, 0.7, '#228B22'),
    ('plant-tall', 'Tall plant', 'plants', 0.5, 0.5, 1.5, '#006400'),
]


class FurnitureCatalog:
    """In-memory catalog indexed by item id."""

    def __init__(self, items: Optional[List[CatalogItem]] = None):
        if items is None:
            items = [CatalogItem(*row) for row in _ITEMS]
        self._items = list(items)
        self._by_id = {item.id: item for item in self._items}

    def get_item(self, catalog_id: str) -> Optional[CatalogItem]:
        return self._by_id.get(catalog_id)

    def get_all(self) -> List[CatalogItem]:
        return list(self._items)

    def get_categories(self) -> List[Dict[str, str]]:
        return list(CATEGORIES)

    def get_by_category(self, category_id: str) -> List[CatalogItem]:
        return [i for i in self._items if i.category == category_id]

    def search(self, query: str) -> List[CatalogItem]:
        """Case-insensitive match on name, id or category."""
        if not query:
            return self.get_all()
        q = query.lower()
        return [
            i for i in self._items
            if q in i.name.lower() or q in i.id.lower() or q in i.category.lower()
        ]


default_catalog = FurnitureCatalog()
