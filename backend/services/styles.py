"""
Style palettes — default StylePalette for the layout engine.

A style id resolves to the wall color and floor finish applied to a
generated plan. Unknown ids resolve to a neutral palette.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Protocol


@dataclass(frozen=True)
class StyleColors:
    wall_color: str
    floor_material: str
    floor_color: str
    palette: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "wallColor": self.wall_color,
            "floorMaterial": self.floor_material,
            "floorColor": self.floor_color,
            "palette": list(self.palette),
        }


class StylePalette(Protocol):
    def resolve(self, style_id: str) -> StyleColors:
        ...


STYLES: Dict[str, Dict] = {
    'modern': {
        'label': 'Modern',
        'palette': ['#2C2C2C', '#FFFFFF', '#00B4D8', '#90E0EF', '#CAF0F8'],
        'wall_color': '#F5F5F5',
        'floor_material': 'porcelain',
        'floor_color': '#e8e4df',
    },
    'classic': {
        'label': 'Classic',
        'palette': ['#5C4033', '#DEB887', '#FFFFF0', '#8B4513', '#FFF8DC'],
        'wall_color': '#FFF8DC',
        'floor_material': 'hardwood',
        'floor_color': '#c4a882',
    },
    'industrial': {
        'label': 'Industrial',
        'palette': ['#36454F', '#808080', '#C0C0C0', '#B87333', '#2F4F4F'],
        'wall_color': '#D3D3D3',
        'floor_material': 'concrete',
        'floor_color': '#b0aba5',
    },
    'minimalist': {
        'label': 'Minimalist',
        'palette': ['#FFFFFF', '#F5F5F5', '#333333', '#E0E0E0', '#BDBDBD'],
        'wall_color': '#FFFFFF',
        'floor_material': 'porcelain',
        'floor_color': '#f0ece8',
    },
}

FALLBACK_STYLE = StyleColors(
    wall_color='#F5F5F0',
    floor_material='hardwood',
    floor_color='#e8dcc8',
    palette=['#F5F5F5', '#E0E0E0', '#333333', '#666666', '#999999'],
)


class StyleCatalog:
    """Resolves the built-in style ids."""

    def resolve(self, style_id: str) -> StyleColors:
        style = STYLES.get(style_id)
        if style is None:
            return FALLBACK_STYLE
        return StyleColors(
            wall_color=style['wall_color'],
            floor_material=style['floor_material'],
            floor_color=style['floor_color'],
            palette=list(style['palette']),
        )

    def list_styles(self) -> List[dict]:
        return [
            {'id': sid, 'label': s['label'], 'palette': list(s['palette'])}
            for sid, s in STYLES.items()
        ]


default_palette = StyleCatalog()
