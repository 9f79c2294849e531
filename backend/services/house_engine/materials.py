"""
PBR material presets and the style / room-category lookup.

The presets mirror free PBR libraries (Polyhaven, FreePBR) closely enough
for the viewer to build ``MeshStandardMaterial`` objects from them. The
tables are module-level constants; callers only ever read them.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Material:
    name: str
    color: str
    roughness: float
    metalness: float
    normal_scale: Tuple[float, float]
    description: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "color": self.color,
            "roughness": self.roughness,
            "metalness": self.metalness,
            "normalScale": list(self.normal_scale),
            "description": self.description,
        }


def _preset(name, color, roughness, metalness, normal, description):
    return name, Material(name, color, roughness, metalness, (normal, normal), description)


MATERIAL_PRESETS: Dict[str, Material] = dict([
    # Walls
    _preset('MODERN_CONCRETE', '#E8E8E8', 0.8, 0.0, 1.0, 'Modern concrete wall finish'),
    _preset('TRADITIONAL_BRICK', '#B87333', 0.9, 0.0, 1.5, 'Traditional red brick'),
    _preset('STUCCO_WHITE', '#F5F5DC', 0.85, 0.0, 0.8, 'White stucco exterior'),
    # Roofs
    _preset('CLAY_TILES', '#8B4513', 0.95, 0.0, 2.0, 'Traditional clay roof tiles'),
    _preset('METAL_ROOFING', '#2F4F4F', 0.3, 0.8, 0.5, 'Modern metal roofing'),
    _preset('ASPHALT_SHINGLES', '#36454F', 0.9, 0.1, 1.5, 'Standard asphalt shingles'),
    # Floors
    _preset('HARDWOOD_FLOOR', '#8B4513', 0.7, 0.0, 1.0, 'Natural hardwood flooring'),
    _preset('CERAMIC_TILE', '#F0F8FF', 0.1, 0.0, 0.2, 'Glossy ceramic tile'),
    _preset('CARPET', '#D2B48C', 0.95, 0.0, 0.8, 'Soft carpet texture'),
    # Ground
    _preset('GRASS', '#228B22', 0.95, 0.0, 3.0, 'Natural grass texture'),
    _preset('CONCRETE_PATH', '#C0C0C0', 0.7, 0.0, 1.0, 'Concrete pathway'),
    _preset('GRAVEL', '#A0A0A0', 0.9, 0.0, 2.0, 'Gravel driveway'),
    # Furniture
    _preset('WOOD_FURNITURE', '#8B4513', 0.7, 0.0, 1.0, 'Natural wood furniture'),
    _preset('METAL_APPLIANCE', '#C0C0C0', 0.2, 0.8, 0.1, 'Stainless steel appliance'),
    _preset('FABRIC_SOFT', '#708090', 0.9, 0.0, 0.5, 'Soft fabric upholstery'),
])

# style -> surface -> preset name
STYLE_MATERIALS: Dict[str, Dict[str, str]] = {
    'modern': {
        'walls': 'MODERN_CONCRETE',
        'roof': 'METAL_ROOFING',
        'floor': 'CERAMIC_TILE',
        'furniture': 'METAL_APPLIANCE',
    },
    'traditional': {
        'walls': 'TRADITIONAL_BRICK',
        'roof': 'CLAY_TILES',
        'floor': 'HARDWOOD_FLOOR',
        'furniture': 'WOOD_FURNITURE',
    },
}


def get_material_preset(name: str) -> Material:
    """Look up a preset by name. Raises ``KeyError`` for unknown names."""
    return MATERIAL_PRESETS[name]


def style_preset_names(style: str) -> Dict[str, str]:
    """Surface -> preset name for *style*; anything but ``modern`` is traditional."""
    return STYLE_MATERIALS['modern' if style == 'modern' else 'traditional']


def get_style_materials(style: str) -> Dict[str, Material]:
    return {surface: MATERIAL_PRESETS[name] for surface, name in style_preset_names(style).items()}


def room_preset_names(category: str, style: str) -> Dict[str, str]:
    """Floor and wall preset names for a room of *category* in *style*."""
    modern = style == 'modern'
    styled = style_preset_names(style)

    if category == 'bathroom':
        return {'floor': 'CERAMIC_TILE', 'walls': 'MODERN_CONCRETE' if modern else 'STUCCO_WHITE'}
    if category == 'kitchen':
        return {'floor': 'CERAMIC_TILE', 'walls': styled['walls']}
    if category in ('bedroom', 'living'):
        return {'floor': 'HARDWOOD_FLOOR' if modern else 'CARPET', 'walls': styled['walls']}
    return {'floor': styled['floor'], 'walls': styled['walls']}


def get_room_materials(category: str, style: str) -> Dict[str, Material]:
    return {surface: MATERIAL_PRESETS[name] for surface, name in room_preset_names(category, style).items()}
