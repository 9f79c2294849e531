"""
Furniture catalogue and placement.

Each room category has a hand-authored template. Item positions are
fractions of the room's own width / length, so furniture does not scale
with the room and can overflow very small rooms. Sizes are in meters.
"""

from dataclasses import replace
from typing import Dict, List

from services.house_constants import EIGHTH_TURN, QUARTER_TURN, STYLE_BY_LOCATION

from .materials import room_preset_names, style_preset_names
from .models import Dimensions, Furniture, Room, Vec3

# 'fx'/'fz' are fractions of room width/length; 'size' is (w, l, h).
# A size width of None means "80% of the room width" (kitchen counter).
FURNITURE_TEMPLATES: Dict[str, List[dict]] = {
    'living': [
        {'key': 'sofa', 'name': 'Sofa', 'type': 'sofa',
         'fx': 0.2, 'fz': 0.3, 'rotation': 0.0, 'size': (2.5, 1.0, 0.8)},
        {'key': 'coffee-table', 'name': 'Coffee Table', 'type': 'table',
         'fx': 0.5, 'fz': 0.5, 'rotation': 0.0, 'size': (1.2, 0.8, 0.5)},
        {'key': 'tv-cabinet', 'name': 'TV Cabinet', 'type': 'cabinet',
         'fx': 0.8, 'fz': 0.2, 'rotation': 0.0, 'size': (2.0, 0.5, 0.6)},
        {'key': 'armchair', 'name': 'Armchair', 'type': 'chair',
         'fx': 0.7, 'fz': 0.7, 'rotation': EIGHTH_TURN, 'size': (0.8, 0.8, 0.9)},
        {'key': 'side-table', 'name': 'Side Table', 'type': 'table',
         'fx': 0.85, 'fz': 0.75, 'rotation': 0.0, 'size': (0.5, 0.5, 0.6)},
    ],
    'bedroom': [
        {'key': 'bed', 'name': 'Bed', 'type': 'bed',
         'fx': 0.3, 'fz': 0.4, 'rotation': 0.0, 'size': (1.6, 2.0, 0.6)},
        {'key': 'wardrobe', 'name': 'Wardrobe', 'type': 'cabinet',
         'fx': 0.1, 'fz': 0.1, 'rotation': 0.0, 'size': (1.5, 0.6, 2.2)},
        {'key': 'nightstand', 'name': 'Nightstand', 'type': 'table',
         'fx': 0.6, 'fz': 0.3, 'rotation': 0.0, 'size': (0.5, 0.4, 0.7)},
        {'key': 'dresser', 'name': 'Dresser', 'type': 'cabinet',
         'fx': 0.8, 'fz': 0.7, 'rotation': QUARTER_TURN, 'size': (1.2, 0.5, 1.0)},
    ],
    'kitchen': [
        {'key': 'counter', 'name': 'Kitchen Counter', 'type': 'cabinet',
         'fx': 0.1, 'fz': 0.2, 'rotation': 0.0, 'size': (None, 0.6, 0.9)},
        {'key': 'stove', 'name': 'Stove', 'type': 'appliance',
         'fx': 0.3, 'fz': 0.25, 'rotation': 0.0, 'size': (0.6, 0.6, 0.9)},
        {'key': 'fridge', 'name': 'Refrigerator', 'type': 'appliance',
         'fx': 0.8, 'fz': 0.1, 'rotation': 0.0, 'size': (0.7, 0.7, 1.8)},
        {'key': 'sink', 'name': 'Kitchen Sink', 'type': 'appliance',
         'fx': 0.5, 'fz': 0.25, 'rotation': 0.0, 'size': (0.8, 0.5, 0.9)},
        {'key': 'island', 'name': 'Kitchen Island', 'type': 'table',
         'fx': 0.5, 'fz': 0.6, 'rotation': 0.0, 'size': (1.5, 1.0, 0.9)},
    ],
    'bathroom': [
        {'key': 'toilet', 'name': 'Toilet', 'type': 'appliance',
         'fx': 0.2, 'fz': 0.2, 'rotation': 0.0, 'size': (0.4, 0.7, 0.8)},
        {'key': 'sink', 'name': 'Bathroom Sink', 'type': 'appliance',
         'fx': 0.7, 'fz': 0.2, 'rotation': 0.0, 'size': (0.6, 0.4, 0.8)},
        {'key': 'shower', 'name': 'Shower', 'type': 'appliance',
         'fx': 0.2, 'fz': 0.7, 'rotation': 0.0, 'size': (0.9, 0.9, 2.0)},
        {'key': 'cabinet', 'name': 'Bathroom Cabinet', 'type': 'cabinet',
         'fx': 0.7, 'fz': 0.7, 'rotation': 0.0, 'size': (0.6, 0.3, 1.8)},
    ],
    'dining': [
        {'key': 'dining-table', 'name': 'Dining Table', 'type': 'table',
         'fx': 0.5, 'fz': 0.5, 'rotation': 0.0, 'size': (1.8, 1.2, 0.75)},
        {'key': 'dining-chairs', 'name': 'Dining Chairs', 'type': 'chair',
         'fx': 0.5, 'fz': 0.3, 'rotation': 0.0, 'size': (0.5, 0.5, 0.9)},
    ],
}

COUNTER_WIDTH_RATIO = 0.8


def _build_item(room: Room, item: dict, material: str) -> Furniture:
    w, l, h = item['size']
    if w is None:
        w = room.dimensions.width * COUNTER_WIDTH_RATIO
    return Furniture(
        id=f"{item['key']}-{room.id}",
        name=item['name'],
        category=item['type'],
        position=Vec3(room.dimensions.width * item['fx'], 0.0, room.dimensions.length * item['fz']),
        rotation=item['rotation'],
        dimensions=Dimensions(w, l, h),
        material=material,
    )


def furnish_room(room: Room, style: str) -> Room:
    """Return a copy of *room* with its category's furniture and materials."""
    material = style_preset_names(style)['furniture']
    template = FURNITURE_TEMPLATES.get(room.category, [])
    furniture = tuple(_build_item(room, item, material) for item in template)
    return replace(room, furniture=furniture, materials=room_preset_names(room.category, style))


def add_furniture(rooms: List[Room], location_type: str) -> List[Room]:
    """
    Attach furniture to every room. Input rooms are left untouched.

    Hallways and unknown categories get no furniture.
    """
    style = STYLE_BY_LOCATION.get(location_type, 'traditional')
    return [furnish_room(room, style) for room in rooms]
