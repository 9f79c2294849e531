"""Tests for the furniture catalogue and placement."""

import math

import pytest

from services.house_engine import Dimensions, Room, Vec3, add_furniture
from services.house_engine.furnishing import FURNITURE_TEMPLATES
from services.house_constants import FURNITURE_CATEGORIES


def _room(category, width=10.0, length=8.0, room_id=None):
    return Room(
        id=room_id or f"{category}-1",
        name=category.title(),
        category=category,
        position=Vec3(3, 0, 4),
        dimensions=Dimensions(width, length, 3),
    )


class TestAddFurniture:
    def test_living_room_pieces(self):
        (room,) = add_furniture([_room('living')], 'city')
        names = [f.name for f in room.furniture]
        assert names == ['Sofa', 'Coffee Table', 'TV Cabinet', 'Armchair', 'Side Table']

    def test_positions_are_fractions_of_room(self):
        (room,) = add_furniture([_room('living', width=12, length=18)], 'city')
        sofa = room.furniture[0]
        assert sofa.position.to_list() == pytest.approx([2.4, 0, 5.4])

    def test_positions_ignore_room_origin(self):
        (room,) = add_furniture([_room('dining')], 'city')
        table = room.furniture[0]
        assert table.position.to_list() == pytest.approx([5, 0, 4])

    def test_fixed_rotations(self):
        (living,) = add_furniture([_room('living')], 'city')
        (bedroom,) = add_furniture([_room('bedroom')], 'city')
        rotations = {f.name: f.rotation for f in living.furniture + bedroom.furniture}
        assert rotations['Armchair'] == pytest.approx(math.pi / 4)
        assert rotations['Dresser'] == pytest.approx(math.pi / 2)
        assert rotations['Sofa'] == 0

    def test_kitchen_counter_scales_with_room(self):
        (kitchen,) = add_furniture([_room('kitchen', width=8)], 'village')
        counter = kitchen.furniture[0]
        assert counter.name == 'Kitchen Counter'
        assert counter.dimensions.width == pytest.approx(6.4)

    def test_other_pieces_do_not_scale(self):
        small, big = add_furniture([_room('bedroom', 2, 2, 'bedroom-1'), _room('bedroom', 20, 20, 'bedroom-2')], 'city')
        assert small.furniture[0].dimensions == big.furniture[0].dimensions

    @pytest.mark.parametrize("category, count", [
        ('living', 5), ('bedroom', 4), ('kitchen', 5), ('bathroom', 4), ('dining', 2),
    ])
    def test_template_sizes(self, category, count):
        (room,) = add_furniture([_room(category)], 'city')
        assert len(room.furniture) == count

    def test_hallway_gets_nothing(self):
        (room,) = add_furniture([_room('hallway')], 'city')
        assert room.furniture == ()

    def test_unknown_category_gets_nothing(self):
        (room,) = add_furniture([_room('garage')], 'city')
        assert room.furniture == ()

    def test_input_rooms_untouched(self):
        rooms = [_room('living'), _room('kitchen')]
        furnished = add_furniture(rooms, 'city')
        assert all(r.furniture == () and r.materials is None for r in rooms)
        assert furnished[0] is not rooms[0]

    def test_ids_unique_across_rooms(self, city_rooms):
        furnished = add_furniture(city_rooms, 'city')
        ids = [f.id for r in furnished for f in r.furniture]
        assert len(ids) == len(set(ids))
        assert 'bed-bedroom-2' in ids

    def test_categories_in_closed_set(self):
        for template in FURNITURE_TEMPLATES.values():
            for item in template:
                assert item['type'] in FURNITURE_CATEGORIES

    def test_style_selects_furniture_material(self):
        (modern,) = add_furniture([_room('bedroom')], 'city')
        (traditional,) = add_furniture([_room('bedroom')], 'village')
        assert {f.material for f in modern.furniture} == {'METAL_APPLIANCE'}
        assert {f.material for f in traditional.furniture} == {'WOOD_FURNITURE'}

    def test_room_materials_attached(self):
        (bath,) = add_furniture([_room('bathroom')], 'village')
        assert bath.materials == {'floor': 'CERAMIC_TILE', 'walls': 'STUCCO_WHITE'}
